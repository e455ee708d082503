"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Push source onto stack            →  ENQUEUE
  2. Pop an unvisited node             →  VISIT
  3. Push an unseen neighbour          →  ENQUEUE (edge active)
  4. Target popped                     →  FINALIZE with path
  5. Stack empty                       →  FINALIZE (no path / explored N)

Neighbours are pushed in REVERSE edge order so they pop in edge order,
giving the familiar left-to-right walk.  A neighbour already visited or
already on the stack is not pushed again; its parent is fixed at push
time.  `distances` carries the depth in the DFS tree.
"""

from typing import Dict, Generator, List, Optional

from graph import Graph
from algorithms.step import INF, Step, StepAction, StepBuilder
from algorithms.paths import reconstruct_path


def dfs(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    stack:    List[str]                = [source]
    visited:  List[str]                = []
    seen:     set                      = set()
    previous: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    depth:    Dict[str, float]         = {nid: INF for nid in graph.nodes}
    depth[source] = 0

    sb = StepBuilder()
    sb.visited_nodes = visited
    sb.queued_nodes  = stack
    sb.distances     = depth
    sb.previous      = previous

    # --- init step ---
    yield sb.build(
        StepAction.ENQUEUE, current=source,
        explanation=f"Starting DFS from node {source}. Added to stack.",
    )

    # --- main loop ---
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        visited.append(node)

        yield sb.build(
            StepAction.VISIT, current=node,
            explanation=f"Visiting node {node}. Depth: {depth[node]}",
        )

        if target is not None and node == target:
            path = reconstruct_path(previous, target)
            yield sb.build(
                StepAction.FINALIZE, current=target, queued=(), path=path,
                explanation=(
                    f"🎯 Found path to {target}! Path: {' → '.join(path)} "
                    f"({len(path) - 1} edge(s))"
                ),
            )
            return

        for nbr, edge in reversed(graph.neighbours(node)):
            if nbr in seen or nbr in stack:
                continue
            stack.append(nbr)
            previous[nbr] = node
            depth[nbr]    = depth[node] + 1
            yield sb.build(
                StepAction.ENQUEUE, current=node, active_edges=[edge.id],
                explanation=f"Pushed {nbr} onto stack via edge {node} → {nbr}",
            )

    # --- not found ---
    if target is not None:
        explanation = f"❌ Stack is empty. No path exists from {source} to {target}."
    else:
        explanation = f"✅ DFS complete! Explored {len(visited)} node(s) from {source}."
    yield sb.build(StepAction.FINALIZE, queued=(), explanation=explanation)
