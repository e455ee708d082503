"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Seed the queue with the source         →  ENQUEUE
  2. Dequeue an unvisited node              →  VISIT
  3. Discover an unseen neighbour           →  ENQUEUE (edge active)
  4. Target dequeued                        →  FINALIZE with the hop-count path
  5. Queue exhausted                        →  FINALIZE (no path / explored N)

Neighbours are examined in edge insertion order.  A neighbour that is
already visited or already waiting in the queue is skipped, so the queue
never holds duplicates.  `distances` carries the hop count.
"""

from collections import deque
from typing import Dict, Generator, List, Optional

from graph import Graph
from algorithms.step import INF, Step, StepAction, StepBuilder
from algorithms.paths import reconstruct_path


def bfs(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """
    Args:
        graph  : The graph to search (read-only snapshot).
        source : Starting node id.
        target : Goal node id, or None to explore everything reachable.

    Yields:
        Step – one per event (enqueue, visit, path-found / exhausted).
    """

    queue:    deque                    = deque([source])
    visited:  List[str]                = []
    seen:     set                      = set()
    previous: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    dist:     Dict[str, float]         = {nid: INF for nid in graph.nodes}
    dist[source] = 0

    sb = StepBuilder()
    sb.visited_nodes = visited
    sb.queued_nodes  = queue
    sb.distances     = dist
    sb.previous      = previous

    # --- initialisation step ---
    yield sb.build(
        StepAction.ENQUEUE, current=source,
        explanation=f"Starting BFS from node {source}. Added to queue.",
    )

    # --- main loop ---
    while queue:
        node = queue.popleft()
        if node in seen:
            continue
        seen.add(node)
        visited.append(node)

        yield sb.build(
            StepAction.VISIT, current=node,
            explanation=f"Visiting node {node}. Distance from start: {dist[node]}",
        )

        # -- target check --
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

        # -- explore neighbours --
        for nbr, edge in graph.neighbours(node):
            if nbr in seen or nbr in queue:
                continue
            queue.append(nbr)
            previous[nbr] = node
            dist[nbr]     = dist[node] + 1
            yield sb.build(
                StepAction.ENQUEUE, current=node, active_edges=[edge.id],
                explanation=f"Added {nbr} to queue via edge {node} → {nbr}",
            )

    # --- exhausted without finding target ---
    if target is not None:
        explanation = f"❌ Queue is empty. No path exists from {source} to {target}."
    else:
        explanation = f"✅ BFS complete! Explored {len(visited)} node(s) from {source}."
    yield sb.build(StepAction.FINALIZE, queued=(), explanation=explanation)
