"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
The only single-source shortest-path algorithm here that handles NEGATIVE
edge weights (but not negative cycles).

Structure:
  • Up to V-1 passes relaxing every edge in edge-list order.  Undirected
    edges are relaxed both ways inside the same pass.
  • A pass with no update means the distances converged → stop early.
  • One extra "detector" pass flags a negative cycle if anything can
    still relax.

Yields a Step for:
  1. Initialisation                          →  VISIT
  2. Start of each pass                      →  CHECK
  3. Each successful relaxation              →  UPDATE
  4. Early convergence                       →  CHECK
  5. Start of the detector pass              →  CHECK
  6. Negative cycle / path / unreachable     →  FINALIZE

`visited_nodes` lists the nodes reached so far (finite distance) in order
of first discovery.
"""

from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph, Edge
from algorithms.step import INF, Step, StepAction, StepBuilder, format_cost
from algorithms.paths import reconstruct_path


def bellman_ford(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    V = graph.node_count()

    dist:     Dict[str, float]         = {nid: INF for nid in graph.nodes}
    previous: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    reached:  List[str]                = []
    dist[source] = 0

    # (u, v, weight, edge); reverse direction included for undirected graphs
    arcs: List[Tuple[str, str, float, Edge]] = []
    for edge in graph.edges.values():
        arcs.append((edge.source, edge.target, edge.weight, edge))
        if not graph.directed:
            arcs.append((edge.target, edge.source, edge.weight, edge))

    sb = StepBuilder()
    sb.visited_nodes = reached
    sb.distances     = dist
    sb.previous      = previous

    # -- init step --
    yield sb.build(
        StepAction.VISIT, current=source, queued=graph.node_ids(),
        explanation=(
            f"Starting Bellman-Ford from {source}. "
            f"Will relax all edges up to {max(V - 1, 0)} time(s)."
        ),
    )
    reached.append(source)

    # ==============================================================
    # MAIN PASSES
    # ==============================================================
    for pass_idx in range(1, V):
        updated = False

        yield sb.build(
            StepAction.CHECK,
            explanation=f"Iteration {pass_idx}/{V - 1}: Relaxing all edges...",
        )

        for u, v, w, edge in arcs:
            if dist[u] == INF or not dist[u] + w < dist[v]:
                continue
            dist[v]     = dist[u] + w
            previous[v] = u
            updated     = True
            if v not in reached:
                reached.append(v)
            yield sb.build(
                StepAction.UPDATE, current=v, active_edges=[edge.id],
                explanation=(
                    f"Relaxed edge {u} → {v} (weight {format_cost(w)}). "
                    f"Distance to {v} updated to {format_cost(dist[v])}"
                ),
            )

        if not updated:
            yield sb.build(
                StepAction.CHECK,
                explanation=f"No updates in iteration {pass_idx}. Algorithm converged early!",
            )
            break

    # ==============================================================
    # NEGATIVE-CYCLE DETECTOR
    # ==============================================================
    yield sb.build(StepAction.CHECK, explanation="Checking for negative-weight cycles...")

    for u, v, w, edge in arcs:
        if dist[u] != INF and dist[u] + w < dist[v]:
            yield sb.build(
                StepAction.FINALIZE, active_edges=[edge.id], negative_cycle=True,
                explanation=(
                    f"⚠️ Negative-weight cycle detected! Edge {u} → {v} can still be relaxed "
                    f"({format_cost(dist[u])} + {format_cost(w)} < {format_cost(dist[v])}). "
                    f"Shortest paths are undefined."
                ),
            )
            return

    # ==============================================================
    # PATH RECONSTRUCTION
    # ==============================================================
    if target is not None and dist[target] != INF:
        path = reconstruct_path(previous, target)
        yield sb.build(
            StepAction.FINALIZE, current=target, path=path, negative_cycle=False,
            explanation=(
                f"✅ Shortest path found! Total cost: {format_cost(dist[target])}. "
                f"Path: {' → '.join(path)}"
            ),
        )
    elif target is not None:
        yield sb.build(
            StepAction.FINALIZE, negative_cycle=False,
            explanation=f"❌ No negative cycle, but no path exists from {source} to {target}.",
        )
    else:
        yield sb.build(
            StepAction.FINALIZE, negative_cycle=False,
            explanation=f"✅ Algorithm complete. Shortest distances from {source} calculated.",
        )
