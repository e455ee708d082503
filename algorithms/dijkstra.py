"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra with a linear-scan minimum over the unvisited set
(O(V²), no heap).  Ties go to the node inserted first into the graph.

Yields a Step at:
  1. Initialise distances                         →  VISIT (source)
  2. Select the minimum-distance unvisited node   →  VISIT
  3. Each edge to a still-unvisited neighbour     →  CHECK
  4. Strictly better tentative distance           →  UPDATE
  5. Target selected                              →  FINALIZE with path
  6. Nothing left / rest unreachable              →  FINALIZE

Correctness note: Dijkstra requires non-negative weights.  The engine
does not enforce it.
"""

from typing import Dict, Generator, List, Optional

from graph import Graph
from algorithms.step import INF, Step, StepAction, StepBuilder, format_cost
from algorithms.paths import reconstruct_path


def dijkstra(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    dist:      Dict[str, float]         = {nid: INF for nid in graph.nodes}
    previous:  Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    unvisited: Dict[str, None]          = dict.fromkeys(graph.nodes)   # ordered set
    visited:   List[str]                = []
    dist[source] = 0

    sb = StepBuilder()
    sb.visited_nodes = visited
    sb.queued_nodes  = unvisited
    sb.distances     = dist
    sb.previous      = previous

    # --- init step ---
    yield sb.build(
        StepAction.VISIT, current=source,
        explanation=(
            f"Starting Dijkstra's algorithm from node {source}. "
            f"Set distance to 0, all others to ∞."
        ),
    )

    # --- main loop ---
    while unvisited:
        current = _closest(unvisited, dist)
        if current is None:
            break

        del unvisited[current]
        visited.append(current)

        yield sb.build(
            StepAction.VISIT, current=current,
            explanation=(
                f"Visiting node {current} with distance {format_cost(dist[current])}. "
                f"This is the unvisited node with minimum distance."
            ),
        )

        # -- target check --
        if target is not None and current == target:
            path = reconstruct_path(previous, target)
            yield sb.build(
                StepAction.FINALIZE, current=target, queued=(), path=path,
                explanation=(
                    f"🎯 Found shortest path to {target}! Cost: {format_cost(dist[target])}, "
                    f"Path: {' → '.join(path)}"
                ),
            )
            return

        # -- relax neighbours --
        for nbr, edge in graph.neighbours(current):
            if nbr not in unvisited:
                continue

            alt = dist[current] + edge.weight
            yield sb.build(
                StepAction.CHECK, current=current, active_edges=[edge.id],
                explanation=(
                    f"Checking edge {current} → {nbr} (weight: {format_cost(edge.weight)}). "
                    f"New distance: {format_cost(alt)} vs current: {format_cost(dist[nbr])}"
                ),
            )

            if alt < dist[nbr]:
                dist[nbr]     = alt
                previous[nbr] = current
                yield sb.build(
                    StepAction.UPDATE, current=current, active_edges=[edge.id],
                    explanation=(
                        f"✓ Better path found! Updated distance to {nbr}: "
                        f"{format_cost(alt)} (via {current})"
                    ),
                )

    # --- finished without selecting the target ---
    if target is not None:
        explanation = f"❌ No path exists from {source} to {target}."
    elif unvisited:
        explanation = (
            f"✅ Algorithm complete! {len(unvisited)} node(s) are unreachable from {source}; "
            f"all other shortest paths have been computed."
        )
    else:
        explanation = f"✅ Algorithm complete! All shortest paths from {source} have been computed."
    yield sb.build(StepAction.FINALIZE, queued=(), explanation=explanation)


# ---------------------------------------------------------------------------
def _closest(unvisited: Dict[str, None], dist: Dict[str, float]) -> Optional[str]:
    """First unvisited node with the strictly smallest finite distance."""
    best: Optional[str] = None
    best_dist = INF
    for nid in unvisited:
        if dist[nid] < best_dist:
            best_dist = dist[nid]
            best      = nid
    return best
