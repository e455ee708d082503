"""
astar.py — A* Search
=====================
Generator-based A* guided by the straight-line (Euclidean) distance from
each node's coordinates to the goal's.

The heuristic is admissible only when every edge weight is at least the
straight-line distance between its endpoints.  That is the caller's
responsibility; the engine does not check it.

Selection is a linear scan of the open set for the minimum f = g + h
(first inserted wins ties).  A node leaving the open set is closed for
good: closed neighbours are never re-opened, which assumes a consistent
heuristic.

Yields:
  1. No goal given                         →  single FINALIZE, halt
  2. Initialisation                        →  VISIT (source)
  3. Node selected from the open set       →  VISIT
  4. Each neighbour not yet closed         →  CHECK
  5. Strictly better g                     →  UPDATE (node enters / stays open)
  6. Goal selected / open set empty        →  FINALIZE
"""

from typing import Dict, Generator, List, Optional

from graph import Graph
from algorithms.step import INF, Step, StepAction, StepBuilder, format_cost
from algorithms.paths import reconstruct_path


def astar(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """
    Args:
        graph  : The graph (read-only snapshot).
        source : Start node id.
        target : Goal node id.  Required: A* has nothing to aim at without it.
    """

    sb = StepBuilder()

    if target is None:
        yield sb.build(
            StepAction.FINALIZE,
            explanation="A* requires both start and end nodes. Please select an end node.",
        )
        return

    goal = graph.get_node(target)

    def h(nid: str) -> float:
        return graph.get_node(nid).distance_to(goal)

    g_score:  Dict[str, float]         = {nid: INF for nid in graph.nodes}
    f_score:  Dict[str, float]         = {nid: INF for nid in graph.nodes}
    previous: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    open_set: Dict[str, None]          = {source: None}    # ordered set
    closed:   set                      = set()
    visited:  List[str]                = []
    g_score[source] = 0
    f_score[source] = h(source)

    sb.visited_nodes = visited
    sb.queued_nodes  = open_set
    sb.distances     = g_score
    sb.previous      = previous
    sb.f_scores      = f_score

    # --- init step ---
    yield sb.build(
        StepAction.VISIT, current=source,
        explanation=(
            f"Starting A* from {source} to {target}. Using Euclidean distance as heuristic: "
            f"h({source}) = {format_cost(f_score[source])}."
        ),
    )

    # --- main loop ---
    while open_set:
        current = _lowest_f(open_set, f_score)
        if current is None:
            break

        del open_set[current]
        closed.add(current)
        visited.append(current)

        yield sb.build(
            StepAction.VISIT, current=current,
            explanation=(
                f"Visiting node {current}. f({current}) = g({format_cost(g_score[current])}) "
                f"+ h({format_cost(f_score[current] - g_score[current])}) "
                f"= {format_cost(f_score[current])}"
            ),
        )

        # -- goal check --
        if current == target:
            path = reconstruct_path(previous, target)
            yield sb.build(
                StepAction.FINALIZE, current=target, queued=(), path=path,
                explanation=(
                    f"🎯 Found shortest path! Total cost: {format_cost(g_score[target])}. "
                    f"Path: {' → '.join(path)}"
                ),
            )
            return

        # -- relax neighbours --
        for nbr, edge in graph.neighbours(current):
            if nbr in closed:
                continue

            tentative = g_score[current] + edge.weight
            yield sb.build(
                StepAction.CHECK, current=current, active_edges=[edge.id],
                explanation=(
                    f"Checking edge {current} → {nbr} (weight: {format_cost(edge.weight)}). "
                    f"Tentative g: {format_cost(tentative)} vs current: {format_cost(g_score[nbr])}"
                ),
            )

            if tentative < g_score[nbr]:
                previous[nbr] = current
                g_score[nbr]  = tentative
                h_nbr         = h(nbr)
                f_score[nbr]  = tentative + h_nbr
                open_set[nbr] = None
                yield sb.build(
                    StepAction.UPDATE, current=current, active_edges=[edge.id],
                    explanation=(
                        f"Updated {nbr}: g={format_cost(tentative)}, h={format_cost(h_nbr)}, "
                        f"f={format_cost(f_score[nbr])}"
                    ),
                )

    # --- not found ---
    yield sb.build(
        StepAction.FINALIZE, queued=(),
        explanation=f"❌ Open set empty. No path found from {source} to {target}.",
    )


# ---------------------------------------------------------------------------
def _lowest_f(open_set: Dict[str, None], f_score: Dict[str, float]) -> Optional[str]:
    best: Optional[str] = None
    best_f = INF
    for nid in open_set:
        if f_score[nid] < best_f:
            best_f = f_score[nid]
            best   = nid
    return best
