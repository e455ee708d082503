"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows one tree outward from the source.  Every round scans ALL edges (no
heap) for the cheapest one with exactly one endpoint inside the tree.
Either endpoint may be the inside one: edges are treated as undirected
even on a directed graph.

Yields:
  1. Tree = {source}                                  →  VISIT
  2. Cheapest crossing edge accepted                  →  UPDATE
  3. Candidates for the next round                    →  CHECK
  4. Every node covered                               →  FINALIZE
  5. No crossing edge but nodes remain (disconnected) →  FINALIZE, partial tree
"""

from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph, Edge
from algorithms.step import Step, StepAction, StepBuilder, format_cost


def prim(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """`target` is accepted for a uniform signature and ignored."""

    in_mst:     set             = {source}
    outside:    Dict[str, None] = {nid: None for nid in graph.nodes if nid != source}
    visited:    List[str]       = [source]
    mst_edges:  List[str]       = []

    sb = StepBuilder()
    sb.visited_nodes = visited
    sb.queued_nodes  = outside
    sb.mst_edges     = mst_edges
    sb.mst_cost      = 0

    yield sb.build(
        StepAction.VISIT, current=source,
        explanation=(
            f"🌳 Starting Prim's MST algorithm from node {source}. "
            f"Building minimum spanning tree..."
        ),
    )

    while outside:
        best = _cheapest_crossing(graph, in_mst)

        if best is None:
            yield sb.build(
                StepAction.FINALIZE,
                explanation=(
                    f"⚠️ Graph is disconnected. MST only covers {len(in_mst)} of "
                    f"{graph.node_count()} nodes. Total cost: {format_cost(sb.mst_cost)}"
                ),
            )
            return

        inside, new_node, edge = best
        in_mst.add(new_node)
        del outside[new_node]
        visited.append(new_node)
        mst_edges.append(edge.id)
        sb.mst_cost += edge.weight

        yield sb.build(
            StepAction.UPDATE, current=new_node, active_edges=[edge.id],
            explanation=(
                f"Added edge {inside} → {new_node} (weight {format_cost(edge.weight)}) to MST. "
                f"Total cost: {format_cost(sb.mst_cost)}"
            ),
        )

        if not outside:
            break

        candidates = [e.id for e in graph.edges.values() if _crosses(e, in_mst)]
        yield sb.build(
            StepAction.CHECK, current=new_node, active_edges=candidates,
            explanation=f"Checking {len(candidates)} candidate edge(s) connecting MST to remaining nodes...",
        )

    yield sb.build(
        StepAction.FINALIZE,
        explanation=(
            f"✅ Minimum Spanning Tree complete! Total cost: {format_cost(sb.mst_cost)}. "
            f"Edges: {len(mst_edges)}"
        ),
    )


# ---------------------------------------------------------------------------
def _crosses(edge: Edge, in_mst: set) -> bool:
    return (edge.source in in_mst) != (edge.target in in_mst)


def _cheapest_crossing(graph: Graph, in_mst: set) -> Optional[Tuple[str, str, Edge]]:
    """(inside_node, outside_node, edge) for the first strictly-cheapest crossing edge."""
    best: Optional[Tuple[str, str, Edge]] = None
    for edge in graph.edges.values():
        if not _crosses(edge, in_mst):
            continue
        if best is None or edge.weight < best[2].weight:
            if edge.source in in_mst:
                best = (edge.source, edge.target, edge)
            else:
                best = (edge.target, edge.source, edge)
    return best
