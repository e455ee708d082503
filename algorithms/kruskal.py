"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Sorts every edge once by weight (stable: ties keep edge-list order), then
accepts edges cheapest-first unless they would close a cycle, which the
union-find detects.  Edges are treated as undirected.

Yields:
  1. Edges sorted                           →  VISIT
  2. Each edge considered                   →  CHECK
  3. Edge joins two components              →  UPDATE
  4. Edge would form a cycle                →  CHECK (skip)
  5. |V|-1 edges accepted / edges exhausted →  FINALIZE

Starts from the whole edge list, so the `source` argument only exists for
a uniform signature.
"""

from typing import Generator, List, Optional

from graph import Graph
from algorithms.step import Step, StepAction, StepBuilder, format_cost
from algorithms.union_find import UnionFind


def kruskal(
    graph: Graph,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    node_ids  = graph.node_ids()
    uf        = UnionFind(node_ids)
    ordered   = sorted(graph.edges.values(), key=lambda e: e.weight)
    needed    = max(len(node_ids) - 1, 0)
    mst_edges: List[str] = []
    visited:   List[str] = []

    sb = StepBuilder()
    sb.visited_nodes = visited
    sb.mst_edges     = mst_edges
    sb.mst_cost      = 0

    yield sb.build(
        StepAction.VISIT, queued=node_ids,
        explanation=f"🌳 Starting Kruskal's MST algorithm. Sorted {len(ordered)} edge(s) by weight.",
    )

    for edge in ordered:
        if len(mst_edges) >= needed:
            break

        yield sb.build(
            StepAction.CHECK, current=edge.source, active_edges=[edge.id],
            explanation=(
                f"🔍 Checking edge {edge.source} — {edge.target} (weight {format_cost(edge.weight)}). "
                f"Does it create a cycle?"
            ),
        )

        if uf.union(edge.source, edge.target):
            mst_edges.append(edge.id)
            for nid in (edge.source, edge.target):
                if nid not in visited:
                    visited.append(nid)
            sb.mst_cost += edge.weight
            yield sb.build(
                StepAction.UPDATE, current=edge.target, active_edges=[edge.id],
                explanation=(
                    f"✅ Added edge {edge.source} — {edge.target} (weight {format_cost(edge.weight)}) "
                    f"to MST. Total cost: {format_cost(sb.mst_cost)}. Edges: {len(mst_edges)}/{needed}"
                ),
            )
        else:
            yield sb.build(
                StepAction.CHECK,
                explanation=f"❌ Skipped edge {edge.source} — {edge.target}: it would create a cycle.",
            )

    if len(mst_edges) == needed:
        explanation = (
            f"✅ Minimum Spanning Tree complete! Total cost: {format_cost(sb.mst_cost)}. "
            f"Edges: {len(mst_edges)}"
        )
    else:
        explanation = (
            f"⚠️ Graph is disconnected. Spanning forest has {len(node_ids) - len(mst_edges)} "
            f"components. Total cost: {format_cost(sb.mst_cost)}"
        )
    yield sb.build(StepAction.FINALIZE, explanation=explanation)
