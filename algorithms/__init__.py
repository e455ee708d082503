"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, tags, requires_end_node, …),
        …
    }

Every `fn` is a generator with the same signature,
`fn(graph, source, target) -> Iterator[Step]`, so the dispatcher never
needs to know which family it is driving.  Adding an algorithm is: write
the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bfs          import bfs          as _bfs
from algorithms.dfs          import dfs          as _dfs
from algorithms.dijkstra     import dijkstra     as _dijkstra
from algorithms.astar        import astar        as _astar
from algorithms.bellman_ford import bellman_ford as _bf
from algorithms.prim         import prim         as _prim
from algorithms.kruskal      import kruskal      as _kruskal
from algorithms.step         import Step, StepAction, StepBuilder, format_cost


class UnsupportedAlgorithmError(ValueError):
    """The requested algorithm id is not registered."""


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    tags:              List[str] = field(default_factory=list)   # e.g. ["unweighted", "traversal"]
    requires_end_node: bool     = False       # meaningless without a goal?
    supports_negative: bool     = False       # can handle negative edges?
    complexity:        str      = ""          # as implemented (linear-scan selection)
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":               self.key,
            "label":             self.label,
            "tags":              list(self.tags),
            "requires_end_node": self.requires_end_node,
            "supports_negative": self.supports_negative,
            "complexity":        self.complexity,
            "description":       self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search (BFS)", fn=_bfs,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity="O(V + E)",
        description="Explores the graph level by level, finding the shortest path in unweighted graphs.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search (DFS)", fn=_dfs,
        tags=["unweighted", "traversal"],
        complexity="O(V + E)",
        description="Goes as deep as possible along each branch before backtracking. No shortest-path guarantee.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra,
        tags=["weighted", "shortest-path"],
        requires_end_node=True,
        complexity="O(V²)",
        description="Greedily settles the closest node. Optimal for non-negative weights.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar,
        tags=["weighted", "shortest-path", "heuristic"],
        requires_end_node=True,
        complexity="O(V²)",
        description="Dijkstra guided by straight-line distance to the goal.",
    ),

    "bellman-ford": AlgoInfo(
        key="bellman-ford", label="Bellman–Ford", fn=_bf,
        tags=["weighted", "shortest-path", "negative-edges"],
        supports_negative=True,
        complexity="O(V · E)",
        description="Handles negative edges and detects negative cycles. Slower than Dijkstra.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", fn=_prim,
        tags=["weighted", "mst"],
        complexity="O(V · E)",
        description="Grows a minimum spanning tree outward from the start node.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", fn=_kruskal,
        tags=["weighted", "mst", "union-find"],
        complexity="O(E log E)",
        description="Adds edges cheapest-first unless they would form a cycle.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "UnsupportedAlgorithmError",
    "get_algorithm",
    "list_algorithms",
    "Step",
    "StepAction",
    "StepBuilder",
    "format_cost",
]
