"""Predecessor-chain helpers shared by the path-finding algorithms."""

from typing import Dict, List, Optional

from graph import Graph


def reconstruct_path(previous: Dict[str, Optional[str]], target: str) -> List[str]:
    """Walk `previous` back from target.  Stops if the chain ever loops."""
    path: List[str] = []
    seen = set()
    cur: Optional[str] = target
    while cur is not None and cur not in seen:
        seen.add(cur)
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path


def path_weight(graph: Graph, path: List[str]) -> float:
    """Sum of edge weights along path; each hop uses the first connecting edge."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        edge = graph.edge_between(a, b)
        if edge is not None:
            total += edge.weight
    return total
