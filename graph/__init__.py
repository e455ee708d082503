"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import GraphError, DuplicateIdError, NotFoundError, SnapshotError
"""

from graph.node   import Node
from graph.edge   import Edge
from graph.graph  import Graph
from graph.errors import GraphError, DuplicateIdError, NotFoundError, SnapshotError

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphError",       "DuplicateIdError",
    "NotFoundError",    "SnapshotError",
]
