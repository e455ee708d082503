"""
errors.py — Graph Error Hierarchy
==================================
Raised only for direct API misuse (programmer errors).  Best-effort user
actions such as inserting an edge whose endpoint vanished are absorbed by
the Graph instead of raising.
"""


class GraphError(Exception):
    """Base for all graph-model errors."""


class DuplicateIdError(GraphError):
    """A node with this id already exists."""


class NotFoundError(GraphError):
    """Node or edge id is not present in the graph."""


class SnapshotError(GraphError):
    """Attempted to mutate a read-only graph snapshot."""
