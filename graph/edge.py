"""
edge.py — Graph Edge
====================
Connects two nodes and carries a weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Weight defaults to 1 for unweighted graphs; algorithms that ignore
    weights simply never read it.
  - Direction lives on the Graph only.  There is no per-edge `directed`
    override; a serialised edge that still carries one has it ignored.
"""

from dataclasses import dataclass, field
from typing import Optional

from graph.node import _short_id


@dataclass(frozen=True)
class Edge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Numeric cost (default 1).  Can be negative for Bellman-Ford demos.
        id     : Unique identifier.
    """

    source: str
    target: str
    weight: float = 1.0
    id:     str   = field(default_factory=_short_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other.  None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        kwargs = {
            "source": str(data["source"]),
            "target": str(data["target"]),
            "weight": float(data.get("weight", 1.0)),
        }
        if data.get("id") is not None:
            kwargs["id"] = str(data["id"])
        return cls(**kwargs)

    def __repr__(self) -> str:
        return f"Edge({self.id}: {self.source} — {self.target}, w={self.weight})"
