from dataclasses import dataclass, field
from typing import Optional
import math
import uuid


def _short_id() -> str:
    return str(uuid.uuid4())[:8]


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Node:
    """
    Immutable graph vertex.  Position changes go through
    Graph.update_node(), which swaps in a new Node value.

    Attributes:
        id    : Unique, stable identifier (short uuid by default, or user-supplied).
        label : Human-readable name (defaults to the id).
        x, y  : Canvas coordinates.  Only A* reads them, as heuristic input.
    """

    id:    str           = field(default_factory=_short_id)
    label: Optional[str] = None
    x:     float         = 0.0
    y:     float         = 0.0

    def __post_init__(self):
        if not self.label:
            object.__setattr__(self, "label", self.id)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def distance_to(self, other: "Node") -> float:
        """Euclidean distance, the A* heuristic."""
        return math.hypot(self.x - other.x, self.y - other.y)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "label": self.label,
            "x":     self.x,
            "y":     self.y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        kwargs = {
            "label": data.get("label"),
            "x":     float(data.get("x", 0.0)),
            "y":     float(data.get("y", 0.0)),
        }
        if data.get("id") is not None:
            kwargs["id"] = str(data["id"])
        return cls(**kwargs)

    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.2f},{self.y:.2f}))"
