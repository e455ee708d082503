"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of the algorithm's real internal
state, under one contract shared by every algorithm:

    • which node is being processed, which nodes are done, which are queued
    • which edges are being examined right now
    • best-known distances / predecessors  (path-finding algorithms)
    • f-scores                              (A* only)
    • accepted spanning-tree edges + cost   (Prim / Kruskal only)
    • a plain-English explanation of *why* this step happened

Design decisions:
  - Step is a frozen dataclass with a fixed core plus optional,
    family-specific fields left as None when an algorithm doesn't use them.
    Playback code stays algorithm-agnostic at the cost of sparse fields.
  - Sequences are tuples and maps are read-only proxies over private
    copies, so a Step can't be changed after it is built.
  - The algorithm generator is the only writer; everyone else reads.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
import math

INF = float("inf")


class StepAction(Enum):
    VISIT    = "visit"
    CHECK    = "check"
    UPDATE   = "update"
    FINALIZE = "finalize"
    ENQUEUE  = "enqueue"
    DEQUEUE  = "dequeue"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number    : 0-based index of this step in the run.
        action         : What kind of event this step records.
        current_node   : ID of the node being processed (or None).
        visited_nodes  : Nodes fully processed so far, in processing order.
        queued_nodes   : Nodes currently in the frontier / queue / stack.
        active_edges   : Edge ids being examined in this step.
        explanation    : Human-readable "why" text.
        distances      : {node_id: best-known cost}, ∞ for undiscovered.
        previous       : {node_id: predecessor on best-known path, or None}.
        path_so_far    : Reconstructed start → end path, once found.
        f_scores       : {node_id: g + h}  (A*).
        mst_edges      : Edge ids accepted into the spanning tree so far.
        mst_cost       : Total weight of mst_edges.
        negative_cycle : True on Bellman-Ford's cycle-detected final step.
    """

    step_number:    int
    action:         StepAction
    current_node:   Optional[str]                          = None
    visited_nodes:  Tuple[str, ...]                        = ()
    queued_nodes:   Tuple[str, ...]                        = ()
    active_edges:   Tuple[str, ...]                        = ()
    explanation:    str                                    = ""
    distances:      Optional[Mapping[str, float]]          = None
    previous:       Optional[Mapping[str, Optional[str]]]  = None
    path_so_far:    Optional[Tuple[str, ...]]              = None
    f_scores:       Optional[Mapping[str, float]]          = None
    mst_edges:      Optional[Tuple[str, ...]]              = None
    mst_cost:       Optional[float]                        = None
    negative_cycle: Optional[bool]                         = None

    @property
    def is_final(self) -> bool:
        return self.action is StepAction.FINALIZE

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict.  ∞ becomes None; unpopulated optional fields are omitted."""
        data: Dict[str, Any] = {
            "step_number":   self.step_number,
            "action":        self.action.value,
            "current_node":  self.current_node,
            "visited_nodes": list(self.visited_nodes),
            "queued_nodes":  list(self.queued_nodes),
            "active_edges":  list(self.active_edges),
            "explanation":   self.explanation,
        }
        if self.distances is not None:
            data["distances"] = {n: _finite_or_none(d) for n, d in self.distances.items()}
        if self.previous is not None:
            data["previous"] = dict(self.previous)
        if self.path_so_far is not None:
            data["path_so_far"] = list(self.path_so_far)
        if self.f_scores is not None:
            data["f_scores"] = {n: _finite_or_none(f) for n, f in self.f_scores.items()}
        if self.mst_edges is not None:
            data["mst_edges"] = list(self.mst_edges)
        if self.mst_cost is not None:
            data["mst_cost"] = self.mst_cost
        if self.negative_cycle is not None:
            data["negative_cycle"] = self.negative_cycle
        return data


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Scratch-pad that algorithms use to construct Steps cleanly.

    The algorithm binds its LIVE working structures once (visited list,
    queue, distance dict, …); every build() freezes a copy of whatever they
    hold at that moment and hands out the next step number.

    Usage inside an algorithm generator:
        sb = StepBuilder()
        sb.visited_nodes = visited
        sb.queued_nodes  = queue
        sb.distances     = dist
        yield sb.build(StepAction.VISIT, current="A", explanation="…")
    """

    def __init__(self):
        self.step_number:   int                                = 0
        self.visited_nodes: Iterable[str]                      = ()
        self.queued_nodes:  Iterable[str]                      = ()
        self.distances:     Optional[Dict[str, float]]         = None
        self.previous:      Optional[Dict[str, Optional[str]]] = None
        self.f_scores:      Optional[Dict[str, float]]         = None
        self.mst_edges:     Optional[Iterable[str]]            = None
        self.mst_cost:      Optional[float]                    = None

    def build(
        self,
        action: StepAction,
        current: Optional[str] = None,
        active_edges: Iterable[str] = (),
        explanation: str = "",
        path: Optional[Iterable[str]] = None,
        queued: Optional[Iterable[str]] = None,
        negative_cycle: Optional[bool] = None,
    ) -> Step:
        step = Step(
            step_number=self.step_number,
            action=action,
            current_node=current,
            visited_nodes=tuple(self.visited_nodes),
            queued_nodes=tuple(self.queued_nodes if queued is None else queued),
            active_edges=tuple(active_edges),
            explanation=explanation,
            distances=_frozen_map(self.distances),
            previous=_frozen_map(self.previous),
            path_so_far=tuple(path) if path is not None else None,
            f_scores=_frozen_map(self.f_scores),
            mst_edges=tuple(self.mst_edges) if self.mst_edges is not None else None,
            mst_cost=self.mst_cost,
            negative_cycle=negative_cycle,
        )
        self.step_number += 1
        return step


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------
def format_cost(value: float) -> str:
    """∞ for infinity, no trailing .0 on whole numbers, else 2 decimals."""
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def _frozen_map(source: Optional[Dict]) -> Optional[Mapping]:
    return MappingProxyType(dict(source)) if source is not None else None


def _finite_or_none(value: float) -> Optional[float]:
    return None if math.isinf(value) else value
