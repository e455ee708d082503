"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (the Trace), then computes the
summary the UI shows once a run is done and for Comparison Mode.

Usage:
    rec = Recorder()
    metrics = rec.record("dijkstra", graph, "A", "F")   # runs to completion
    rec.trace                                            # the full Trace
    rec.export()                                         # serialisable snapshot

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both on the SAME
    graph, then calls compare(rec1, rec2) → ComparisonResult.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import get_algorithm
from algorithms.paths import path_weight
from engine.dispatch import run_algorithm
from engine.trace import Trace
from graph import Graph


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str             = ""
    algo_label:      str             = ""
    source:          str             = ""
    target:          Optional[str]   = None
    nodes_visited:   int             = 0
    path:            List[str]       = field(default_factory=list)
    path_length:     int             = 0          # number of edges on the final path
    path_cost:       float           = 0.0        # total weight of the final path
    mst_cost:        Optional[float] = None       # Prim / Kruskal only
    total_steps:     int             = 0
    wall_time_ms:    float           = 0.0
    path_found:      bool            = False
    negative_cycle:  bool            = False
    outcome:         str             = ""         # final step's explanation


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_nodes: str = ""   # which algo visited fewer nodes
    winner_steps: str = ""   # which algo needed fewer steps
    winner_path:  str = ""   # which algo found the cheaper path

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        trace   : Trace of the last run (None before record()).
        metrics : RunMetrics of the last run.
    """

    def __init__(self):
        self.trace:   Optional[Trace]      = None
        self.metrics: Optional[RunMetrics] = None
        self._graph:  Optional[Graph]      = None

    def record(
        self,
        algo_key: str,
        graph: Graph,
        source: str,
        target: Optional[str] = None,
    ) -> RunMetrics:
        """Run through the dispatcher, keep the trace, compute metrics."""
        self._graph = graph if graph.read_only else graph.snapshot()

        start      = time.monotonic()
        self.trace = run_algorithm(algo_key, self._graph, source, target)
        wall_ms    = (time.monotonic() - start) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self.trace is None:
            return {}
        return {
            "algo_key": self.trace.algorithm,
            "source":   self.trace.source,
            "target":   self.trace.target,
            "graph":    self._graph.to_dict() if self._graph else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    self.trace.to_list(),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        trace = self.trace
        info  = get_algorithm(trace.algorithm)
        last  = trace.final_step
        path  = list(last.path_so_far or ())

        return RunMetrics(
            algo_key=trace.algorithm,
            algo_label=info.label if info else "",
            source=trace.source,
            target=trace.target,
            nodes_visited=len(last.visited_nodes),
            path=path,
            path_length=len(path) - 1 if len(path) > 1 else 0,
            path_cost=path_weight(self._graph, path) if len(path) > 1 else 0.0,
            mst_cost=last.mst_cost,
            total_steps=len(trace),
            wall_time_ms=round(wall_ms, 2),
            path_found=bool(path),
            negative_cycle=bool(last.negative_cycle),
            outcome=last.explanation,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    if l.path_found and r.path_found:
        winner_path = winner(l.path_cost, r.path_cost)
    elif l.path_found or r.path_found:
        winner_path = l.algo_label if l.path_found else r.algo_label
    else:
        winner_path = "none"

    return ComparisonResult(
        left=l,
        right=r,
        winner_nodes=winner(l.nodes_visited, r.nodes_visited),
        winner_steps=winner(l.total_steps, r.total_steps),
        winner_path=winner_path,
    )
