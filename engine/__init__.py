"""
engine/
-------
Run & recording layer.

    from engine import run_algorithm, Trace, Recorder, compare
"""

from engine.trace    import Trace
from engine.dispatch import run_algorithm
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Trace",
    "run_algorithm",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
