"""
trace.py — Immutable Step Trace
================================
The complete, ordered output of one algorithm run.  Playback indexes into
it freely (forward, backward, jump), so it is fully materialised and never
changes after construction.

Contract checked on construction:
  • at least one step
  • step numbers 0, 1, 2, … with no gaps
  • visited_nodes only ever grows, never reorders
  • the last step is a FINALIZE
A violation is an engine bug, reported as ValueError.
"""

from typing import Iterable, Iterator, List, Tuple, Union, overload

from algorithms.step import Step, StepAction


class Trace:

    __slots__ = ("_steps", "algorithm", "source", "target")

    def __init__(self, steps: Iterable[Step], algorithm: str = "", source: str = "", target=None):
        self._steps: Tuple[Step, ...] = tuple(steps)
        self.algorithm = algorithm
        self.source    = source
        self.target    = target
        _check_contract(self._steps)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    @overload
    def __getitem__(self, idx: int) -> Step: ...
    @overload
    def __getitem__(self, idx: slice) -> Tuple[Step, ...]: ...

    def __getitem__(self, idx: Union[int, slice]):
        return self._steps[idx]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    @property
    def final_step(self) -> Step:
        return self._steps[-1]

    @property
    def path(self) -> Tuple[str, ...]:
        return self.final_step.path_so_far or ()

    def to_list(self) -> List[dict]:
        return [s.to_dict() for s in self._steps]

    def __repr__(self) -> str:
        return f"Trace(algorithm={self.algorithm!r}, steps={len(self._steps)})"


# ---------------------------------------------------------------------------
def _check_contract(steps: Tuple[Step, ...]) -> None:
    if not steps:
        raise ValueError("Trace must contain at least one step")
    prev_visited: Tuple[str, ...] = ()
    for idx, step in enumerate(steps):
        if step.step_number != idx:
            raise ValueError(f"Step {idx} has step_number {step.step_number}")
        if step.visited_nodes[:len(prev_visited)] != prev_visited:
            raise ValueError(f"Step {idx} dropped or reordered visited nodes")
        prev_visited = step.visited_nodes
    if steps[-1].action is not StepAction.FINALIZE:
        raise ValueError("Last step of a trace must be a finalize step")
