"""
dispatch.py — The Engine Entry Point
=====================================
    trace = run_algorithm("dijkstra", graph, "A", "E")

Picks the generator from the registry, snapshots the graph, drives the
generator to completion and freezes every step into a Trace.  Runs are
synchronous and never observe edits made to the live graph after they start.
"""

import logging
from typing import Optional

from algorithms import get_algorithm, UnsupportedAlgorithmError
from engine.trace import Trace
from graph import Graph, NotFoundError

logger = logging.getLogger(__name__)


def run_algorithm(
    algorithm_id: str,
    graph: Graph,
    start_node: str,
    end_node: Optional[str] = None,
) -> Trace:
    """
    Raises:
        UnsupportedAlgorithmError : algorithm_id is not registered.
        NotFoundError             : start_node (or a given end_node) is not in the graph.

    Dead ends such as unreachable targets or negative cycles are NOT errors;
    they come back as the trace's final step.
    """
    info = get_algorithm(algorithm_id)
    if info is None:
        raise UnsupportedAlgorithmError(f"Algorithm '{algorithm_id}' is not supported")

    snapshot = graph if graph.read_only else graph.snapshot()

    if not snapshot.has_node(start_node):
        raise NotFoundError(f"Start node '{start_node}' not found")
    if end_node is not None and not snapshot.has_node(end_node):
        raise NotFoundError(f"End node '{end_node}' not found")

    logger.info("Running %s from %s to %s on %r", info.key, start_node, end_node, snapshot)
    trace = Trace(
        info.fn(snapshot, start_node, end_node),
        algorithm=info.key, source=start_node, target=end_node,
    )
    logger.info("%s finished in %d step(s): %s", info.key, len(trace), trace.final_step.explanation)
    return trace
