"""Tests for Dijkstra, A* and Bellman-Ford."""

import pytest

from algorithms import StepAction
from engine import run_algorithm
from graph import Edge, Graph, Node


class TestDijkstra:
    """Dijkstra with linear-scan selection."""

    def test_classic_example(self, cycle_graph):
        """A→E settles on A→C→B→D→E at cost 10."""
        trace = run_algorithm("dijkstra", cycle_graph, "A", "E")
        final = trace.final_step
        assert trace.path == ("A", "C", "B", "D", "E")
        assert final.distances["E"] == 10
        assert final.action is StepAction.FINALIZE
        assert "Cost: 10" in final.explanation

    def test_step_sequence(self, cycle_graph):
        """Init visit, then visit + check/update pairs per selected node."""
        trace = run_algorithm("dijkstra", cycle_graph, "A", "E")
        assert len(trace) == 21
        visits = [s.current_node for s in trace[1:] if s.action is StepAction.VISIT]
        assert visits == ["A", "C", "B", "D", "E"]
        # C improves B from 4 to 3 via B–C
        improved = [s for s in trace if s.action is StepAction.UPDATE and s.active_edges == ("BC",)]
        assert len(improved) == 1
        assert improved[0].distances["B"] == 3

    def test_check_without_improvement_has_no_update(self):
        """A worse candidate only produces a check step."""
        g = Graph()
        for nid in "ABC":
            g.add_node(Node(nid))
        g.add_edge(Edge("A", "B", 1, id="ab"))
        g.add_edge(Edge("A", "C", 5, id="ac"))
        g.add_edge(Edge("B", "C", 10, id="bc"))
        trace = run_algorithm("dijkstra", g, "A")
        ac = [s.action for s in trace if s.active_edges == ("ac",)]
        bc = [s.action for s in trace if s.active_edges == ("bc",)]
        assert ac == [StepAction.CHECK, StepAction.UPDATE]
        assert bc == [StepAction.CHECK]
        assert trace.final_step.distances["C"] == 5

    def test_ties_go_to_first_inserted(self):
        """Equal distances are settled in node insertion order."""
        g = Graph()
        for nid in "ACB":
            g.add_node(Node(nid))
        g.add_edge(Edge("A", "B", 1))
        g.add_edge(Edge("A", "C", 1))
        trace = run_algorithm("dijkstra", g, "A")
        assert trace.final_step.visited_nodes == ("A", "C", "B")

    def test_unreachable_nodes_without_target(self, two_component_graph):
        """Remaining ∞ nodes end the run with an unreachable note."""
        trace = run_algorithm("dijkstra", two_component_graph, "A")
        final = trace.final_step
        assert final.visited_nodes == ("A", "B", "C")
        assert "2 node(s) are unreachable" in final.explanation
        assert final.to_dict()["distances"]["D"] is None

    def test_unreachable_target(self, two_component_graph):
        """No path is a finalize step, not an error."""
        trace = run_algorithm("dijkstra", two_component_graph, "A", "E")
        assert "No path exists" in trace.final_step.explanation
        assert trace.final_step.path_so_far is None

    def test_distances_never_increase(self, cycle_graph):
        """Best-known costs only go down over the trace."""
        trace = run_algorithm("dijkstra", cycle_graph, "A")
        for before, after in zip(trace, trace[1:]):
            for nid in cycle_graph.node_ids():
                assert after.distances[nid] <= before.distances[nid]


class TestAStar:
    """A* with the Euclidean heuristic."""

    def test_classic_example(self, cycle_graph):
        """Same optimal path as Dijkstra when the heuristic is admissible."""
        trace = run_algorithm("astar", cycle_graph, "A", "E")
        assert trace.path == ("A", "C", "B", "D", "E")
        assert trace.final_step.distances["E"] == 10
        assert trace.final_step.f_scores["E"] == pytest.approx(10)

    def test_visits_goal_before_finalizing(self, cycle_graph):
        """The goal gets its own visit step right before the finalize."""
        trace = run_algorithm("astar", cycle_graph, "A", "E")
        assert trace[-2].action is StepAction.VISIT
        assert trace[-2].current_node == "E"

    def test_f_score_is_g_plus_h(self, cycle_graph):
        """f(start) is the straight-line distance to the goal."""
        trace = run_algorithm("astar", cycle_graph, "A", "E")
        start = cycle_graph.get_node("A")
        goal = cycle_graph.get_node("E")
        assert trace[0].f_scores["A"] == pytest.approx(start.distance_to(goal))

    def test_requires_end_node(self, cycle_graph):
        """Without a goal A* explains itself in one finalize step."""
        trace = run_algorithm("astar", cycle_graph, "A")
        assert len(trace) == 1
        assert trace[0].step_number == 0
        assert trace[0].action is StepAction.FINALIZE
        assert "end node" in trace[0].explanation
        assert trace[0].distances is None

    def test_closed_nodes_are_never_reopened(self):
        """With an inconsistent heuristic a closed node stays closed, even if a cheaper route appears.

        h(A) = 5 hides the cheap route S→A→B→G (cost 7), so B is closed via
        S→B (g = 4) first.  Reopening B from A would fix that; A* here doesn't.
        """
        g = Graph()
        for nid, x in (("S", 3.0), ("A", 5.0), ("B", 0.5), ("G", 0.0)):
            g.add_node(Node(nid, x=x, y=0.0))
        g.add_edge(Edge("S", "A", 1, id="SA"))
        g.add_edge(Edge("S", "B", 4, id="SB"))
        g.add_edge(Edge("A", "B", 1, id="AB"))
        g.add_edge(Edge("B", "G", 5, id="BG"))

        trace = run_algorithm("astar", g, "S", "G")

        for step in trace:
            if step.action is StepAction.CHECK:
                nbr = g.get_edge(step.active_edges[0]).other_end(step.current_node)
                assert nbr not in step.visited_nodes
        visits = [s.current_node for s in trace[1:] if s.action is StepAction.VISIT]
        assert visits == ["S", "B", "A", "G"]
        assert trace.path == ("S", "B", "G")
        assert trace.final_step.distances["G"] == 9
        assert trace.final_step.previous["B"] == "S"

    def test_open_node_updates_only_on_strictly_better_g(self):
        """An equal-cost second route to an open node is checked but not taken."""
        g = Graph()
        for nid in "SABG":
            g.add_node(Node(nid))
        g.add_edge(Edge("S", "A", 1, id="SA"))
        g.add_edge(Edge("S", "B", 1, id="SB"))
        g.add_edge(Edge("A", "G", 1, id="AG"))
        g.add_edge(Edge("B", "G", 1, id="BG"))

        trace = run_algorithm("astar", g, "S", "G")

        assert [s.action for s in trace if s.active_edges == ("AG",)] == [StepAction.CHECK, StepAction.UPDATE]
        assert [s.action for s in trace if s.active_edges == ("BG",)] == [StepAction.CHECK]
        assert trace.path == ("S", "A", "G")
        assert trace.final_step.previous["G"] == "A"

    def test_unreachable_goal(self, two_component_graph):
        """An empty open set ends with a no-path finalize."""
        trace = run_algorithm("astar", two_component_graph, "A", "D")
        assert "No path found" in trace.final_step.explanation
        assert trace.path == ()


class TestBellmanFord:
    """Bellman-Ford with early exit and negative-cycle detection."""

    def test_negative_edge_without_cycle(self, negative_edge_graph):
        """A negative edge shortens the path through B."""
        trace = run_algorithm("bellman-ford", negative_edge_graph, "S", "T")
        final = trace.final_step
        assert trace.path == ("S", "B", "A", "T")
        assert final.distances["T"] == 3
        assert final.negative_cycle is False

    def test_step_sequence(self, negative_edge_graph):
        """Init, one pass of updates, a quiet pass, detector, finalize."""
        trace = run_algorithm("bellman-ford", negative_edge_graph, "S", "T")
        V, C, U, F = StepAction.VISIT, StepAction.CHECK, StepAction.UPDATE, StepAction.FINALIZE
        assert [s.action for s in trace] == [V, C, U, U, U, U, C, C, C, F]
        assert "Iteration 1/3" in trace[1].explanation
        assert "converged early" in trace[7].explanation
        assert trace[0].queued_nodes == ("S", "A", "B", "T")

    def test_visited_lists_reached_nodes(self, negative_edge_graph):
        """visited_nodes grows with each newly reached node."""
        trace = run_algorithm("bellman-ford", negative_edge_graph, "S", "T")
        assert trace[0].visited_nodes == ()
        assert trace[1].visited_nodes == ("S",)
        assert trace.final_step.visited_nodes == ("S", "A", "B", "T")

    def test_active_edges_are_real_edge_ids(self, negative_edge_graph):
        """Relaxation steps point at the edge that was relaxed."""
        trace = run_algorithm("bellman-ford", negative_edge_graph, "S")
        updates = [s.active_edges for s in trace if s.action is StepAction.UPDATE]
        assert updates == [("SA",), ("SB",), ("BA",), ("AT",)]

    def test_detects_negative_cycle(self, negative_cycle_graph):
        """A reachable negative cycle ends without a path."""
        trace = run_algorithm("bellman-ford", negative_cycle_graph, "S", "T")
        final = trace.final_step
        assert final.negative_cycle is True
        assert final.path_so_far is None
        assert final.active_edges
        assert set(final.active_edges) <= set(negative_cycle_graph.edges)
        assert "Negative-weight cycle" in final.explanation

    def test_undirected_negative_edge_is_a_cycle(self):
        """An undirected negative edge can be walked back and forth."""
        g = Graph()
        g.add_node(Node("A"))
        g.add_node(Node("B"))
        g.add_edge(Edge("A", "B", -1))
        trace = run_algorithm("bellman-ford", g, "A", "B")
        assert trace.final_step.negative_cycle is True

    def test_unreachable_target(self, two_component_graph):
        """Unreachable target is a no-path finalize."""
        trace = run_algorithm("bellman-ford", two_component_graph, "A", "D")
        final = trace.final_step
        assert final.negative_cycle is False
        assert "no path exists" in final.explanation
        assert final.path_so_far is None

    def test_single_node(self):
        """One node: no passes, just the detector and the finalize."""
        g = Graph()
        g.add_node(Node("A"))
        trace = run_algorithm("bellman-ford", g, "A")
        assert [s.action for s in trace] == [StepAction.VISIT, StepAction.CHECK, StepAction.FINALIZE]
        assert "complete" in trace.final_step.explanation

    def test_agrees_with_dijkstra(self, cycle_graph):
        """Non-negative weights: both algorithms find the same distances."""
        bf = run_algorithm("bellman-ford", cycle_graph, "A").final_step.distances
        dj = run_algorithm("dijkstra", cycle_graph, "A").final_step.distances
        assert dict(bf) == dict(dj)
