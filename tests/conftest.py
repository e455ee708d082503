"""
Pytest configuration and shared fixtures.

Provides the preset graphs every test module builds on.
"""

import random

import pytest

from graph import Edge, Graph, Node


def _build(nodes, edges, directed=False) -> Graph:
    g = Graph(directed=directed)
    for nid, x, y in nodes:
        g.add_node(Node(nid, x=x, y=y))
    for eid, src, tgt, w in edges:
        g.add_edge(Edge(src, tgt, w, id=eid))
    return g


@pytest.fixture
def cycle_graph() -> Graph:
    """Five nodes, seven undirected weighted edges.

    Coordinates sit well inside one unit so the straight-line heuristic
    never overestimates any edge.
    """
    return _build(
        [("A", 0.0, 0.0), ("B", 0.4, 0.0), ("C", 0.0, 0.2), ("D", 0.4, 0.2), ("E", 0.8, 0.2)],
        [
            ("AB", "A", "B", 4),
            ("AC", "A", "C", 2),
            ("BC", "B", "C", 1),
            ("BD", "B", "D", 5),
            ("CD", "C", "D", 8),
            ("CE", "C", "E", 10),
            ("DE", "D", "E", 2),
        ],
    )


@pytest.fixture
def grid_graph() -> Graph:
    """Unweighted 4×4 grid, node ids "row_col"."""
    nodes = [(f"{r}_{c}", float(c), float(r)) for r in range(4) for c in range(4)]
    edges = []
    for r in range(4):
        for c in range(4):
            if c < 3:
                edges.append((f"{r}_{c}-{r}_{c + 1}", f"{r}_{c}", f"{r}_{c + 1}", 1))
            if r < 3:
                edges.append((f"{r}_{c}-{r + 1}_{c}", f"{r}_{c}", f"{r + 1}_{c}", 1))
    return _build(nodes, edges)


@pytest.fixture
def two_component_graph() -> Graph:
    """{A, B, C} and {D, E} with no edge between them."""
    return _build(
        [("A", 0, 0), ("B", 1, 0), ("C", 2, 0), ("D", 0, 5), ("E", 1, 5)],
        [("AB", "A", "B", 1), ("BC", "B", "C", 2), ("DE", "D", "E", 3)],
    )


@pytest.fixture
def negative_cycle_graph() -> Graph:
    """Directed; A → B → A weighs -1 and is reachable from S."""
    return _build(
        [("S", 0, 0), ("A", 1, 0), ("B", 2, 0), ("T", 3, 0)],
        [("SA", "S", "A", 1), ("AB", "A", "B", -2), ("BA", "B", "A", 1), ("BT", "B", "T", 1)],
        directed=True,
    )


@pytest.fixture
def negative_edge_graph() -> Graph:
    """Directed, one negative edge, no negative cycle.  Best S→T is S→B→A→T = 3."""
    return _build(
        [("S", 0, 0), ("A", 1, 0), ("B", 1, 1), ("T", 2, 0)],
        [("SA", "S", "A", 4), ("SB", "S", "B", 5), ("BA", "B", "A", -3), ("AT", "A", "T", 1)],
        directed=True,
    )


def _random_graph(seed: int, directed: bool) -> Graph:
    rng = random.Random(seed)
    n = rng.randint(4, 9)
    g = Graph(directed=directed)
    for i in range(n):
        g.add_node(Node(f"n{i}"))
    # a chain keeps undirected members of the family connected
    for i in range(n - 1):
        g.add_edge(Edge(f"n{i}", f"n{i + 1}", rng.randint(1, 9), id=f"c{i}"))
    for k in range(rng.randint(0, 2 * n)):
        u, v = rng.sample(range(n), 2)
        g.add_edge(Edge(f"n{u}", f"n{v}", rng.randint(1, 9), id=f"r{k}"))
    return g


@pytest.fixture(params=range(8))
def random_graph(request) -> Graph:
    """Connected undirected graph with non-negative integer weights."""
    return _random_graph(request.param, directed=False)


@pytest.fixture(params=range(8))
def random_digraph(request) -> Graph:
    """Directed graph with non-negative integer weights (not necessarily strongly connected)."""
    return _random_graph(100 + request.param, directed=True)
