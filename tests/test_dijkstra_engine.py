"""
Unit tests for BoundedDijkstraEngine using AdjacencyListGraph.
"""

from dataclasses import dataclass
import math

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import BoundedDijkstraEngine
from paths import Edge, Path, confidence_cost


@dataclass(frozen=True, order=True)
class DummyVertex:
    """
    Minimal ordered vertex key for Dijkstra tests.
    """
    _id: str


def test_dijkstra_prefers_cheaper_indirect_path():
    g = AdjacencyListGraph()
    a = DummyVertex("A")
    b = DummyVertex("B")
    c = DummyVertex("C")

    # A -> B (5), A -> C (2), C -> B (1)
    g.add_edge(a, b, 5, bidirectional=False)
    g.add_edge(a, c, 2, bidirectional=False)
    g.add_edge(c, b, 1, bidirectional=False)

    path = g.dijkstras(a, b)

    assert list(path) == [Edge(a, c, 2), Edge(c, b, 1)]
    assert path.cost == 3.0
    assert path.length == 3
    assert path.vertices() == [a, c, b]


def test_dijkstra_unreachable_target_returns_empty_sentinel():
    g = AdjacencyListGraph()
    a = DummyVertex("A")
    b = DummyVertex("B")
    c = DummyVertex("C")  # unreachable from A

    g.add_edge(a, b, 2, bidirectional=False)
    g.add_vertex(c)

    path = g.dijkstras(a, c)

    assert path.is_empty
    assert not path
    assert path.cost == math.inf
    assert path == Path.empty()


def test_dijkstra_respects_edge_direction():
    g = AdjacencyListGraph()
    g.add_edge("A", "B", 1, bidirectional=False)

    assert not g.dijkstras("A", "B").is_empty
    assert g.dijkstras("B", "A").is_empty


def test_dijkstra_unknown_endpoint_returns_empty():
    g = AdjacencyListGraph()
    g.add_edge("A", "B", 1)

    assert g.dijkstras("A", "Z").is_empty
    assert g.dijkstras("Z", "A").is_empty


def test_dijkstra_source_equals_target_is_trivial_not_empty():
    g = AdjacencyListGraph()
    g.add_edge("A", "B", 1)

    path = g.dijkstras("A", "A")

    assert not path.is_empty
    assert path.cost == 0.0
    assert len(path) == 0
    assert path.length == 1


def test_max_path_length_caps_edge_count():
    g = AdjacencyListGraph()
    # Chain A-B-C-D-E, plus an expensive shortcut A -> E.
    for u, v in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E")]:
        g.add_edge(u, v, 1, bidirectional=False)
    g.add_edge("A", "E", 100, bidirectional=False)

    unbounded = g.dijkstras("A", "E")
    assert len(unbounded) == 4

    capped = g.dijkstras("A", "E", max_path_length=3)
    assert list(capped) == [Edge("A", "E", 100)]

    # Length 1 means only the source: nothing is reachable.
    assert g.dijkstras("A", "B", max_path_length=1).is_empty


def test_max_path_length_never_exceeded():
    g = AdjacencyListGraph()
    for i in range(10):
        g.add_edge(i, i + 1, 1, bidirectional=False)

    for limit in range(1, 12):
        path = g.dijkstras(0, 10, max_path_length=limit)
        if not path.is_empty:
            assert len(path) <= limit - 1
    assert len(g.dijkstras(0, 10, max_path_length=11)) == 10
    assert g.dijkstras(0, 10, max_path_length=10).is_empty


def test_max_path_cost_bounds_total_cost():
    g = AdjacencyListGraph()
    g.add_edge("A", "B", 3, bidirectional=False)
    g.add_edge("B", "C", 3, bidirectional=False)

    assert g.dijkstras("A", "C", max_path_cost=6).cost == 6.0
    assert g.dijkstras("A", "C", max_path_cost=5).is_empty
    assert g.dijkstras("A", "B", max_path_cost=5).cost == 3.0


def test_custom_cost_function_changes_route():
    g = AdjacencyListGraph()
    # High confidence direct link vs two low-confidence hops.
    g.add_edge("A", "C", 900, bidirectional=False)
    g.add_edge("A", "B", 150, bidirectional=False)
    g.add_edge("B", "C", 150, bidirectional=False)

    by_weight = g.dijkstras("A", "C")
    assert by_weight.vertices() == ["A", "B", "C"]
    assert by_weight.cost == 300.0

    by_confidence = g.dijkstras("A", "C", cost=confidence_cost)
    assert by_confidence.vertices() == ["A", "C"]
    assert by_confidence.cost == 100.0

    g.add_edge("A", "D", 990, bidirectional=False)
    g.add_edge("D", "C", 990, bidirectional=False)
    assert g.dijkstras("A", "C", cost=confidence_cost).vertices() == ["A", "D", "C"]


def test_equal_cost_ties_follow_vertex_order():
    g = AdjacencyListGraph()
    g.add_edge("S", "Y", 1, bidirectional=False)
    g.add_edge("S", "X", 1, bidirectional=False)
    g.add_edge("X", "T", 1, bidirectional=False)
    g.add_edge("Y", "T", 1, bidirectional=False)

    # X is expanded before Y, so T is first (and finally) reached via X.
    assert g.dijkstras("S", "T").vertices() == ["S", "X", "T"]


def test_engine_search_returns_distance_and_predecessors():
    g = AdjacencyListGraph()
    g.add_edge("A", "B", 1, bidirectional=False)
    g.add_edge("A", "C", 4, bidirectional=False)
    g.add_edge("B", "C", 2, bidirectional=False)

    dist, prev = BoundedDijkstraEngine().search(g, "A")

    assert dist == {"A": 0.0, "B": 1.0, "C": 3.0}
    assert prev["C"] == Edge("B", "C", 2)
    assert "A" not in prev
