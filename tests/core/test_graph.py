"""
Tests for the immutable graph and its adjacency index.
"""

import logging

from routefinder.core.graph import Graph
from routefinder.core.models import Edge, Vertex


def test_handles_follow_declaration_order():
    """Test each vertex gets a dense handle in declaration order."""
    graph = Graph(["C", "A", "B"], [])
    assert [graph.handle_of(v) for v in ("C", "A", "B")] == [0, 1, 2]
    assert graph.id_of(1) == "A"
    assert graph.handle_of("Z") is None


def test_undirected_graph_indexes_both_orientations(sample_graph):
    """Test undirected edges can be travelled both ways."""
    assert sample_graph.get_edge_weight("A", "B") == 4.0
    assert sample_graph.get_edge_weight("B", "A") == 4.0
    assert sample_graph.arc_count == 2 * sample_graph.edge_count
    assert sample_graph.get_neighbors("E") == {("C", 10.0), ("D", 2.0)}


def test_directed_graph_respects_orientation(directed_chain):
    """Test directed edges are one-way and the reverse index is kept."""
    assert directed_chain.has_edge("A", "B")
    assert not directed_chain.has_edge("B", "A")
    assert directed_chain.get_neighbors("B") == {("C", 1.0)}
    assert directed_chain.get_incoming("B") == {("A", 1.0)}
    assert directed_chain.get_degree("A") == 1
    assert directed_chain.get_degree("A", reverse=True) == 0


def test_handle_level_api(directed_chain):
    """Test the handle accessors agree with the id accessors."""
    a, b, c = (directed_chain.handle_of(v) for v in "ABC")
    assert directed_chain.successors(a) == {b: 1.0}
    assert directed_chain.predecessors(c) == {b: 1.0}
    assert directed_chain.weight_between(a, b) == 1.0
    assert directed_chain.weight_between(b, a) is None


def test_parallel_edges_keep_minimum_weight():
    """Test parallel edges collapse to the cheapest one in the index."""
    graph = Graph(
        ["A", "B"],
        [Edge("A", "B", 5.0), Edge("A", "B", 2.0), Edge("A", "B", 7.0)],
    )
    assert graph.get_edge_weight("A", "B") == 2.0
    assert graph.edge_count == 3
    assert graph.arc_count == 1


def test_edges_with_undeclared_endpoints_are_not_indexed(caplog):
    """Test an edge to an unknown vertex is kept but never traversable."""
    with caplog.at_level(logging.DEBUG, logger="routefinder.core.graph"):
        graph = Graph(["A", "B"], [Edge("A", "B", 1.0), Edge("A", "X", 1.0)])

    assert graph.edge_count == 2
    assert not graph.has_vertex("X")
    assert graph.get_neighbors("A") == {("B", 1.0)}
    assert graph.get_edge_weight("A", "X") is None
    assert "undeclared vertex" in caplog.text


def test_duplicate_vertices_keep_first_occurrence():
    """Test duplicate ids keep the first vertex object."""
    graph = Graph([Vertex("A", label="first"), Vertex("A", label="second"), "B"], [])
    assert graph.vertex_count == 2
    assert graph.get_vertex("A").label == "first"
    assert graph.get_vertex_ids() == ["A", "B"]


def test_unknown_vertex_queries_are_empty(sample_graph):
    """Test lookups on unknown vertices return empty values."""
    assert sample_graph.get_neighbors("Z") == set()
    assert sample_graph.get_incoming("Z") == set()
    assert sample_graph.get_edge_weight("A", "Z") is None
    assert sample_graph.get_degree("Z") == 0
    assert sample_graph.get_vertex("Z") is None


def test_container_protocol(sample_graph):
    """Test membership, length and representation."""
    assert "A" in sample_graph
    assert "Z" not in sample_graph
    assert len(sample_graph) == 5
    assert sample_graph.get_vertices() == frozenset(Vertex(v) for v in "ABCDE")
    assert repr(sample_graph) == "Graph(vertices=5, edges=7, undirected)"


def test_from_edges_derives_vertices():
    """Test the vertex set is taken from edge endpoints in first-seen order."""
    graph = Graph.from_edges([Edge("B", "C", 1.0), Edge("A", "B", 2.0)], directed=False)
    assert graph.get_vertex_ids() == ["B", "C", "A"]
    assert not graph.directed
    assert graph.get_edge_weight("B", "A") == 2.0
