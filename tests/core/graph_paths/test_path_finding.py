"""
Tests for the PathFinding facade.
"""

import logging

import pytest

from routefinder.core.exceptions import (
    MemoryLimitExceededError,
    NoPathError,
    SearchCancelledError,
    VertexNotFoundError,
)
from routefinder.core.graph_paths import (
    Algorithm,
    AStarFinder,
    BidirectionalFinder,
    BreadthFirstFinder,
    CancellationToken,
    DijkstraFinder,
    PathFinding,
    SearchConfig,
    utils,
)
from routefinder.core.graph_paths.types import Endpoint, SearchErrorKind
from routefinder.core.heuristics import manhattan
from routefinder.core.templates import grid_graph


@pytest.mark.parametrize(
    "algorithm,finder_type",
    [
        (Algorithm.DIJKSTRA, DijkstraFinder),
        (Algorithm.BFS, BreadthFirstFinder),
        (Algorithm.A_STAR, AStarFinder),
        (Algorithm.BIDIRECTIONAL, BidirectionalFinder),
    ],
)
def test_create_finder_dispatch(sample_graph, algorithm, finder_type):
    """Test each algorithm maps to its finder."""
    assert isinstance(PathFinding.create_finder(sample_graph, algorithm), finder_type)


def test_default_algorithm_is_dijkstra(sample_graph):
    """Test the default strategy."""
    route = PathFinding.find_route(sample_graph, "A", "E").unwrap()
    assert route.total_distance == 10.0


@pytest.mark.parametrize(
    "algorithm", [Algorithm.DIJKSTRA, Algorithm.A_STAR, Algorithm.BIDIRECTIONAL]
)
def test_weight_optimal_algorithms_agree(sample_graph, algorithm):
    """Test the weight-optimal strategies return the reference route."""
    route = PathFinding.find_route(sample_graph, "A", "E", algorithm).unwrap()
    assert route.vertices == ("A", "C", "B", "D", "E")
    assert route.total_distance == 10.0


def test_bfs_through_facade(sample_graph):
    """Test the hop-optimal strategy."""
    route = PathFinding.find_route(sample_graph, "A", "E", Algorithm.BFS).unwrap()
    assert route.vertices == ("A", "C", "E")
    assert route.total_distance == 12.0


def test_find_route_astar_with_heuristic():
    """Test the A* shortcut with a coordinate heuristic."""
    graph = grid_graph()
    route = PathFinding.find_route_astar(graph, "(0,0)", "(2,2)", manhattan("(2,2)")).unwrap()
    assert route.total_distance == 4.0
    assert route.hops == 4


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_same_start_and_end_for_every_algorithm(sample_graph, algorithm):
    """Test every strategy returns the trivial route without searching."""
    result = PathFinding.find_route(sample_graph, "B", "B", algorithm)
    assert result.value.vertices == ("B",)
    assert result.value.total_distance == 0.0
    assert result.metrics.vertices_settled == 0


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_unknown_end_for_every_algorithm(sample_graph, algorithm):
    """Test an unknown end vertex is reported as a value."""
    error = PathFinding.find_route(sample_graph, "A", "Z", algorithm).error
    assert error.kind is SearchErrorKind.UNKNOWN_VERTEX
    assert error.endpoint is Endpoint.END


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_disconnected_for_every_algorithm(disconnected_graph, algorithm):
    """Test disconnected components yield NO_PATH."""
    result = PathFinding.find_route(disconnected_graph, "A", "D", algorithm)
    assert result.error.kind is SearchErrorKind.NO_PATH
    with pytest.raises(NoPathError):
        result.unwrap()


def test_unwrap_unknown_vertex(sample_graph):
    """Test exception flow for an unknown start."""
    with pytest.raises(VertexNotFoundError, match="Start vertex 'Q'"):
        PathFinding.find_route(sample_graph, "Q", "A").unwrap()


def test_repeated_searches_are_equal(sample_graph):
    """Test searching twice gives equal results."""
    first = PathFinding.find_route(sample_graph, "A", "E", Algorithm.BIDIRECTIONAL)
    second = PathFinding.find_route(sample_graph, "A", "E", Algorithm.BIDIRECTIONAL)
    assert first == second
    assert first.value == second.value


def test_failures_logged_at_info(sample_graph, caplog):
    """Test failed searches are logged."""
    with caplog.at_level(logging.INFO, logger="routefinder.core.graph_paths"):
        PathFinding.find_route(sample_graph, "A", "Z")
    assert "not found in graph" in caplog.text


def test_all_routes(sample_graph):
    """Test routes from one source to every vertex."""
    table = PathFinding.all_routes(sample_graph, "A").unwrap()
    assert set(table.routes) == {"A", "B", "C", "D", "E"}
    assert table.get("E").total_distance == 10.0
    assert table.get("A").vertices == ("A",)


def test_all_routes_unknown_start(sample_graph):
    """Test an unknown source."""
    result = PathFinding.all_routes(sample_graph, "Z")
    assert result.error.kind is SearchErrorKind.UNKNOWN_VERTEX


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_cancellation_for_every_algorithm(sample_graph, algorithm):
    """Test a cancelled token aborts every strategy."""
    token = CancellationToken()
    token.cancel()
    config = SearchConfig(cancel_token=token)
    with pytest.raises(SearchCancelledError):
        PathFinding.find_route(sample_graph, "A", "E", algorithm, config=config)


def test_memory_budget_aborts_search(sample_graph, monkeypatch):
    """Test a search exceeding its memory budget raises."""
    readings = iter(range(0, 10**12, 64 * 1024 * 1024))
    monkeypatch.setattr(utils, "get_memory_usage", lambda: next(readings))
    config = SearchConfig(max_memory_mb=1, memory_check_interval=0.0)

    with pytest.raises(MemoryLimitExceededError):
        PathFinding.find_route(sample_graph, "A", "E", config=config)


def test_validate_routes_for_every_algorithm(sample_graph):
    """Test route self-checks pass for every strategy."""
    config = SearchConfig(validate_routes=True)
    for algorithm in Algorithm:
        assert PathFinding.find_route(sample_graph, "A", "D", algorithm, config=config).ok
