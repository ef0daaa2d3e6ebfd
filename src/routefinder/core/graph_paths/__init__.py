"""Graph route finding functionality."""

import logging
from typing import Optional

from ..heuristics import zero
from ..types import GraphProtocol
from .algorithms.astar import AStarFinder
from .algorithms.bidirectional import BidirectionalFinder
from .algorithms.breadth_first import BreadthFirstFinder
from .algorithms.shortest_path import DijkstraFinder
from .base import PathFinder
from .config import DEFAULT_ALGORITHM, DEFAULT_CONFIG, SearchConfig
from .models import (
    PathValidationError,
    PerformanceMetrics,
    Route,
    RouteTable,
    SearchError,
    SearchResult,
)
from .types import Algorithm, Endpoint, Heuristic, SearchErrorKind
from .utils import CancellationToken

logger = logging.getLogger(__name__)

__all__ = [
    "Algorithm",
    "AStarFinder",
    "BidirectionalFinder",
    "BreadthFirstFinder",
    "CancellationToken",
    "DijkstraFinder",
    "Endpoint",
    "Heuristic",
    "PathFinder",
    "PathFinding",
    "PathValidationError",
    "PerformanceMetrics",
    "Route",
    "RouteTable",
    "SearchConfig",
    "SearchError",
    "SearchErrorKind",
    "SearchResult",
]


class PathFinding:
    """Static interface for route finding operations."""

    @staticmethod
    def create_finder(
        graph: GraphProtocol,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
        heuristic: Optional[Heuristic] = None,
        config: Optional[SearchConfig] = None,
    ) -> PathFinder:
        """Create the finder implementing ``algorithm``."""
        match algorithm:
            case Algorithm.DIJKSTRA:
                return DijkstraFinder(graph, config)
            case Algorithm.BFS:
                return BreadthFirstFinder(graph, config)
            case Algorithm.A_STAR:
                return AStarFinder(graph, heuristic or zero, config)
            case Algorithm.BIDIRECTIONAL:
                return BidirectionalFinder(graph, config)
            case _:
                raise ValueError(f"Unknown algorithm: {algorithm}")

    @classmethod
    def find_route(
        cls,
        graph: GraphProtocol,
        start_vertex: str,
        end_vertex: str,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
        heuristic: Optional[Heuristic] = None,
        config: Optional[SearchConfig] = None,
    ) -> SearchResult[Route]:
        """
        Find a route between two vertices.

        Args:
            graph: Graph to search
            start_vertex: Starting vertex ID
            end_vertex: Target vertex ID
            algorithm: Strategy to use
            heuristic: Estimate for ``Algorithm.A_STAR``; the zero heuristic
                when omitted. Ignored by the other strategies.
            config: Guards and checks for this search

        Returns:
            The route, or a SearchError for an unknown endpoint or no path
        """
        logger.debug(
            "find_route %s -> %s using %s", start_vertex, end_vertex, algorithm.value
        )
        finder = cls.create_finder(graph, algorithm, heuristic, config)
        result = finder.find_path(start_vertex, end_vertex)
        if not result.ok:
            logger.info("%s search failed: %s", algorithm.value, result.error)
        return result

    @classmethod
    def find_route_astar(
        cls,
        graph: GraphProtocol,
        start_vertex: str,
        end_vertex: str,
        heuristic: Heuristic,
        config: Optional[SearchConfig] = None,
    ) -> SearchResult[Route]:
        """Find a route with A* under ``heuristic``."""
        return cls.find_route(
            graph, start_vertex, end_vertex, Algorithm.A_STAR, heuristic, config
        )

    @staticmethod
    def all_routes(
        graph: GraphProtocol,
        start_vertex: str,
        config: Optional[SearchConfig] = None,
    ) -> SearchResult[RouteTable]:
        """
        Find the shortest route from ``start_vertex`` to every vertex.

        Returns:
            A RouteTable covering every reachable vertex (``start_vertex``
            included) and listing the unreachable ones
        """
        logger.debug("all_routes from %s", start_vertex)
        result = DijkstraFinder(graph, config or DEFAULT_CONFIG).shortest_path_tree(start_vertex)
        if not result.ok:
            logger.info("all_routes failed: %s", result.error)
        return result
