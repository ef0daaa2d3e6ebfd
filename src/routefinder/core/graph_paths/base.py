import logging
from abc import ABC, abstractmethod
from time import perf_counter
from typing import List, Optional

from routefinder.core.graph_paths.config import DEFAULT_CONFIG, SearchConfig
from routefinder.core.graph_paths.models import (
    PerformanceMetrics,
    Route,
    SearchError,
    SearchResult,
)
from routefinder.core.graph_paths.types import Endpoint
from routefinder.core.graph_paths.utils import SearchGuard, build_route
from routefinder.core.types import GraphProtocol

logger = logging.getLogger(__name__)


class PathFinder(ABC):
    """
    Abstract base class for route finding strategies.

    ``find_path`` runs the steps every strategy shares: endpoint validation,
    the start-equals-end shortcut, metrics and guard set-up, and turning the
    handle path a strategy produces into a ``Route``. Subclasses implement
    ``_search`` over dense vertex handles.
    """

    operation = "search"

    def __init__(self, graph: GraphProtocol, config: Optional[SearchConfig] = None):
        """Initialize finder with graph."""
        self.graph = graph
        self.config = config or DEFAULT_CONFIG

    def find_path(self, start_vertex: str, end_vertex: str) -> SearchResult[Route]:
        """
        Find a route from ``start_vertex`` to ``end_vertex``.

        Returns:
            A result holding the Route, or a SearchError for an unknown
            endpoint or an exhausted search

        Raises:
            SearchCancelledError: If the configured token was cancelled
            MemoryLimitExceededError: If the memory budget was exceeded
            SearchAbortedError: If a frontier exceeded the configured size
        """
        metrics = PerformanceMetrics(operation=self.operation, start_time=perf_counter())

        error = self.validate_vertices(start_vertex, end_vertex)
        if error is not None:
            metrics.end_time = perf_counter()
            logger.debug("%s: %s", self.operation, error)
            return SearchResult.failure(error, metrics)

        if start_vertex == end_vertex:
            metrics.end_time = perf_counter()
            return SearchResult.success(Route.trivial(start_vertex), metrics)

        logger.debug("%s: searching %s -> %s", self.operation, start_vertex, end_vertex)
        guard = SearchGuard(self.config)
        try:
            handles = self._search(
                self.graph.handle_of(start_vertex),
                self.graph.handle_of(end_vertex),
                guard,
                metrics,
            )
        finally:
            metrics.end_time = perf_counter()
            metrics.peak_memory_bytes = guard.peak_memory_bytes

        logger.debug(
            "%s: settled %d vertices, relaxed %d arcs in %.3fms",
            self.operation,
            metrics.vertices_settled,
            metrics.edges_relaxed,
            metrics.duration,
        )
        if handles is None:
            return SearchResult.failure(SearchError.no_path(start_vertex, end_vertex), metrics)

        route = build_route(self.graph, handles)
        if self.config.validate_routes:
            route.validate(self.graph)
        return SearchResult.success(route, metrics)

    @abstractmethod
    def _search(
        self, start: int, end: int, guard: SearchGuard, metrics: PerformanceMetrics
    ) -> Optional[List[int]]:
        """
        Search between two distinct, existing vertices.

        Returns:
            Handles from ``start`` to ``end`` inclusive, or None if exhausted
        """

    def validate_vertices(self, start_vertex: str, end_vertex: str) -> Optional[SearchError]:
        """Report the first unknown endpoint, start before end."""
        if not self.graph.has_vertex(start_vertex):
            return SearchError.unknown_vertex(Endpoint.START, start_vertex)
        if not self.graph.has_vertex(end_vertex):
            return SearchError.unknown_vertex(Endpoint.END, end_vertex)
        return None
