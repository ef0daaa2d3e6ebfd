"""
Dijkstra's algorithm over the indexed adjacency list.
"""

import logging
from time import perf_counter
from typing import List, Optional

from ..base import PathFinder
from ..models import PerformanceMetrics, RouteTable, SearchError, SearchResult
from ..types import Endpoint
from ..utils import NO_HANDLE, PriorityQueue, SearchGuard, SearchState, build_route

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder):
    """
    Weight-optimal search settling vertices in order of tentative distance.

    The frontier is a binary heap with lazy deletion: improving a vertex
    pushes a new entry and the outdated one is discarded when it surfaces,
    so no decrease-key is needed. Among paths of equal cost, the one
    returned depends on heap insertion order; any of them is a correct
    answer.
    """

    operation = "dijkstra"

    def _search(
        self, start: int, end: int, guard: SearchGuard, metrics: PerformanceMetrics
    ) -> Optional[List[int]]:
        state = self._explore(start, end, guard, metrics)
        if not state.settled[end]:
            return None
        return state.path_to(end)

    def _explore(
        self, start: int, target: int, guard: SearchGuard, metrics: PerformanceMetrics
    ) -> SearchState:
        """Settle vertices from ``start`` until ``target`` settles or the frontier empties."""
        graph = self.graph
        state = SearchState(graph.vertex_count)
        dist, prev, settled = state.dist, state.prev, state.settled

        dist[start] = 0.0
        queue = PriorityQueue(maxsize=self.config.max_queue_size)
        queue.push(start, 0.0)

        while not queue.empty():
            guard.check()
            current_dist, current = queue.pop()
            if settled[current]:
                continue
            settled[current] = 1
            metrics.vertices_settled += 1

            if current == target:
                logger.debug("Settled target %s at %s", graph.id_of(current), current_dist)
                break

            for neighbor, weight in graph.successors(current).items():
                metrics.edges_relaxed += 1
                new_dist = current_dist + weight
                if new_dist < dist[neighbor]:
                    dist[neighbor] = new_dist
                    prev[neighbor] = current
                    queue.push(neighbor, new_dist)
            metrics.observe_frontier(len(queue))

        return state

    def shortest_path_tree(self, start_vertex: str) -> SearchResult[RouteTable]:
        """
        Routes from ``start_vertex`` to every vertex it can reach, in one pass.

        Returns:
            A result holding the RouteTable, or an UNKNOWN_VERTEX error
        """
        metrics = PerformanceMetrics(operation="shortest_path_tree", start_time=perf_counter())
        start = self.graph.handle_of(start_vertex)
        if start is None:
            metrics.end_time = perf_counter()
            return SearchResult.failure(
                SearchError.unknown_vertex(Endpoint.START, start_vertex), metrics
            )

        guard = SearchGuard(self.config)
        try:
            state = self._explore(start, NO_HANDLE, guard, metrics)
        finally:
            metrics.end_time = perf_counter()
            metrics.peak_memory_bytes = guard.peak_memory_bytes

        routes = {}
        unreachable = set()
        for handle in range(self.graph.vertex_count):
            vertex_id = self.graph.id_of(handle)
            if not state.settled[handle]:
                unreachable.add(vertex_id)
                continue
            route = build_route(self.graph, state.path_to(handle))
            if self.config.validate_routes:
                route.validate(self.graph)
            routes[vertex_id] = route

        return SearchResult.success(
            RouteTable(source=start_vertex, routes=routes, unreachable=frozenset(unreachable)),
            metrics,
        )
