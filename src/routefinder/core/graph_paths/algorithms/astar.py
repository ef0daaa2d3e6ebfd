"""
A* search guided by a caller-supplied heuristic.
"""

import logging
from typing import List, Optional

from ...types import GraphProtocol
from ..base import PathFinder
from ..config import SearchConfig
from ..models import PerformanceMetrics
from ..types import Heuristic
from ..utils import INFINITY, PriorityQueue, SearchGuard, SearchState

logger = logging.getLogger(__name__)


class AStarFinder(PathFinder):
    """
    Best-first search ordered by ``g + h``.

    With an admissible heuristic the returned route is weight-optimal. A
    closed vertex whose cost later improves is reopened, so an admissible
    but inconsistent heuristic still yields an optimal route.
    The zero heuristic reduces this to Dijkstra's algorithm.
    """

    operation = "a_star"

    def __init__(
        self,
        graph: GraphProtocol,
        heuristic: Heuristic,
        config: Optional[SearchConfig] = None,
    ):
        super().__init__(graph, config)
        if not callable(heuristic):
            raise TypeError("heuristic must be callable")
        self.heuristic = heuristic

    def _search(
        self, start: int, end: int, guard: SearchGuard, metrics: PerformanceMetrics
    ) -> Optional[List[int]]:
        graph = self.graph
        heuristic = self.heuristic
        state = SearchState(graph.vertex_count)
        g_score, prev, closed = state.dist, state.prev, state.settled
        f_score = [INFINITY] * graph.vertex_count

        g_score[start] = 0.0
        f_score[start] = heuristic(graph.id_of(start))
        queue = PriorityQueue(maxsize=self.config.max_queue_size)
        queue.push(start, f_score[start])

        while not queue.empty():
            guard.check()
            priority, current = queue.pop()
            if closed[current] or priority > f_score[current]:
                continue

            if current == end:
                logger.debug("Reached %s with g=%s", graph.id_of(end), g_score[end])
                return state.path_to(end)

            closed[current] = 1
            metrics.vertices_settled += 1
            current_g = g_score[current]

            for neighbor, weight in graph.successors(current).items():
                metrics.edges_relaxed += 1
                tentative = current_g + weight
                if tentative < g_score[neighbor]:
                    if closed[neighbor]:
                        logger.debug("Reopening %s", graph.id_of(neighbor))
                        closed[neighbor] = 0
                    g_score[neighbor] = tentative
                    prev[neighbor] = current
                    f_score[neighbor] = tentative + heuristic(graph.id_of(neighbor))
                    queue.push(neighbor, f_score[neighbor])
            metrics.observe_frontier(len(queue))

        return None
