"""
Breadth-first search, optimal in hop count.
"""

import logging
from collections import deque
from typing import List, Optional

from ...exceptions import SearchAbortedError
from ..base import PathFinder
from ..models import PerformanceMetrics
from ..utils import NO_HANDLE, SearchGuard

logger = logging.getLogger(__name__)


class BreadthFirstFinder(PathFinder):
    """
    Finds a route with the fewest arcs.

    Weights do not affect which route is chosen; they only determine the
    reported distance. Vertices are marked visited when discovered, so each
    is enqueued at most once and the first discovery fixes its predecessor.
    """

    operation = "bfs"

    def _search(
        self, start: int, end: int, guard: SearchGuard, metrics: PerformanceMetrics
    ) -> Optional[List[int]]:
        graph = self.graph
        size = graph.vertex_count
        max_queue_size = self.config.max_queue_size

        visited = bytearray(size)
        prev = [NO_HANDLE] * size
        hops = [0] * size

        visited[start] = 1
        queue = deque([start])

        while queue:
            guard.check()
            current = queue.popleft()
            metrics.vertices_settled += 1

            if current == end:
                logger.debug("Reached %s after %d hops", graph.id_of(end), hops[end])
                path = [end]
                while prev[path[-1]] != NO_HANDLE:
                    path.append(prev[path[-1]])
                path.reverse()
                return path

            for neighbor in graph.successors(current):
                metrics.edges_relaxed += 1
                if visited[neighbor]:
                    continue
                visited[neighbor] = 1
                prev[neighbor] = current
                hops[neighbor] = hops[current] + 1
                if len(queue) >= max_queue_size:
                    raise SearchAbortedError(f"Frontier exceeded {max_queue_size} entries")
                queue.append(neighbor)
            metrics.observe_frontier(len(queue))

        return None
