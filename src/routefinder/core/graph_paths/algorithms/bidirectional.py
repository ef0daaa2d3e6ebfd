"""
Bidirectional Dijkstra search.

Two searches run at once: one forward from the start over outgoing arcs and
one backward from the end over incoming arcs. Each step advances the side
whose frontier holds the smaller key (forward on ties). Whenever a vertex
has a finite distance on both sides, ``dist_f + dist_b`` is a candidate
route length; the best candidate and its meeting vertex are tracked.

The search stops when either frontier empties, or when both frontier
minimums are at least the best candidate. Outdated heap entries are pruned
before minimums are compared, so the stopping test uses exact keys.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..base import PathFinder
from ..models import PerformanceMetrics
from ..utils import INFINITY, NO_HANDLE, PriorityQueue, SearchGuard, SearchState

logger = logging.getLogger(__name__)


class BidirectionalFinder(PathFinder):
    """Weight-optimal search expanding from both endpoints."""

    operation = "bidirectional"

    def _search(
        self, start: int, end: int, guard: SearchGuard, metrics: PerformanceMetrics
    ) -> Optional[List[int]]:
        graph = self.graph
        size = graph.vertex_count
        max_queue_size = self.config.max_queue_size

        forward = SearchState(size)
        backward = SearchState(size)
        forward.dist[start] = 0.0
        backward.dist[end] = 0.0

        forward_queue = PriorityQueue(maxsize=max_queue_size)
        backward_queue = PriorityQueue(maxsize=max_queue_size)
        forward_queue.push(start, 0.0)
        backward_queue.push(end, 0.0)

        best = INFINITY
        meeting = NO_HANDLE

        while True:
            self._prune(forward_queue, forward)
            self._prune(backward_queue, backward)
            if forward_queue.empty() or backward_queue.empty():
                break

            forward_min = forward_queue.peek_priority()
            backward_min = backward_queue.peek_priority()
            if forward_min >= best and backward_min >= best:
                break

            guard.check()
            if forward_min <= backward_min:
                best, meeting = self._step(
                    forward_queue, forward, backward, graph.successors, best, meeting, metrics
                )
            else:
                best, meeting = self._step(
                    backward_queue, backward, forward, graph.predecessors, best, meeting, metrics
                )
            metrics.observe_frontier(len(forward_queue) + len(backward_queue))

        if meeting == NO_HANDLE:
            return None

        logger.debug("Frontiers met at %s, best=%s", graph.id_of(meeting), best)
        # forward chain ends at the meeting vertex; backward chain starts there
        return forward.path_to(meeting) + backward.chain(meeting)[1:]

    @staticmethod
    def _prune(queue: PriorityQueue, state: SearchState) -> None:
        """Drop top entries for settled vertices or superseded keys."""
        settled, dist = state.settled, state.dist
        queue.discard_stale(lambda priority, handle: settled[handle] or priority > dist[handle])

    @staticmethod
    def _step(
        queue: PriorityQueue,
        this: SearchState,
        other: SearchState,
        arcs: Callable[[int], Dict[int, float]],
        best: float,
        meeting: int,
        metrics: PerformanceMetrics,
    ) -> Tuple[float, int]:
        """Settle one vertex on one side and relax its arcs."""
        current_dist, current = queue.pop()
        this.settled[current] = 1
        metrics.vertices_settled += 1

        total = current_dist + other.dist[current]
        if total < best:
            best, meeting = total, current

        if current_dist >= best:
            return best, meeting

        for neighbor, weight in arcs(current).items():
            metrics.edges_relaxed += 1
            new_dist = current_dist + weight
            if new_dist < this.dist[neighbor] and new_dist < best:
                this.dist[neighbor] = new_dist
                this.prev[neighbor] = current
                queue.push(neighbor, new_dist)
                total = new_dist + other.dist[neighbor]
                if total < best:
                    best, meeting = total, neighbor

        return best, meeting
