"""
Utility structures for route finding operations.

This module holds the pieces every search strategy shares:
- PriorityQueue: binary heap with lazy deletion instead of decrease-key
- SearchState: per-direction distance/predecessor/settled arrays indexed by
  the graph's dense vertex handles
- build_route: turns a handle sequence into a Route
- MemoryManager, CancellationToken, SearchGuard: checks performed once per
  frontier extraction
"""

import os
import threading
import time
from heapq import heappop, heappush
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

import psutil

from ..exceptions import MemoryLimitExceededError, SearchAbortedError, SearchCancelledError
from ..types import GraphProtocol
from .models import Route

if TYPE_CHECKING:
    from .config import SearchConfig

# Constants
INFINITY = float("inf")
NO_HANDLE = -1
MAX_QUEUE_SIZE = 10_000_000  # Frontier entries, including stale ones


class PriorityQueue:
    """
    Min-heap of ``(priority, handle)`` entries with lazy deletion.

    A vertex may be pushed several times with different priorities; entries
    that no longer describe the vertex's best known key are left in place
    and skipped by the caller when popped (or pruned with ``discard_stale``).
    Entries with equal priority pop in insertion order.
    """

    __slots__ = ("_heap", "_counter", "_maxsize")

    def __init__(self, maxsize: int = MAX_QUEUE_SIZE):
        self._heap: List[Tuple[float, int, int]] = []
        self._counter = 0
        self._maxsize = maxsize

    def push(self, handle: int, priority: float) -> None:
        """Add an entry for ``handle``."""
        if len(self._heap) >= self._maxsize:
            raise SearchAbortedError(f"Frontier exceeded {self._maxsize} entries")
        heappush(self._heap, (priority, self._counter, handle))
        self._counter += 1

    def pop(self) -> Tuple[float, int]:
        """Remove and return the ``(priority, handle)`` entry with the lowest priority."""
        priority, _, handle = heappop(self._heap)
        return priority, handle

    def peek_priority(self) -> float:
        """Lowest priority in the heap, or infinity when empty."""
        return self._heap[0][0] if self._heap else INFINITY

    def discard_stale(self, is_stale: Callable[[float, int], bool]) -> None:
        """Pop entries off the top while ``is_stale(priority, handle)`` holds."""
        heap = self._heap
        while heap and is_stale(heap[0][0], heap[0][2]):
            heappop(heap)

    def empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class SearchState:
    """
    Working state of one search direction.

    All three arrays are indexed by vertex handle and owned by a single
    search invocation.
    """

    __slots__ = ("dist", "prev", "settled")

    def __init__(self, size: int):
        self.dist: List[float] = [INFINITY] * size
        self.prev: List[int] = [NO_HANDLE] * size
        self.settled = bytearray(size)

    def chain(self, handle: int) -> List[int]:
        """Handles from ``handle`` following predecessors to the search root."""
        chain = [handle]
        current = self.prev[handle]
        while current != NO_HANDLE:
            chain.append(current)
            current = self.prev[current]
        return chain

    def path_to(self, handle: int) -> List[int]:
        """Handles from the search root to ``handle``."""
        path = self.chain(handle)
        path.reverse()
        return path


def build_route(graph: GraphProtocol, handles: Sequence[int]) -> Route:
    """
    Create a Route from a handle sequence.

    The distance is summed left to right over the graph's arc weights, which
    is the same order every forward relaxation accumulates in, so the stored
    distance matches a re-summation of the route exactly.
    """
    total = 0.0
    for from_handle, to_handle in zip(handles, handles[1:]):
        weight = graph.weight_between(from_handle, to_handle)
        if weight is None:
            raise SearchAbortedError(
                f"Reconstructed path uses a missing arc "
                f"{graph.id_of(from_handle)} -> {graph.id_of(to_handle)}"
            )
        total += weight
    return Route(tuple(graph.id_of(h) for h in handles), total)


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class MemoryManager:
    """Samples process memory and enforces a per-search growth budget."""

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = 0.1):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._check_interval = check_interval
        self._last_check = time.monotonic()

    def check_memory(self) -> None:
        """
        Check if memory growth exceeds the budget.

        Raises:
            MemoryLimitExceededError: If the process grew past the budget
        """
        now = time.monotonic()
        if now - self._last_check < self._check_interval:
            return
        self._last_check = now
        if not self.max_memory:
            return

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if current - self.start_memory > self.max_memory:
            raise MemoryLimitExceededError(
                f"Memory usage grew by {(current - self.start_memory) / 1024 / 1024:.1f}MB, "
                f"limit is {self.max_memory / 1024 / 1024:.1f}MB"
            )

    @property
    def peak_memory_bytes(self) -> int:
        return self._peak_memory


class CancellationToken:
    """
    Cooperative cancellation signal.

    ``cancel()`` may be called from any thread; a running search observes it
    at its next frontier extraction and raises ``SearchCancelledError``.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise SearchCancelledError("Search cancelled")


class SearchGuard:
    """Checks a search performs once per frontier extraction."""

    def __init__(self, config: "SearchConfig"):
        self._token = config.cancel_token
        self._memory = (
            MemoryManager(config.max_memory_mb, config.memory_check_interval)
            if config.max_memory_mb
            else None
        )

    def check(self) -> None:
        """
        Raises:
            SearchCancelledError: If the token was cancelled
            MemoryLimitExceededError: If the memory budget was exceeded
        """
        if self._token is not None:
            self._token.raise_if_cancelled()
        if self._memory is not None:
            self._memory.check_memory()

    @property
    def peak_memory_bytes(self) -> Optional[int]:
        return self._memory.peak_memory_bytes if self._memory else None
