"""
Data models for graph route finding.

This module provides the core data structures shared by every search strategy:
- Route: Ordered vertex sequence plus its accumulated distance
- SearchError: Typed failure value (unknown endpoint, no path)
- SearchResult: Either a value or a SearchError, with search metrics attached
- RouteTable: Routes from one source to every reachable vertex
- PerformanceMetrics: Counters collected while a search runs
- PathValidationError: Exception for routes that do not fit a graph

Searches return these values instead of raising, so a caller can branch on
``result.ok`` or call ``result.unwrap()`` to get exception flow.

Example:
    >>> result = PathFinding.find_route(graph, "A", "E")
    >>> if result.ok:
    ...     print(result.value.vertices, result.value.total_distance)
    ('A', 'C', 'B', 'D', 'E') 10.0
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Optional, Tuple, Union

from ..exceptions import NoPathError, VertexNotFoundError
from ..types import GraphProtocol
from .types import Endpoint, SearchErrorKind


class PathValidationError(Exception):
    """
    Raised when a route fails validation against a graph.

    This exception indicates issues such as:
    - A vertex that is not part of the graph
    - Consecutive vertices without a connecting arc
    - A stored distance that differs from the summed arc weights
    """


@dataclass(frozen=True)
class Route:
    """
    Route through a graph.

    Attributes:
        vertices: Vertex IDs from source to target, inclusive
        total_distance: Sum of the arc weights along consecutive vertices

    A single-vertex route with distance 0 represents a search whose start and
    end are the same vertex.

    Example:
        >>> route = Route(("A", "C", "B"), 3.0)
        >>> route.hops
        2
    """

    vertices: Tuple[str, ...]
    total_distance: float

    def __post_init__(self):
        """Validate initialization parameters."""
        if isinstance(self.vertices, str):
            raise TypeError("vertices must be a sequence of vertex IDs, not a string")
        object.__setattr__(self, "vertices", tuple(self.vertices))
        if not self.vertices:
            raise ValueError("Route must contain at least one vertex")
        if isinstance(self.total_distance, bool) or not isinstance(
            self.total_distance, (int, float)
        ):
            raise TypeError("total_distance must be a numeric value")
        object.__setattr__(self, "total_distance", float(self.total_distance))
        if self.total_distance < 0:
            raise ValueError("total_distance cannot be negative")

    @classmethod
    def trivial(cls, vertex_id: str) -> "Route":
        """Route that starts and ends at the same vertex."""
        return cls((vertex_id,), 0.0)

    @property
    def source(self) -> str:
        return self.vertices[0]

    @property
    def target(self) -> str:
        return self.vertices[-1]

    @property
    def hops(self) -> int:
        """Number of arcs travelled."""
        return len(self.vertices) - 1

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, index: int) -> str:
        return self.vertices[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.vertices)

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """Consecutive ``(from, to)`` pairs along the route."""
        return zip(self.vertices, self.vertices[1:])

    def validate(self, graph: GraphProtocol, weight_epsilon: float = 0.0) -> None:
        """
        Validate the route against a graph.

        Performs these checks:
        - Every vertex exists in the graph
        - Every consecutive pair is connected by an arc
        - The stored distance equals the left-to-right sum of arc weights
          (within ``weight_epsilon``; exact by default)

        Args:
            graph: The graph instance to validate against
            weight_epsilon: Allowed absolute difference for the distance check

        Raises:
            PathValidationError: If any validation check fails
            ValueError: If weight_epsilon is negative
        """
        if weight_epsilon < 0:
            raise ValueError("weight_epsilon must be non-negative")

        for vertex_id in self.vertices:
            if not graph.has_vertex(vertex_id):
                raise PathValidationError(f"Vertex {vertex_id} not in graph")

        total = 0.0
        for i, (from_vertex, to_vertex) in enumerate(self.pairs()):
            weight = graph.get_edge_weight(from_vertex, to_vertex)
            if weight is None:
                raise PathValidationError(
                    f"Path discontinuity at position {i}: no arc {from_vertex} -> {to_vertex}"
                )
            total += weight

        if abs(total - self.total_distance) > weight_epsilon:
            raise PathValidationError(
                f"Distance mismatch: calculated {total} != stored {self.total_distance}"
            )

    def __str__(self) -> str:
        return f"Route: {' -> '.join(self.vertices)} (Total Distance: {self.total_distance})"


@dataclass(frozen=True)
class RouteTable:
    """
    Routes from a single source to every vertex it can reach.

    Attributes:
        source: Vertex the routes start from
        routes: Target vertex ID -> route (includes the trivial route to ``source``)
        unreachable: Vertex IDs with no route from ``source``
    """

    source: str
    routes: Dict[str, Route]
    unreachable: FrozenSet[str] = frozenset()

    def get(self, target: str) -> Optional[Route]:
        return self.routes.get(target)

    def distances(self) -> Dict[str, float]:
        """Shortest distance to every reachable vertex."""
        return {target: route.total_distance for target, route in self.routes.items()}

    def __contains__(self, target: object) -> bool:
        return target in self.routes

    def __len__(self) -> int:
        return len(self.routes)


@dataclass(frozen=True)
class SearchError:
    """
    Typed search failure.

    Attributes:
        kind: What went wrong
        message: Human-readable description
        endpoint: For ``UNKNOWN_VERTEX``, which endpoint was missing
        vertex: The vertex ID the error refers to, if any
    """

    kind: SearchErrorKind
    message: str
    endpoint: Optional[Endpoint] = None
    vertex: Optional[str] = None

    @classmethod
    def unknown_vertex(cls, endpoint: Endpoint, vertex_id: str) -> "SearchError":
        label = "Start" if endpoint is Endpoint.START else "End"
        return cls(
            kind=SearchErrorKind.UNKNOWN_VERTEX,
            message=f"{label} vertex '{vertex_id}' not found in graph",
            endpoint=endpoint,
            vertex=vertex_id,
        )

    @classmethod
    def no_path(cls, start: str, end: str) -> "SearchError":
        return cls(
            kind=SearchErrorKind.NO_PATH,
            message=f"No path found from '{start}' to '{end}'",
        )

    def to_exception(self) -> Exception:
        """Exception equivalent of this error, for callers using exception flow."""
        if self.kind is SearchErrorKind.UNKNOWN_VERTEX:
            return VertexNotFoundError(self.message)
        return NoPathError(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass
class PerformanceMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search strategy
        start_time: Operation start timestamp (``time.perf_counter``)
        end_time: Operation end timestamp (0.0 if not completed)
        vertices_settled: Frontier extractions that settled a vertex
        edges_relaxed: Arcs examined during relaxation
        peak_frontier: Largest frontier size observed
        peak_memory_bytes: Peak RSS observed by the memory manager, if sampled

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=perf_counter())
        >>> # ... run search ...
        >>> metrics.end_time = perf_counter()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    vertices_settled: int = 0
    edges_relaxed: int = 0
    peak_frontier: int = 0
    peak_memory_bytes: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    def observe_frontier(self, size: int) -> None:
        if size > self.peak_frontier:
            self.peak_frontier = size

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "vertices_settled": self.vertices_settled,
            "edges_relaxed": self.edges_relaxed,
            "peak_frontier": self.peak_frontier,
            "peak_memory_bytes": self.peak_memory_bytes,
        }


@dataclass(frozen=True)
class SearchResult[T]:
    """
    Outcome of a search: a value or a typed error, never both.

    Attributes:
        value: The route (or route table) on success
        error: The failure on error
        metrics: Counters collected during the search; excluded from equality
            so repeated searches compare equal
    """

    value: Optional[T] = None
    error: Optional[SearchError] = None
    metrics: Optional[PerformanceMetrics] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("SearchResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T, metrics: Optional[PerformanceMetrics] = None) -> "SearchResult[T]":
        return cls(value=value, metrics=metrics)

    @classmethod
    def failure(
        cls, error: SearchError, metrics: Optional[PerformanceMetrics] = None
    ) -> "SearchResult[T]":
        return cls(error=error, metrics=metrics)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value or raise the matching exception.

        Raises:
            VertexNotFoundError: If an endpoint was unknown
            NoPathError: If no route exists
        """
        if self.error is not None:
            raise self.error.to_exception()
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.value is None else self.value
