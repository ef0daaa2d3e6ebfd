"""
Custom exceptions for the route finding system.

This module defines the hierarchy of exceptions used throughout the package.
Search outcomes such as an unknown endpoint or an unreachable target are
reported as values (see ``graph_paths.models.SearchError``); the exceptions
below cover construction-time failures, external aborts of a running search,
malformed input documents, and callers that prefer to ``unwrap()`` a result.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required
    validation criteria while building graph values.

    Examples:
        * Negative or non-finite edge weight
        * Schema validation failures on graph documents
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidEdgeWeightError(ValidationError, ValueError):
    """
    Raised when an edge is constructed with an unusable weight.

    Every search algorithm assumes non-negative weights, so the check happens
    when the ``Edge`` is created and never during a search.

    Examples:
        * ``Edge("A", "B", -1.0)``
        * NaN or infinite weights
        * Non-numeric weights
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-positive memory limit
        * Non-positive queue size
        * Negative memory check interval
    """


class GraphFormatError(Exception):
    """
    Raised when a serialized graph cannot be parsed.

    Examples:
        * CSV line without exactly three fields
        * Unparsable weight value
        * JSON document violating the graph schema
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class for failures surfaced while operating on a graph,
    including searches that were unwrapped without a route and searches that
    were aborted from outside.
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NoPathError(GraphOperationError):
    """Raised by ``SearchResult.unwrap()`` when no route connects the endpoints."""


class SearchAbortedError(GraphOperationError):
    """
    Raised when a running search is stopped before reaching a terminal state.

    Examples:
        * Frontier grew past the configured queue size
    """


class SearchCancelledError(SearchAbortedError):
    """Raised when a search observes its cancellation token."""


class MemoryLimitExceededError(SearchAbortedError):
    """Raised when a search grows the process beyond its memory budget."""


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Vertex not found
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested vertex is not part of the graph.

    This exception is a specialized version of ResourceNotFoundError raised
    by ``SearchResult.unwrap()`` for unknown start or end vertices.
    """
