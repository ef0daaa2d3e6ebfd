"""Core graph and route finding functionality."""

from .exceptions import (
    ConfigurationError,
    GraphFormatError,
    GraphOperationError,
    InvalidEdgeWeightError,
    MemoryLimitExceededError,
    NoPathError,
    SearchAbortedError,
    SearchCancelledError,
    ValidationError,
    VertexNotFoundError,
)
from .graph import Graph
from .models import Edge, Vertex
from .types import GraphProtocol

__all__ = [
    "ConfigurationError",
    "Edge",
    "Graph",
    "GraphFormatError",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidEdgeWeightError",
    "MemoryLimitExceededError",
    "NoPathError",
    "SearchAbortedError",
    "SearchCancelledError",
    "ValidationError",
    "Vertex",
    "VertexNotFoundError",
]
