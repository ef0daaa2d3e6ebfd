"""
Core domain models package for the route finding system.

This package provides the immutable value objects a graph is built from.
"""

from .base import validate_identifier, validate_weight
from .edge import Edge
from .vertex import Vertex

__all__ = [
    # Base utilities
    "validate_identifier",
    "validate_weight",
    # Models
    "Edge",
    "Vertex",
]
