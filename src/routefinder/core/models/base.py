"""
Core domain models base module for the route finding system.

This module provides the validation helpers shared by the vertex and edge
models.
"""

import math
from numbers import Real

from ..exceptions import InvalidEdgeWeightError


def validate_identifier(name: str, value: str) -> None:
    """Validate that an identifier is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def validate_weight(value: float) -> float:
    """
    Validate an edge weight and return it as a float.

    Weights must be finite, real and non-negative. ``bool`` is rejected even
    though it subclasses ``int``.

    Raises:
        InvalidEdgeWeightError: If the weight is unusable
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidEdgeWeightError(f"Edge weight must be numeric, got {value!r}")
    weight = float(value)
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidEdgeWeightError(f"Edge weight must be a finite number, got {weight}")
    if weight < 0:
        raise InvalidEdgeWeightError(f"Edge weight must be non-negative, got {weight}")
    return weight
