"""
Edge model for the route finding system.

Edges are immutable and validated on construction: a negative, NaN or
infinite weight is rejected here so that no search ever observes one.
"""

from dataclasses import dataclass

from .base import validate_identifier, validate_weight


@dataclass(frozen=True)
class Edge:
    """
    Weighted connection between two vertices.

    Whether the connection can be travelled in both directions is a property
    of the graph that holds the edge, not of the edge itself.

    Attributes:
        from_vertex (str): Source vertex ID
        to_vertex (str): Target vertex ID
        weight (float): Non-negative traversal cost

    Raises:
        InvalidEdgeWeightError: If ``weight`` is negative, non-finite or not a number
        ValueError: If either endpoint is empty
    """

    from_vertex: str
    to_vertex: str
    weight: float

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_identifier("source vertex", self.from_vertex)
        validate_identifier("target vertex", self.to_vertex)
        # Frozen dataclass: normalise ints to float in place.
        object.__setattr__(self, "weight", validate_weight(self.weight))

    def reversed(self) -> "Edge":
        """Return the same edge pointing the other way."""
        return Edge(self.to_vertex, self.from_vertex, self.weight)

    def __str__(self) -> str:
        return f"{self.from_vertex} -> {self.to_vertex} (weight: {self.weight})"
