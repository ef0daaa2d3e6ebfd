"""
Vertex model for the route finding system.

A vertex is identified by its ``id``; the optional ``label`` is used for
display only and takes no part in equality or hashing.
"""

from dataclasses import dataclass, field
from typing import Optional

from .base import validate_identifier


@dataclass(frozen=True)
class Vertex:
    """
    Vertex in a routing graph.

    Attributes:
        id (str): Unique identifier of the vertex
        label (Optional[str]): Display label, defaults to the id when rendered
    """

    id: str
    label: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate vertex after initialization."""
        validate_identifier("vertex id", self.id)

    def __str__(self) -> str:
        return self.label if self.label else self.id
