"""
Core type definitions and protocols.

This module provides the protocol describing the read-only graph surface the
search algorithms depend on.
"""

from typing import Dict, Optional, Protocol, Set, Tuple


class GraphProtocol(Protocol):
    """Protocol defining required graph operations."""

    directed: bool

    def has_vertex(self, vertex_id: str) -> bool:
        """Check if a vertex exists."""
        ...

    def get_neighbors(self, vertex_id: str) -> Set[Tuple[str, float]]:
        """Get outgoing ``(destination, weight)`` pairs of a vertex."""
        ...

    def get_edge_weight(self, from_vertex: str, to_vertex: str) -> Optional[float]:
        """Get the weight of the arc between two vertices if it exists."""
        ...

    def handle_of(self, vertex_id: str) -> Optional[int]:
        """Get the dense handle of a vertex."""
        ...

    def id_of(self, handle: int) -> str:
        """Get the vertex ID behind a handle."""
        ...

    def successors(self, handle: int) -> Dict[int, float]:
        """Get outgoing arcs by handle."""
        ...

    def predecessors(self, handle: int) -> Dict[int, float]:
        """Get incoming arcs by handle."""
        ...

    def weight_between(self, from_handle: int, to_handle: int) -> Optional[float]:
        """Get the weight of the arc between two handles."""
        ...

    @property
    def vertex_count(self) -> int:
        """Number of declared vertices."""
        ...
