"""
Core graph data structure with an indexed adjacency list representation.

This module provides the immutable Graph class every search algorithm reads.
Each declared vertex is assigned a dense integer handle at construction, and
the adjacency index is a list of ``{neighbor_handle: weight}`` maps indexed by
that handle. Algorithms keep their per-search state in flat lists indexed the
same way, so neighbor iteration, edge lookups and distance updates are O(1)
amortized.

Undirected graphs store both orientations of every edge. Directed graphs also
keep a reverse (incoming) index, which bidirectional search walks from the
target side.
"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from .models import Edge, Vertex

logger = logging.getLogger(__name__)

VertexLike = Union[Vertex, str]


def _build_index(size: int) -> List[Dict[int, float]]:
    return [{} for _ in range(size)]


def _insert(index: List[Dict[int, float]], from_handle: int, to_handle: int, weight: float) -> None:
    """Insert an arc, keeping the cheapest of parallel arcs."""
    current = index[from_handle].get(to_handle)
    if current is None or weight < current:
        index[from_handle][to_handle] = weight


class Graph:
    """
    Immutable weighted graph.

    The graph is constructed once from a fixed vertex set and edge set and is
    read-only afterwards, so a single instance may be shared by any number of
    concurrent searches without locking.

    Edges whose endpoints are not in the vertex set are kept in ``edges`` but
    left out of the adjacency index; to every search such a vertex does not
    exist. Parallel edges between the same ordered pair collapse to the
    minimum weight.

    Attributes:
        directed (bool): Whether edges are one-way
    """

    def __init__(
        self,
        vertices: Iterable[VertexLike],
        edges: Iterable[Edge],
        directed: bool = True,
    ):
        """
        Initialize graph and build its adjacency index.

        Args:
            vertices: Vertex objects or plain vertex IDs. Duplicate IDs keep
                their first occurrence.
            edges: Edge objects connecting the vertices
            directed: If False, every edge can be travelled both ways
        """
        self.directed = directed
        self._vertices: Dict[str, Vertex] = {}
        for item in vertices:
            vertex = item if isinstance(item, Vertex) else Vertex(item)
            self._vertices.setdefault(vertex.id, vertex)

        self._ids: List[str] = list(self._vertices)
        self._handles: Dict[str, int] = {vertex_id: i for i, vertex_id in enumerate(self._ids)}
        self._edges: Tuple[Edge, ...] = tuple(edges)

        size = len(self._ids)
        self._forward = _build_index(size)
        self._reverse = _build_index(size) if directed else self._forward
        self._arc_count = 0
        self._build_adjacency_list()

    def _build_adjacency_list(self) -> None:
        """Build the adjacency index in a single pass over the edges."""
        skipped = 0
        for edge in self._edges:
            source = self._handles.get(edge.from_vertex)
            target = self._handles.get(edge.to_vertex)
            if source is None or target is None:
                skipped += 1
                logger.debug("Edge %s references an undeclared vertex; not indexed", edge)
                continue
            _insert(self._forward, source, target, edge.weight)
            if self.directed:
                _insert(self._reverse, target, source, edge.weight)
            else:
                _insert(self._forward, target, source, edge.weight)

        self._arc_count = sum(len(arcs) for arcs in self._forward)
        if skipped:
            logger.debug("%d edge(s) left out of the adjacency index", skipped)

    # Handle-level API used by the search algorithms

    def handle_of(self, vertex_id: str) -> Optional[int]:
        """Return the dense handle of a vertex, or None if it is not declared."""
        return self._handles.get(vertex_id)

    def id_of(self, handle: int) -> str:
        """Return the vertex ID behind a handle."""
        return self._ids[handle]

    def successors(self, handle: int) -> Dict[int, float]:
        """Outgoing arcs of a vertex as ``{neighbor_handle: weight}``. Do not mutate."""
        return self._forward[handle]

    def predecessors(self, handle: int) -> Dict[int, float]:
        """Incoming arcs of a vertex as ``{neighbor_handle: weight}``. Do not mutate."""
        return self._reverse[handle]

    def weight_between(self, from_handle: int, to_handle: int) -> Optional[float]:
        """Weight of the arc between two handles, if any."""
        return self._forward[from_handle].get(to_handle)

    # Public API

    @property
    def vertex_count(self) -> int:
        """Number of declared vertices."""
        return len(self._ids)

    @property
    def edge_count(self) -> int:
        """Number of edges supplied at construction."""
        return len(self._edges)

    @property
    def arc_count(self) -> int:
        """Number of traversable arcs in the index (undirected edges count twice)."""
        return self._arc_count

    def has_vertex(self, vertex_id: str) -> bool:
        """Check if a vertex exists in the graph."""
        return vertex_id in self._handles

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._handles

    def __len__(self) -> int:
        return len(self._ids)

    def get_vertex(self, vertex_id: str) -> Optional[Vertex]:
        """Get a vertex by ID."""
        return self._vertices.get(vertex_id)

    def get_vertices(self) -> FrozenSet[Vertex]:
        """Get all vertices in the graph."""
        return frozenset(self._vertices.values())

    def get_vertex_ids(self) -> List[str]:
        """Get all vertex IDs in declaration order."""
        return list(self._ids)

    def get_edges(self) -> Tuple[Edge, ...]:
        """Get all edges the graph was built from."""
        return self._edges

    def get_neighbors(self, vertex_id: str) -> Set[Tuple[str, float]]:
        """
        Get the outgoing neighbors of a vertex.

        Returns:
            Set of ``(destination, weight)`` pairs, empty if the vertex is unknown
        """
        handle = self._handles.get(vertex_id)
        if handle is None:
            return set()
        return {(self._ids[n], w) for n, w in self._forward[handle].items()}

    def get_incoming(self, vertex_id: str) -> Set[Tuple[str, float]]:
        """
        Get the incoming neighbors of a vertex.

        Returns:
            Set of ``(origin, weight)`` pairs, empty if the vertex is unknown
        """
        handle = self._handles.get(vertex_id)
        if handle is None:
            return set()
        return {(self._ids[n], w) for n, w in self._reverse[handle].items()}

    def get_edge_weight(self, from_vertex: str, to_vertex: str) -> Optional[float]:
        """
        Get the weight of the arc between two vertices.

        Undirected graphs answer both orderings; directed graphs only the
        declared orientation.
        """
        source = self._handles.get(from_vertex)
        target = self._handles.get(to_vertex)
        if source is None or target is None:
            return None
        return self._forward[source].get(target)

    def has_edge(self, from_vertex: str, to_vertex: str) -> bool:
        """Check if an arc exists between two vertices."""
        return self.get_edge_weight(from_vertex, to_vertex) is not None

    def get_degree(self, vertex_id: str, reverse: bool = False) -> int:
        """Get the out-degree (or in-degree when ``reverse``) of a vertex."""
        handle = self._handles.get(vertex_id)
        if handle is None:
            return 0
        index = self._reverse if reverse else self._forward
        return len(index[handle])

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], directed: bool = True) -> "Graph":
        """Create a Graph whose vertex set is every endpoint mentioned by the edges."""
        edges = list(edges)
        vertex_ids: Dict[str, None] = {}
        for edge in edges:
            vertex_ids.setdefault(edge.from_vertex)
            vertex_ids.setdefault(edge.to_vertex)
        return cls(vertex_ids, edges, directed=directed)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count}, {kind})"
