"""Graph metrics calculation functionality."""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

from ..graph import Graph
from ..graph_paths.models import Route
from ..models import Edge


@dataclass
class GraphSummary:
    """Container for graph summary statistics."""

    vertex_count: int
    edge_count: int
    arc_count: int
    directed: bool
    density: float
    average_degree: float
    average_edge_weight: float
    shortest_edge: Optional[Edge]
    longest_edge: Optional[Edge]
    most_connected_vertex: Optional[str]

    def to_dict(self) -> Dict[str, Union[str, int, float, bool, None]]:
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "arc_count": self.arc_count,
            "directed": self.directed,
            "density": self.density,
            "average_degree": self.average_degree,
            "average_edge_weight": self.average_edge_weight,
            "shortest_edge": str(self.shortest_edge) if self.shortest_edge else None,
            "longest_edge": str(self.longest_edge) if self.longest_edge else None,
            "most_connected_vertex": self.most_connected_vertex,
        }


def shortest_edge(graph: Graph) -> Optional[Edge]:
    """Edge with the smallest weight, or None for an edgeless graph."""
    edges = graph.get_edges()
    return min(edges, key=lambda edge: edge.weight) if edges else None


def longest_edge(graph: Graph) -> Optional[Edge]:
    """Edge with the largest weight, or None for an edgeless graph."""
    edges = graph.get_edges()
    return max(edges, key=lambda edge: edge.weight) if edges else None


def average_edge_weight(graph: Graph) -> float:
    """Mean weight over the supplied edges; 0.0 for an edgeless graph."""
    edges = graph.get_edges()
    if not edges:
        return 0.0
    return sum(edge.weight for edge in edges) / len(edges)


def vertex_degree(graph: Graph, vertex_id: str) -> int:
    """Number of outgoing neighbors of a vertex."""
    return graph.get_degree(vertex_id)


def most_connected_vertex(graph: Graph) -> Optional[str]:
    """
    Vertex with the highest out-degree.

    Ties go to the vertex declared first.
    """
    vertex_ids = graph.get_vertex_ids()
    if not vertex_ids:
        return None
    return max(vertex_ids, key=graph.get_degree)


def get_density(graph: Graph) -> float:
    """Ratio of indexed arcs to the arcs a complete graph would have."""
    n = graph.vertex_count
    if n < 2:
        return 0.0
    return graph.arc_count / (n * (n - 1))


def summarize(graph: Graph) -> GraphSummary:
    """Calculate all summary statistics of a graph."""
    n = graph.vertex_count
    return GraphSummary(
        vertex_count=n,
        edge_count=graph.edge_count,
        arc_count=graph.arc_count,
        directed=graph.directed,
        density=get_density(graph),
        average_degree=graph.arc_count / n if n else 0.0,
        average_edge_weight=average_edge_weight(graph),
        shortest_edge=shortest_edge(graph),
        longest_edge=longest_edge(graph),
        most_connected_vertex=most_connected_vertex(graph),
    )


def route_distance(graph: Graph, vertices: Union[Route, Sequence[str]]) -> Optional[float]:
    """
    Sum of arc weights along ``vertices``, left to right.

    Returns:
        The distance, or None if the sequence is empty or a hop has no arc
    """
    if isinstance(vertices, Route):
        vertices = vertices.vertices
    if not vertices:
        return None
    total = 0.0
    for from_vertex, to_vertex in zip(vertices, vertices[1:]):
        weight = graph.get_edge_weight(from_vertex, to_vertex)
        if weight is None:
            return None
        total += weight
    return total


def is_valid_route(graph: Graph, route: Union[Route, Sequence[str]]) -> bool:
    """Check every vertex exists and every consecutive pair is joined by an arc."""
    vertices = route.vertices if isinstance(route, Route) else route
    if not vertices:
        return False
    if not all(graph.has_vertex(vertex_id) for vertex_id in vertices):
        return False
    return route_distance(graph, vertices) is not None
