"""
Ready-made graphs for demos and tests.
"""

from typing import List

from .graph import Graph
from .models import Edge, Vertex


def linear_graph() -> Graph:
    """Directed chain A -> B -> C -> D with unit weights."""
    ids = ["A", "B", "C", "D"]
    edges = [Edge(a, b, 1.0) for a, b in zip(ids, ids[1:])]
    return Graph(ids, edges, directed=True)


def grid_graph(rows: int = 3, cols: int = 3) -> Graph:
    """
    Undirected 4-connected grid with unit weights.

    Vertex IDs are ``"(i,j)"`` with ``i`` the row and ``j`` the column, so the
    coordinate heuristics can read them.
    """
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be positive")

    ids = [f"({i},{j})" for i in range(rows) for j in range(cols)]
    edges: List[Edge] = []
    for i in range(rows):
        for j in range(cols):
            if i + 1 < rows:
                edges.append(Edge(f"({i},{j})", f"({i + 1},{j})", 1.0))
            if j + 1 < cols:
                edges.append(Edge(f"({i},{j})", f"({i},{j + 1})", 1.0))
    return Graph(ids, edges, directed=False)


def complete_graph(n: int) -> Graph:
    """Undirected complete graph on ``N0..N{n-1}`` with unit weights."""
    if n < 0:
        raise ValueError("n must be non-negative")
    ids = [f"N{i}" for i in range(n)]
    edges = [Edge(ids[i], ids[j], 1.0) for i in range(n) for j in range(i + 1, n)]
    return Graph(ids, edges, directed=False)


def city_network_graph() -> Graph:
    """Five US East Coast cities joined by road distances in miles."""
    cities = ["New York", "Boston", "Philadelphia", "Washington", "Atlanta"]
    edges = [
        Edge("New York", "Boston", 215.0),
        Edge("New York", "Philadelphia", 95.0),
        Edge("Philadelphia", "Washington", 140.0),
        Edge("Washington", "Atlanta", 640.0),
        Edge("New York", "Washington", 225.0),
        Edge("Boston", "Philadelphia", 305.0),
    ]
    return Graph([Vertex(city) for city in cities], edges, directed=False)


def sample_graph() -> Graph:
    """
    Undirected five-vertex reference graph.

    The shortest A -> E route is A, C, B, D, E with distance 10.
    """
    edges = [
        Edge("A", "B", 4.0),
        Edge("A", "C", 2.0),
        Edge("B", "C", 1.0),
        Edge("B", "D", 5.0),
        Edge("C", "D", 8.0),
        Edge("C", "E", 10.0),
        Edge("D", "E", 2.0),
    ]
    return Graph(["A", "B", "C", "D", "E"], edges, directed=False)


TEMPLATES = {
    "linear": linear_graph,
    "grid": grid_graph,
    "city": city_network_graph,
    "complete": lambda: complete_graph(5),
    "sample": sample_graph,
}
