"""Shared test fixtures."""

import random
from typing import Callable, List

import pytest

from routefinder.core.graph import Graph
from routefinder.core.models import Edge
from routefinder.core.templates import sample_graph as build_sample_graph


@pytest.fixture
def sample_graph() -> Graph:
    """
    Fixture providing the undirected reference graph:
    A-B:4, A-C:2, B-C:1, B-D:5, C-D:8, C-E:10, D-E:2
    """
    return build_sample_graph()


@pytest.fixture
def directed_chain() -> Graph:
    """Fixture providing the directed chain A -> B -> C with unit weights."""
    return Graph(["A", "B", "C"], [Edge("A", "B", 1.0), Edge("B", "C", 1.0)], directed=True)


@pytest.fixture
def disconnected_graph() -> Graph:
    """Fixture providing two undirected components {A, B} and {C, D}."""
    return Graph(
        ["A", "B", "C", "D"],
        [Edge("A", "B", 1.0), Edge("C", "D", 1.0)],
        directed=False,
    )


def make_random_graph(
    seed: int,
    vertex_count: int = 12,
    edge_count: int = 30,
    directed: bool = True,
    max_weight: int = 20,
    integer_weights: bool = True,
) -> Graph:
    """Build a reproducible random graph with vertices V0..V{n-1}."""
    rng = random.Random(seed)
    ids = [f"V{i}" for i in range(vertex_count)]
    edges: List[Edge] = []
    for _ in range(edge_count):
        a, b = rng.sample(ids, 2)
        if integer_weights:
            weight = float(rng.randint(0, max_weight))
        else:
            weight = rng.uniform(0.0, max_weight)
        edges.append(Edge(a, b, weight))
    return Graph(ids, edges, directed=directed)


@pytest.fixture
def random_graph() -> Callable[..., Graph]:
    """Fixture providing the seeded random graph factory."""
    return make_random_graph
