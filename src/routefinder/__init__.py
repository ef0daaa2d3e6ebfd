"""
routefinder - Optimal routes through weighted graphs

This package computes shortest routes between labeled vertices of an
immutable weighted graph. It includes:

- Core graph model with construction-time validation
- Dijkstra, breadth-first, A* and bidirectional Dijkstra search
- Heuristics and ready-made graph templates
- CSV / JSON import and export, and a command line interface
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("routefinder requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import Graph
from .core.graph_paths import Algorithm, PathFinding, Route, SearchResult
from .core.models import Edge, Vertex

__all__ = [
    "Algorithm",
    "Edge",
    "Graph",
    "PathFinding",
    "Route",
    "SearchResult",
    "Vertex",
]
