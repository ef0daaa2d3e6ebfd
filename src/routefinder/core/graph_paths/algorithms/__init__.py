"""Route finding algorithm implementations."""

from .astar import AStarFinder
from .bidirectional import BidirectionalFinder
from .breadth_first import BreadthFirstFinder
from .shortest_path import DijkstraFinder

__all__ = [
    "AStarFinder",
    "BidirectionalFinder",
    "BreadthFirstFinder",
    "DijkstraFinder",
]
