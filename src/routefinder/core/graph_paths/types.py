"""Type definitions for graph route finding."""

from enum import Enum
from typing import Callable


class Algorithm(Enum):
    """Enumeration of route finding strategies."""

    DIJKSTRA = "dijkstra"  # Weight-optimal, single direction
    BFS = "bfs"  # Hop-optimal, ignores weights when ordering
    A_STAR = "a_star"  # Weight-optimal with an admissible heuristic
    BIDIRECTIONAL = "bidirectional"  # Weight-optimal, meet in the middle

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Look up an algorithm by value or member name, case-insensitively."""
        key = name.strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        if key in ("astar", "a*"):
            return cls.A_STAR
        raise ValueError(f"Unknown algorithm: {name}")


class SearchErrorKind(Enum):
    """Kinds of search failure reported as values."""

    UNKNOWN_VERTEX = "unknown_vertex"
    NO_PATH = "no_path"


class Endpoint(Enum):
    """Which endpoint of a search an error refers to."""

    START = "start"
    END = "end"


# Cost-to-go estimate: vertex ID -> non-negative estimate of remaining cost.
# Admissibility is the caller's obligation; it is never checked.
Heuristic = Callable[[str], float]
