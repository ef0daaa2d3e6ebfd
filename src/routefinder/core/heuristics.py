"""
Heuristic catalog for A* search.

A heuristic maps a vertex ID to a non-negative estimate of the remaining cost
to the goal. The coordinate heuristics read positions out of IDs shaped
``"x,y"`` or ``"(x,y)"`` (the grid template uses the latter) and measure the
distance to a fixed goal. IDs that carry no coordinates estimate ``0.0``,
which keeps the heuristic admissible on mixed graphs.

Example:
    >>> h = manhattan("(2,2)")
    >>> h("(0,1)")
    3.0
"""

import logging
import math
from typing import Callable, Dict, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Metric = Callable[[Point, Point], float]
HeuristicFunc = Callable[[str], float]


def parse_coordinates(vertex_id: str) -> Optional[Point]:
    """
    Read an ``(x, y)`` pair from a vertex ID.

    Returns:
        The coordinates, or None if the ID does not hold exactly two numbers
    """
    text = vertex_id.strip()
    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1]
    parts = text.split(",")
    if len(parts) != 2:
        return None
    try:
        x, y = float(parts[0]), float(parts[1])
    except ValueError:
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return x, y


def euclidean_distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def manhattan_distance(a: Point, b: Point) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev_distance(a: Point, b: Point) -> float:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


METRICS: Dict[str, Metric] = {
    "euclidean": euclidean_distance,
    "manhattan": manhattan_distance,
    "chebyshev": chebyshev_distance,
}


def zero(vertex_id: str) -> float:
    """Estimate nothing; A* with this heuristic orders like Dijkstra."""
    return 0.0


def _goal_point(goal: Union[str, Point]) -> Point:
    if isinstance(goal, str):
        point = parse_coordinates(goal)
        if point is None:
            raise ValueError(f"Goal '{goal}' does not contain coordinates")
        return point
    x, y = goal
    return float(x), float(y)


def _coordinate_heuristic(goal: Union[str, Point], metric: Metric) -> HeuristicFunc:
    target = _goal_point(goal)

    def estimate(vertex_id: str) -> float:
        point = parse_coordinates(vertex_id)
        if point is None:
            return 0.0
        return metric(point, target)

    return estimate


def euclidean(goal: Union[str, Point]) -> HeuristicFunc:
    """Straight-line distance to ``goal``."""
    return _coordinate_heuristic(goal, euclidean_distance)


def manhattan(goal: Union[str, Point]) -> HeuristicFunc:
    """Grid distance to ``goal``; admissible on 4-connected unit grids."""
    return _coordinate_heuristic(goal, manhattan_distance)


def chebyshev(goal: Union[str, Point]) -> HeuristicFunc:
    """Largest axis difference to ``goal``."""
    return _coordinate_heuristic(goal, chebyshev_distance)


def from_coordinates(
    coordinates: Mapping[str, Point],
    goal: str,
    metric: Union[str, Metric] = "euclidean",
) -> HeuristicFunc:
    """
    Build a heuristic from an explicit vertex -> position mapping.

    Vertices missing from ``coordinates`` estimate ``0.0``.

    Args:
        coordinates: Position of each vertex
        goal: Vertex ID of the search target; must be in ``coordinates``
        metric: Metric name from ``METRICS`` or a callable on two points

    Raises:
        KeyError: If ``goal`` has no position
        ValueError: If ``metric`` names an unknown metric
    """
    if isinstance(metric, str):
        if metric not in METRICS:
            raise ValueError(f"Unknown metric: {metric}")
        metric = METRICS[metric]
    if goal not in coordinates:
        raise KeyError(f"Goal '{goal}' has no coordinates")
    target = coordinates[goal]
    points = dict(coordinates)

    def estimate(vertex_id: str) -> float:
        point = points.get(vertex_id)
        if point is None:
            return 0.0
        return metric(point, target)

    return estimate


def scaled(heuristic: HeuristicFunc, factor: float) -> HeuristicFunc:
    """
    Multiply every estimate by ``factor``.

    A factor above 1 trades optimality for fewer expansions (weighted A*).
    """
    if factor < 0:
        raise ValueError("factor must be non-negative")

    def estimate(vertex_id: str) -> float:
        return heuristic(vertex_id) * factor

    return estimate


def get_heuristic(name: str, goal: Optional[str] = None) -> HeuristicFunc:
    """
    Look up a heuristic by name.

    ``"zero"`` (alias ``"none"``) needs no goal; the coordinate heuristics
    are built against ``goal``.

    Raises:
        ValueError: If the name is unknown, or a coordinate heuristic is
            requested without a goal that holds coordinates
    """
    key = name.strip().lower()
    if key in ("zero", "none"):
        return zero
    if key not in METRICS:
        raise ValueError(f"Unknown heuristic: {name}")
    if goal is None:
        raise ValueError(f"Heuristic '{key}' needs a goal vertex")
    logger.debug("Using %s heuristic towards %s", key, goal)
    return _coordinate_heuristic(goal, METRICS[key])
