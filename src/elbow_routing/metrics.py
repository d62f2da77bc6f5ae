"""
Route quality metrics.

Provides quantitative checks for routed elbow paths:
- Orthogonality: every segment is horizontal or vertical
- Bend count: number of direction changes
- Path length: total Manhattan length of the route
- Obstacle crossings: segments passing through a box interior

All metrics work with the point sequences returned by the router.
"""

from __future__ import annotations

from typing import Any, Sequence

from .geometry import subtract_points, vector_to_heading
from .types import Bounds, Point


def is_orthogonal(points: Sequence[Point]) -> bool:
    """
    Check that every segment is axis-aligned and non-degenerate.

    Each consecutive pair must share exactly one coordinate.
    """
    for a, b in zip(points, points[1:]):
        same_x = a[0] == b[0]
        same_y = a[1] == b[1]
        if same_x == same_y:
            return False
    return True


def bend_count(points: Sequence[Point]) -> int:
    """Number of vertices where the route changes heading."""
    headings = [vector_to_heading(subtract_points(b, a)) for a, b in zip(points, points[1:])]
    return sum(1 for h1, h2 in zip(headings, headings[1:]) if h1 != h2)


def path_length(points: Sequence[Point]) -> float:
    """Total length of an orthogonal route."""
    return sum(abs(b[0] - a[0]) + abs(b[1] - a[1]) for a, b in zip(points, points[1:]))


def segment_crosses_bounds(a: Point, b: Point, bounds: Bounds) -> bool:
    """
    Check if an axis-aligned segment passes through the interior of a box.

    Running along the outline or touching a corner does not count.
    """
    if a[1] == b[1]:
        lo, hi = sorted((a[0], b[0]))
        return bounds.min_y < a[1] < bounds.max_y and lo < bounds.max_x and hi > bounds.min_x
    if a[0] == b[0]:
        lo, hi = sorted((a[1], b[1]))
        return bounds.min_x < a[0] < bounds.max_x and lo < bounds.max_y and hi > bounds.min_y
    return False


def route_crosses_bounds(points: Sequence[Point], bounds: Bounds) -> bool:
    """Check if any segment of the route enters the interior of ``bounds``."""
    return any(segment_crosses_bounds(a, b, bounds) for a, b in zip(points, points[1:]))


def route_quality_summary(
    points: Sequence[Point],
    obstacles: Sequence[Bounds] = (),
) -> dict[str, Any]:
    """
    Compute a summary of route quality metrics.

    Args:
        points: Route points
        obstacles: Boxes the route was meant to avoid

    Returns:
        Dictionary with:
        - orthogonal: Whether all segments are axis-aligned
        - points: Number of points
        - bends: Number of direction changes
        - length: Total route length
        - obstacle_crossings: Number of obstacles the route passes through
    """
    return {
        "orthogonal": is_orthogonal(points),
        "points": len(points),
        "bends": bend_count(points),
        "length": path_length(points),
        "obstacle_crossings": sum(1 for box in obstacles if route_crosses_bounds(points, box)),
    }


__all__ = [
    "is_orthogonal",
    "bend_count",
    "path_length",
    "segment_crosses_bounds",
    "route_crosses_bounds",
    "route_quality_summary",
]
