"""
Route simplification.

Removes zero-length segments and vertices that sit in the middle of a
straight run, leaving the minimal vertex list for the same polyline.
"""

from __future__ import annotations

from typing import Sequence

from .geometry import points_equal, subtract_points, vector_to_heading
from .types import Point


def remove_duplicate_points(points: Sequence[Point]) -> list[Point]:
    """Drop points equal to their predecessor."""
    result: list[Point] = []
    for point in points:
        if result and points_equal(result[-1], point):
            continue
        result.append(point)
    return result


def simplify_elbow_points(points: Sequence[Point]) -> list[Point]:
    """
    Collapse collinear vertices.

    A vertex is removed when the segments before and after it have the same
    heading. Reversals are kept, since dropping them would change the drawn
    path. Simplifying an already simplified route returns it unchanged.

    Args:
        points: Route points

    Returns:
        Simplified route
    """
    result: list[Point] = []
    for point in remove_duplicate_points(points):
        if len(result) >= 2:
            incoming = vector_to_heading(subtract_points(result[-1], result[-2]))
            outgoing = vector_to_heading(subtract_points(point, result[-1]))
            if incoming == outgoing:
                result[-1] = point
                continue
        result.append(point)
    return result


__all__ = ["remove_duplicate_points", "simplify_elbow_points"]
