"""
Geometry primitives for elbow routing.

Pure functions over 2D points and vectors represented as ``(x, y)`` tuples.
Coordinates follow screen conventions: x grows to the right and y grows
downward, so a positive rotation angle turns clockwise on screen.

Cardinal vectors are kept exact: quarter-turn rotations and heading
extraction never go through trigonometry, which lets the routing code
compare directions with ``==`` instead of tolerances.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

if TYPE_CHECKING:
    from .types import Point, Segment, Vector

# Tolerance for treating two segments as parallel
_PARALLEL_EPS = 1e-10


def add_vectors(a: Sequence[float], b: Sequence[float]) -> tuple[float, float]:
    """Component-wise sum of two points or vectors."""
    return (a[0] + b[0], a[1] + b[1])


def subtract_points(a: Point, b: Point) -> Vector:
    """Vector pointing from ``b`` to ``a``."""
    return (a[0] - b[0], a[1] - b[1])


def scale_vector(v: Sequence[float], factor: float) -> Vector:
    """Multiply a vector by a scalar."""
    return (v[0] * factor, v[1] * factor)


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors."""
    return a[0] * b[0] + a[1] * b[1]


def cross_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Z component of the 3D cross product of two 2D vectors."""
    return a[0] * b[1] - a[1] * b[0]


def distance_sq(a: Point, b: Point) -> float:
    """Squared Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def points_equal(a: Point, b: Point) -> bool:
    """Exact coordinate equality."""
    return a[0] == b[0] and a[1] == b[1]


def normalize(v: Sequence[float]) -> Vector:
    """
    Scale a vector to unit length.

    Zero-length vectors return the zero vector instead of NaN, which the
    routing code reads as "no direction constraint".
    """
    length = math.hypot(v[0], v[1])
    if length == 0:
        return (0.0, 0.0)
    return (v[0] / length, v[1] / length)


def vector_to_heading(v: Sequence[float]) -> Vector:
    """
    Snap a vector to its dominant cardinal direction.

    Returns one of ``(1, 0)``, ``(-1, 0)``, ``(0, 1)``, ``(0, -1)``, or
    ``(0, 0)`` for the zero vector. Horizontal wins when both axes have the
    same magnitude.
    """
    x, y = v[0], v[1]
    if x == 0 and y == 0:
        return (0, 0)
    if abs(x) >= abs(y):
        return (1, 0) if x > 0 else (-1, 0)
    return (0, 1) if y > 0 else (0, -1)


def rotate_vector_clockwise(v: Sequence[float]) -> Vector:
    """Exact quarter turn clockwise on screen (right becomes down)."""
    return (-v[1] + 0, v[0] + 0)


def rotate_vector_counterclockwise(v: Sequence[float]) -> Vector:
    """Exact quarter turn counter-clockwise on screen (right becomes up)."""
    return (v[1] + 0, -v[0] + 0)


def rotate_vector(v: Sequence[float], angle: float) -> Vector:
    """Rotate a vector by ``angle`` radians around the origin."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (v[0] * c - v[1] * s, v[0] * s + v[1] * c)


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotate ``point`` by ``angle`` radians around ``center``."""
    if angle == 0:
        return (float(point[0]), float(point[1]))
    dx, dy = rotate_vector(subtract_points(point, center), angle)
    return (center[0] + dx, center[1] + dy)


def rotate_points(points: Sequence[Point], center: Point, angle: float) -> list[Point]:
    """
    Rotate several points around a common center in one pass.

    Args:
        points: Points to rotate
        center: Rotation center
        angle: Rotation angle in radians

    Returns:
        Rotated points, in input order
    """
    if angle == 0:
        return [(float(x), float(y)) for x, y in points]

    c = np.asarray(center, dtype=float)
    arr = np.asarray(points, dtype=float) - c
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
    rotated = arr @ rotation.T + c
    return [(float(x), float(y)) for x, y in rotated]


def scale_up(point: Point, center: Point, multiplier: float) -> Point:
    """Push ``point`` away from ``center`` by ``multiplier``."""
    return (
        center[0] + (point[0] - center[0]) * multiplier,
        center[1] + (point[1] - center[1]) * multiplier,
    )


def _triangle_sign(p1: Point, p2: Point, p3: Point) -> float:
    return (p1[0] - p3[0]) * (p2[1] - p3[1]) - (p2[0] - p3[0]) * (p1[1] - p3[1])


def point_in_triangle(point: Point, a: Point, b: Point, c: Point) -> bool:
    """Check whether ``point`` lies inside or on the triangle ``abc``."""
    d1 = _triangle_sign(point, a, b)
    d2 = _triangle_sign(point, b, c)
    d3 = _triangle_sign(point, c, a)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0

    return not (has_neg and has_pos)


def segments_intersect_at(a: Segment, b: Segment) -> Optional[Point]:
    """
    Intersection point of two closed segments.

    Coordinates fixed by an axis-aligned segment are copied rather than
    interpolated, so crossings of horizontal and vertical segments are exact.

    Args:
        a: First segment (p1, p2)
        b: Second segment (p3, p4)

    Returns:
        Intersection point, or None if the segments do not cross or are
        parallel
    """
    (x1, y1), (x2, y2) = a
    (x3, y3), (x4, y4) = b

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(denom) < _PARALLEL_EPS:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0 <= t <= 1 and 0 <= u <= 1:
        ix = x3 if x3 == x4 else x1 + t * (x2 - x1)
        iy = y3 if y3 == y4 else y1 + t * (y2 - y1)
        return (ix, iy)

    return None


def segments_overlap(a: Segment, b: Segment) -> bool:
    """
    Check whether two segments are collinear and share a stretch of
    non-zero length.
    """
    da = subtract_points(a[1], a[0])
    db = subtract_points(b[1], b[0])
    if da == (0, 0) or db == (0, 0):
        return False
    if abs(cross_product(da, db)) > _PARALLEL_EPS:
        return False
    if abs(cross_product(da, subtract_points(b[0], a[0]))) > _PARALLEL_EPS:
        return False

    # Project onto the dominant axis of ``a``
    axis = 0 if abs(da[0]) >= abs(da[1]) else 1
    a_lo, a_hi = sorted((a[0][axis], a[1][axis]))
    b_lo, b_hi = sorted((b[0][axis], b[1][axis]))
    return min(a_hi, b_hi) - max(a_lo, b_lo) > 0


__all__ = [
    "add_vectors",
    "subtract_points",
    "scale_vector",
    "dot_product",
    "cross_product",
    "distance_sq",
    "distance",
    "points_equal",
    "normalize",
    "vector_to_heading",
    "rotate_vector_clockwise",
    "rotate_vector_counterclockwise",
    "rotate_vector",
    "rotate_point",
    "rotate_points",
    "scale_up",
    "point_in_triangle",
    "segments_intersect_at",
    "segments_overlap",
]
