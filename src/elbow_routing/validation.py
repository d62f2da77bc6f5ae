"""
Input validation utilities for elbow routing.

Provides the exception hierarchy and the checks run when points, bounds,
shapes and configuration objects are constructed. Routing itself never
raises for geometric reasons; invalid values are rejected up front.
"""

from __future__ import annotations

import math
from typing import Any, Sequence


class ValidationError(ValueError):
    """Base exception for routing input validation errors."""

    pass


class InvalidPointError(ValidationError):
    """Raised when a point is malformed or has non-finite coordinates."""

    pass


class InvalidBoundsError(ValidationError):
    """Raised when a bounding box has min > max or non-finite edges."""

    pass


class InvalidShapeError(ValidationError):
    """Raised when a bindable shape has invalid geometry."""

    pass


class InvalidConfigError(ValidationError):
    """Raised when routing configuration values are out of range."""

    pass


def validate_point(point: Sequence[Any], name: str = "point") -> tuple[float, float]:
    """
    Validate a 2D point.

    Args:
        point: (x, y) sequence
        name: Label used in error messages

    Returns:
        Validated (x, y) tuple of floats

    Raises:
        InvalidPointError: If the point does not have 2 finite coordinates
    """
    if len(point) != 2:
        raise InvalidPointError(f"{name} must have 2 elements (x, y), got {len(point)}")

    x, y = float(point[0]), float(point[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidPointError(f"{name} must have finite coordinates, got ({x}, {y})")

    return x, y


def validate_points(
    points: Sequence[Sequence[Any]],
    name: str = "points",
) -> tuple[tuple[float, float], ...]:
    """
    Validate a sequence of 2D points.

    Args:
        points: Sequence of (x, y) points
        name: Label used in error messages

    Returns:
        Tuple of validated (x, y) tuples

    Raises:
        InvalidPointError: If any point is invalid
    """
    return tuple(validate_point(p, f"{name}[{i}]") for i, p in enumerate(points))


def validate_bounds(min_x: float, min_y: float, max_x: float, max_y: float) -> None:
    """
    Validate axis-aligned bounds.

    Raises:
        InvalidBoundsError: If any edge is non-finite or min exceeds max
    """
    if not all(math.isfinite(v) for v in (min_x, min_y, max_x, max_y)):
        raise InvalidBoundsError(
            f"Bounds must be finite, got ({min_x}, {min_y}, {max_x}, {max_y})"
        )
    if min_x > max_x:
        raise InvalidBoundsError(f"Bounds min_x ({min_x}) exceeds max_x ({max_x})")
    if min_y > max_y:
        raise InvalidBoundsError(f"Bounds min_y ({min_y}) exceeds max_y ({max_y})")


def validate_shape_geometry(
    x: float,
    y: float,
    width: float,
    height: float,
    angle: float,
) -> None:
    """
    Validate the geometry of a bindable shape.

    Raises:
        InvalidShapeError: If position, size or angle is invalid
    """
    if not all(math.isfinite(v) for v in (x, y, width, height, angle)):
        raise InvalidShapeError(
            f"Shape geometry must be finite, got x={x}, y={y}, "
            f"width={width}, height={height}, angle={angle}"
        )
    if width < 0:
        raise InvalidShapeError(f"Shape width must be non-negative, got {width}")
    if height < 0:
        raise InvalidShapeError(f"Shape height must be non-negative, got {height}")


__all__ = [
    "ValidationError",
    "InvalidPointError",
    "InvalidBoundsError",
    "InvalidShapeError",
    "InvalidConfigError",
    "validate_point",
    "validate_points",
    "validate_bounds",
    "validate_shape_geometry",
]
