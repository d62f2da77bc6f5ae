"""
Type definitions for elbow routing.

Provides the value types shared by the routing modules:
- Point / Vector / Segment: plain tuple aliases
- Heading: the four cardinal directions a committed segment may point
- Bounds: axis-aligned bounding box
- ShapeKind / BindableShape: read-only view of a scene shape
- Binding / Arrow: an arrow's endpoints and the shapes they attach to
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from .geometry import rotate_points
from .validation import (
    validate_bounds,
    validate_point,
    validate_points,
    validate_shape_geometry,
)

Point = Tuple[float, float]
Vector = Tuple[float, float]
Segment = Tuple[Point, Point]

ZERO_VECTOR: Vector = (0, 0)


class Heading(Enum):
    """Cardinal direction in screen coordinates (y grows downward)."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def vector(self) -> Vector:
        """The unit vector for this heading."""
        return self.value

    def opposite(self) -> Heading:
        """Get the opposite heading."""
        return Heading((-self.value[0] + 0, -self.value[1] + 0))

    def rotate_clockwise(self) -> Heading:
        """Turn 90° clockwise on screen."""
        x, y = self.value
        return Heading((-y + 0, x))

    def rotate_counterclockwise(self) -> Heading:
        """Turn 90° counter-clockwise on screen."""
        x, y = self.value
        return Heading((y, -x + 0))

    def is_horizontal(self) -> bool:
        """True for LEFT and RIGHT."""
        return self.value[1] == 0

    @classmethod
    def from_vector(cls, v: Sequence[float]) -> Optional[Heading]:
        """
        Snap a vector to its dominant heading.

        Returns None for the zero vector. Horizontal wins ties.
        """
        x, y = v[0], v[1]
        if x == 0 and y == 0:
            return None
        if abs(x) >= abs(y):
            return cls.RIGHT if x > 0 else cls.LEFT
        return cls.DOWN if y > 0 else cls.UP


@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned bounding box.

    Invariant: min_x <= max_x and min_y <= max_y.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        validate_bounds(self.min_x, self.min_y, self.max_x, self.max_y)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> Bounds:
        """Smallest box containing all ``points``."""
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        """Center of the box."""
        return (
            self.min_x + (self.max_x - self.min_x) / 2,
            self.min_y + (self.max_y - self.min_y) / 2,
        )

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in clockwise order starting at the top-left."""
        return (
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
            (self.max_x, self.max_y),
            (self.min_x, self.max_y),
        )

    def contains(self, point: Point) -> bool:
        """Check if ``point`` is inside or on the boundary."""
        return self.min_x <= point[0] <= self.max_x and self.min_y <= point[1] <= self.max_y

    def intersects(self, other: Bounds) -> bool:
        """Check if the interiors of two boxes overlap."""
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
        )

    def inflate(self, offset: float) -> Bounds:
        """Grow the box by ``offset`` on every side."""
        return Bounds(
            self.min_x - offset,
            self.min_y - offset,
            self.max_x + offset,
            self.max_y + offset,
        )

    def clockwise_segments(self) -> tuple[Segment, Segment, Segment, Segment]:
        """
        The four edges wound clockwise (top, right, bottom, left).

        The consistent winding gives every edge the same notion of "start"
        and "end", which the intersection resolver relies on for its
        left/right offsets.
        """
        tl, tr, br, bl = self.corners
        return ((tl, tr), (tr, br), (br, bl), (bl, tl))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


class ShapeKind(Enum):
    """Shape family of a bindable element."""

    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    ELLIPSE = "ellipse"


@dataclass(frozen=True)
class BindableShape:
    """
    A shape arrows can attach to.

    ``x``/``y`` is the top-left corner of the unrotated shape and ``angle``
    rotates it clockwise around its center. ``binding_gap`` optionally
    overrides the width/height based size of the binding area.
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    angle: float = 0.0
    kind: ShapeKind = ShapeKind.RECTANGLE
    is_deleted: bool = False
    binding_gap: Optional[Callable[[float, float], float]] = field(
        default=None, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        validate_shape_geometry(self.x, self.y, self.width, self.height, self.angle)

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def rotated_corners(self) -> list[Point]:
        """Corners of the shape after applying its rotation."""
        corners = [
            (self.x, self.y),
            (self.x + self.width, self.y),
            (self.x + self.width, self.y + self.height),
            (self.x, self.y + self.height),
        ]
        return rotate_points(corners, self.center, self.angle)

    def bounds(self) -> Bounds:
        """Axis-aligned bounds of the rotated shape."""
        return Bounds.from_points(self.rotated_corners())

    def max_binding_gap(self) -> float:
        """Width of the band around the outline where arrows bind."""
        if self.binding_gap is not None:
            return float(self.binding_gap(self.width, self.height))
        return default_binding_gap(self.kind, self.width, self.height)


def default_binding_gap(kind: ShapeKind, width: float, height: float) -> float:
    """
    Size of the binding area around a shape.

    Bigger shapes get a bigger area, clamped to [16, 32]. Diamonds use the
    side length of their inscribed square so they line up with rectangles.
    """
    shape_ratio = 1 / math.sqrt(2) if kind == ShapeKind.DIAMOND else 1
    smaller_dimension = shape_ratio * min(width, height)
    return max(16.0, min(0.25 * smaller_dimension, 32.0))


@dataclass(frozen=True)
class Binding:
    """Attachment of an arrow endpoint to a shape."""

    element_id: str


@dataclass(frozen=True)
class Arrow:
    """
    An elbow arrow.

    ``points`` are local to the arrow origin ``(x, y)``; only the first and
    last points are used as the endpoints to route between.
    """

    x: float = 0.0
    y: float = 0.0
    points: Tuple[Point, ...] = ()
    start_binding: Optional[Binding] = None
    end_binding: Optional[Binding] = None

    def __post_init__(self) -> None:
        validate_point((self.x, self.y), "arrow origin")
        object.__setattr__(self, "points", validate_points(self.points))

    def to_world(self, point: Point) -> Point:
        """Convert a local point to world space."""
        return (self.x + point[0], self.y + point[1])

    def to_local(self, point: Point) -> Point:
        """Convert a world point to the arrow's local space."""
        return (point[0] - self.x, point[1] - self.y)


__all__ = [
    "Point",
    "Vector",
    "Segment",
    "ZERO_VECTOR",
    "Heading",
    "Bounds",
    "ShapeKind",
    "BindableShape",
    "default_binding_gap",
    "Binding",
    "Arrow",
]
