"""
Bounding-box preparation for elbow routing.

Builds the boxes the router works with around bound shapes:
- binding area: shape bounds grown by the shape's binding gap, used to
  decide whether an endpoint is still attached to its shape
- dongle boxes: larger boxes the first and last stub segments are pushed
  out of, so the arrowhead never overlaps the shape
- hit boxes: smaller boxes the middle of the route steers around

All of them come from ``extended_bounds_for_shape`` so the different offset
regimes always agree on the underlying rotated shape outline.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG, RoutingConfig
from .debug import NullObserver, RoutingObserver
from .geometry import rotate_point
from .types import BindableShape, Bounds, Point, ShapeKind


def extended_bounds_for_shape(shape: BindableShape, offset: float) -> Bounds:
    """
    Axis-aligned bounds of a rotated shape, grown on every side.

    Args:
        shape: Shape to measure
        offset: Distance added on all four sides

    Returns:
        Extended bounds
    """
    return shape.bounds().inflate(offset)


def binding_area(shape: BindableShape) -> Bounds:
    """Region in which an endpoint counts as attached to ``shape``."""
    return extended_bounds_for_shape(shape, shape.max_binding_gap())


def is_point_in_binding_area(shape: BindableShape, point: Point) -> bool:
    return binding_area(shape).contains(point)


def distance_to_shape(shape: BindableShape, point: Point) -> float:
    """
    Signed distance from ``point`` to the outline of ``shape``.

    The point is first moved into the shape's unrotated frame and folded
    into the positive quadrant, so only one side of the outline has to be
    considered. Negative values mean the point is inside the shape.

    Rectangles use the exact signed distance, diamonds the distance to the
    side line, and ellipses a radial approximation.
    """
    center = shape.center
    local = rotate_point(point, center, -shape.angle)
    ax = abs(local[0] - center[0])
    ay = abs(local[1] - center[1])
    hw = shape.width / 2
    hh = shape.height / 2

    if shape.kind == ShapeKind.DIAMOND and hw > 0 and hh > 0:
        # Side from (hw, 0) to (0, hh)
        return (ax * hh + ay * hw - hw * hh) / math.hypot(hw, hh)

    if shape.kind == ShapeKind.ELLIPSE and hw > 0 and hh > 0:
        r = math.hypot(ax, ay)
        if r == 0:
            return -min(hw, hh)
        k = math.hypot(ax / hw, ay / hh)
        return r - r / k

    dx = ax - hw
    dy = ay - hh
    if dx > 0 or dy > 0:
        return math.hypot(max(dx, 0.0), max(dy, 0.0))
    return max(dx, dy)


def shape_gap(a: BindableShape, b: BindableShape) -> float:
    """
    Clearance between two shapes.

    Measured as the smallest distance from either shape to one of the
    other's rotated corners, clamped at zero for overlapping shapes.
    """
    distances = [distance_to_shape(a, corner) for corner in b.rotated_corners()]
    distances += [distance_to_shape(b, corner) for corner in a.rotated_corners()]
    return max(0.0, min(distances))


def get_start_end_bounds(
    start_shape: Optional[BindableShape],
    end_shape: Optional[BindableShape],
    start_point: Point,
    end_point: Point,
    offset: float,
    config: RoutingConfig = DEFAULT_CONFIG,
    observer: Optional[RoutingObserver] = None,
) -> tuple[Optional[Bounds], Optional[Bounds]]:
    """
    Boxes around the shapes bound to an arrow's endpoints.

    When both ends are bound the requested offset is ignored and the gap
    between the two shapes takes its place, in both regimes. Boxes then grow
    with the distance between the shapes and shrink to the minimum size for
    adjacent shapes.

    A box is dropped (None) when its endpoint lies outside the shape's
    binding area: the endpoint has been dragged away and no longer tracks
    that shape.

    Args:
        start_shape: Shape bound to the start, or None
        end_shape: Shape bound to the end, or None
        start_point: Start endpoint in world space
        end_point: End endpoint in world space
        offset: Requested offset regime (dongle or hit-box size)
        config: Routing constants
        observer: Receives the produced boxes

    Returns:
        (start_bounds, end_bounds)
    """
    observer = NullObserver() if observer is None else observer

    if start_shape is not None and end_shape is not None:
        relative_offset = shape_gap(start_shape, end_shape)
    else:
        relative_offset = offset
    box_offset = max(
        config.hitbox_extension_size,
        relative_offset / 2 - config.dongle_offset_reduction,
    )

    result: list[Optional[Bounds]] = []
    for shape, point in ((start_shape, start_point), (end_shape, end_point)):
        if shape is None or not is_point_in_binding_area(shape, point):
            result.append(None)
            continue
        bounds = extended_bounds_for_shape(shape, box_offset)
        observer.draw_bounds(bounds)
        result.append(bounds)

    return result[0], result[1]


def filter_obstacles(
    boxes: Iterable[Optional[Bounds]],
    start_stub: Point,
    end_stub: Point,
) -> list[Bounds]:
    """
    Obstacle boxes the route should avoid.

    Boxes containing either stub point are skipped: the route has to leave
    or enter them anyway.
    """
    return [
        box
        for box in boxes
        if box is not None and not (box.contains(start_stub) or box.contains(end_stub))
    ]


__all__ = [
    "extended_bounds_for_shape",
    "binding_area",
    "is_point_in_binding_area",
    "distance_to_shape",
    "shape_gap",
    "get_start_end_bounds",
    "filter_obstacles",
]
