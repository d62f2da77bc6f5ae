"""
Binding resolution and heading inference.

Decides which shape, if any, each arrow endpoint is attached to, and from
which side of that shape the route has to leave or arrive.
"""

from __future__ import annotations

import math
from typing import Optional

from .bounds import distance_to_shape, extended_bounds_for_shape
from .config import DEFAULT_CONFIG, RoutingConfig
from .geometry import point_in_triangle, rotate_points, scale_up
from .scene import SceneLike
from .types import Arrow, BindableShape, Binding, Heading, Point, ShapeKind


def is_point_near_shape(shape: BindableShape, point: Point) -> bool:
    """Check if ``point`` lies within the binding band around the outline."""
    return abs(distance_to_shape(shape, point)) <= shape.max_binding_gap()


def get_hovered_shape(point: Point, scene: SceneLike) -> Optional[BindableShape]:
    """
    Topmost live shape whose binding band contains ``point``.

    Args:
        point: World-space point
        scene: Scene to search

    Returns:
        The shape, or None if the point is not near any shape
    """
    for shape in reversed(list(scene.get_non_deleted_elements())):
        if is_point_near_shape(shape, point):
            return shape
    return None


def resolve_bound_shape(
    binding: Optional[Binding],
    point: Point,
    scene: Optional[SceneLike],
) -> Optional[BindableShape]:
    """
    Shape an endpoint is attached to.

    An explicit binding wins; a binding to a missing or deleted shape
    resolves to None. Without a binding the hovered shape is used. Without
    a scene nothing can be resolved.
    """
    if scene is None:
        return None
    if binding is not None:
        return scene.get_non_deleted_elements_map().get(binding.element_id)
    return get_hovered_shape(point, scene)


def get_heading_for_point(
    shape: BindableShape,
    point: Point,
    offset: float,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> Optional[Heading]:
    """
    Side of ``shape`` the point is on.

    Builds the shape's bounds grown by ``offset`` and splits it into four
    triangular search cones running from the center through the corners,
    scaled outward so they cover the whole box. The cone containing the
    point gives the heading. Diamonds connect at their left and right
    vertices, so their cones are turned by 45° and only LEFT or RIGHT is
    returned.

    Args:
        shape: Shape the endpoint is attached to
        point: World-space endpoint
        offset: Growth of the search box, normally the binding gap
        config: Routing constants

    Returns:
        Heading, or None if the point lies outside the grown box
    """
    bounds = extended_bounds_for_shape(shape, offset)
    if not bounds.contains(point):
        return None

    mid = bounds.center
    rotation = math.pi / 4 if shape.kind == ShapeKind.DIAMOND else 0
    top_left, top_right, bottom_right, bottom_left = rotate_points(
        [scale_up(corner, mid, config.search_cone_multiplier) for corner in bounds.corners],
        mid,
        rotation,
    )

    if shape.kind == ShapeKind.DIAMOND:
        if point_in_triangle(point, top_left, top_right, mid):
            return Heading.RIGHT
        if point_in_triangle(point, top_right, bottom_right, mid):
            return Heading.RIGHT
        return Heading.LEFT

    if point_in_triangle(point, top_left, top_right, mid):
        return Heading.UP
    if point_in_triangle(point, top_right, bottom_right, mid):
        return Heading.RIGHT
    if point_in_triangle(point, bottom_right, bottom_left, mid):
        return Heading.DOWN
    return Heading.LEFT


def get_start_end_shapes(
    arrow: Arrow,
    start_point: Point,
    end_point: Point,
    scene: Optional[SceneLike],
) -> tuple[Optional[BindableShape], Optional[BindableShape]]:
    """Resolve the shapes attached to both ends of ``arrow``."""
    return (
        resolve_bound_shape(arrow.start_binding, start_point, scene),
        resolve_bound_shape(arrow.end_binding, end_point, scene),
    )


def get_start_end_headings(
    start_shape: Optional[BindableShape],
    end_shape: Optional[BindableShape],
    start_point: Point,
    end_point: Point,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> tuple[Optional[Heading], Optional[Heading]]:
    """Headings for both endpoints, searched within each shape's binding gap."""
    start_heading = (
        get_heading_for_point(start_shape, start_point, start_shape.max_binding_gap(), config)
        if start_shape is not None
        else None
    )
    end_heading = (
        get_heading_for_point(end_shape, end_point, end_shape.max_binding_gap(), config)
        if end_shape is not None
        else None
    )
    return start_heading, end_heading


__all__ = [
    "is_point_near_shape",
    "get_hovered_shape",
    "resolve_bound_shape",
    "get_heading_for_point",
    "get_start_end_shapes",
    "get_start_end_headings",
]
