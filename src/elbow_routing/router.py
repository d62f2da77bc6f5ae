"""
Elbow arrow routing entry points.

``route_elbow_arrow`` routes an arrow against a scene: it converts the
endpoints to world space, resolves the shapes they are attached to, infers
approach headings, builds dongle and hit boxes, runs the step kernel and
converts the result back to the arrow's local space.

``route_points`` runs the same pipeline on bare world-space points with
caller-supplied headings and boxes, for hosts that do their own binding.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .binding import get_start_end_headings, get_start_end_shapes
from .bounds import filter_obstacles, get_start_end_bounds
from .config import DEFAULT_CONFIG, RoutingConfig
from .debug import NullObserver, RoutingObserver
from .geometry import add_vectors, points_equal, scale_vector, subtract_points, vector_to_heading
from .kernel import calculate_route, extend_to_bounds_edge
from .scene import SceneLike
from .simplify import simplify_elbow_points
from .types import Arrow, Bounds, Heading, Point
from .validation import validate_point


def _unbound_stub(point: Point, toward: Point, config: RoutingConfig) -> Point:
    """
    Stub for an endpoint without a heading.

    Points along the dominant axis toward the other endpoint and is at most
    half the distance along that axis, so the two stubs never cross.
    """
    vector = subtract_points(toward, point)
    heading = vector_to_heading(vector)
    span = abs(vector[0]) if heading[1] == 0 else abs(vector[1])
    return add_vectors(point, scale_vector(heading, min(config.min_dongle_size, span / 2)))


def _route_world(
    start: Point,
    end: Point,
    start_heading: Optional[Heading],
    end_heading: Optional[Heading],
    start_dongle: Optional[Bounds],
    end_dongle: Optional[Bounds],
    obstacles: Iterable[Optional[Bounds]],
    config: RoutingConfig,
    observer: RoutingObserver,
    simplify: bool,
) -> list[Point]:
    if start_heading is not None:
        start_stub = extend_to_bounds_edge(start, start_heading, start_dongle, config)
    else:
        start_stub = _unbound_stub(start, end, config)

    if end_heading is not None:
        end_stub = extend_to_bounds_edge(end, end_heading, end_dongle, config)
    else:
        end_stub = _unbound_stub(end, start, config)

    observer.draw_point(start_stub, "green")
    observer.draw_point(end_stub, "green")

    boxes = filter_obstacles(obstacles, start_stub, end_stub)
    for box in boxes:
        observer.draw_bounds(box, "red")

    route = calculate_route([start, start_stub], [end_stub, end], boxes, config, observer)
    return simplify_elbow_points(route) if simplify else route


def _to_local(route: Sequence[Point], arrow: Arrow) -> tuple[Point, ...]:
    """
    Convert a world-space route back to the arrow's local space.

    Coordinates shared with an endpoint take the caller's exact local value,
    so float round-off in the world/local round trip can neither move the
    endpoints nor tilt the first and last segments.
    """
    first_world, last_world = route[0], route[-1]
    first_local, last_local = arrow.points[0], arrow.points[-1]
    origin = (arrow.x, arrow.y)

    def convert(value: float, axis: int) -> float:
        if value == first_world[axis]:
            return first_local[axis]
        if value == last_world[axis]:
            return last_local[axis]
        return value - origin[axis]

    return tuple((convert(x, 0), convert(y, 1)) for x, y in route)


def route_elbow_arrow(
    arrow: Arrow,
    scene: Optional[SceneLike] = None,
    *,
    config: Optional[RoutingConfig] = None,
    observer: Optional[RoutingObserver] = None,
    simplify: bool = True,
) -> tuple[Point, ...]:
    """
    Compute the elbow route between the first and last point of ``arrow``.

    Args:
        arrow: Arrow to route; its inner points are ignored
        scene: Read-only scene the arrow's bindings refer to. Without a
            scene both ends are routed as unbound.
        config: Routing constants (defaults to ``DEFAULT_CONFIG``)
        observer: Receives diagnostic drawing calls
        simplify: Collapse collinear vertices in the result

    Returns:
        Route points in the arrow's local space. Every segment is horizontal
        or vertical; the first and last points are the arrow's own
        endpoints. Arrows with fewer than two points are returned unchanged,
        and coincident endpoints yield a single point.

    Example:
        scene = Scene([
            BindableShape("a", 0, 0, 100, 100),
            BindableShape("b", 300, 200, 100, 100),
        ])
        arrow = Arrow(points=((100, 50), (300, 250)),
                      start_binding=Binding("a"), end_binding=Binding("b"))
        route = route_elbow_arrow(arrow, scene)
    """
    if len(arrow.points) < 2:
        return arrow.points

    config = config or DEFAULT_CONFIG
    observer = NullObserver() if observer is None else observer
    observer.clear()

    start = arrow.to_world(arrow.points[0])
    end = arrow.to_world(arrow.points[-1])
    if points_equal(start, end):
        return (arrow.points[0],)

    start_shape, end_shape = get_start_end_shapes(arrow, start, end, scene)
    start_heading, end_heading = get_start_end_headings(
        start_shape, end_shape, start, end, config
    )
    start_dongle, end_dongle = get_start_end_bounds(
        start_shape, end_shape, start, end, config.dongle_extension_size, config, observer
    )
    hit_boxes = get_start_end_bounds(
        start_shape, end_shape, start, end, config.hitbox_extension_size, config
    )

    route = _route_world(
        start,
        end,
        start_heading,
        end_heading,
        start_dongle,
        end_dongle,
        hit_boxes,
        config,
        observer,
        simplify,
    )
    return _to_local(route, arrow)


def route_points(
    start: Point,
    end: Point,
    *,
    start_heading: Optional[Heading] = None,
    end_heading: Optional[Heading] = None,
    start_bounds: Optional[Bounds] = None,
    end_bounds: Optional[Bounds] = None,
    obstacles: Sequence[Bounds] = (),
    config: Optional[RoutingConfig] = None,
    observer: Optional[RoutingObserver] = None,
    simplify: bool = True,
) -> tuple[Point, ...]:
    """
    Route between two world-space points without a scene.

    Args:
        start: Start point
        end: End point
        start_heading: Direction the route leaves ``start`` in; None lets
            the router pick the axis toward ``end``
        end_heading: Side of ``end`` the route arrives from (the direction
            pointing away from ``end``)
        start_bounds: Dongle box the start stub is pushed out of
        end_bounds: Dongle box the end stub is pushed out of
        obstacles: Boxes the middle of the route should go around
        config: Routing constants (defaults to ``DEFAULT_CONFIG``)
        observer: Receives diagnostic drawing calls
        simplify: Collapse collinear vertices in the result

    Returns:
        Route points from ``start`` to ``end``

    Raises:
        InvalidPointError: If ``start`` or ``end`` is not a finite 2D point
    """
    start = validate_point(start, "start")
    end = validate_point(end, "end")

    config = config or DEFAULT_CONFIG
    observer = NullObserver() if observer is None else observer
    observer.clear()

    if points_equal(start, end):
        return (start,)

    route = _route_world(
        start,
        end,
        start_heading,
        end_heading,
        start_bounds,
        end_bounds,
        obstacles,
        config,
        observer,
        simplify,
    )
    return tuple(route)


__all__ = ["route_elbow_arrow", "route_points"]
