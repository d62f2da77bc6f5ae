"""
Step kernel for elbow routing.

Grows a route from the start stub toward the end stub one orthogonal
segment per step. Every step turns 90° toward the target where possible,
avoids landing aligned with the end stub from the wrong side, and lets the
intersection resolver correct moves that would cut through obstacles.

Headings are exact cardinal vectors, so "same direction" and "opposite
direction" checks are plain equality tests.
"""

from __future__ import annotations

import warnings
from enum import Enum
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG, RoutingConfig
from .debug import NullObserver, RoutingObserver
from .geometry import (
    add_vectors,
    dot_product,
    points_equal,
    scale_vector,
    segments_intersect_at,
    subtract_points,
    vector_to_heading,
)
from .intersections import resolve_intersections
from .simplify import remove_duplicate_points
from .types import ZERO_VECTOR, Bounds, Heading, Point, Vector


class RoutingWarning(UserWarning):
    """Warning for recoverable routing degradations."""

    pass


class StepLimitWarning(RoutingWarning):
    """Raised when the kernel stops before reaching the end stub."""

    pass


class RouteState(Enum):
    """State of the path growth loop."""

    GROWING = "growing"
    DONE = "done"


def extend_to_bounds_edge(
    point: Point,
    heading: Heading,
    bounds: Optional[Bounds],
    config: RoutingConfig = DEFAULT_CONFIG,
) -> Point:
    """
    Stub end point for an endpoint attached to a shape.

    Casts a ray from ``point`` along ``heading``, as long as the box is
    wide (or tall), and returns the first crossing with the box outline
    pushed one unit further out.

    Args:
        point: Endpoint in world space
        heading: Direction away from the shape
        bounds: Dongle box around the shape
        config: Routing constants

    Returns:
        Stub end point; ``point + heading * min_dongle_size`` when there is
        no box or the ray never crosses it
    """
    vector = heading.vector
    if bounds is not None:
        reach = bounds.width if heading.is_horizontal() else bounds.height
        ray = (point, add_vectors(point, scale_vector(vector, reach)))
        for edge in bounds.clockwise_segments():
            crossing = segments_intersect_at(ray, edge)
            if crossing is not None:
                return add_vectors(crossing, vector)

    return add_vectors(point, scale_vector(vector, config.min_dongle_size))


def _heading_between(a: Point, b: Point) -> Vector:
    """Cardinal heading from ``a`` to ``b`` (zero if they coincide)."""
    return vector_to_heading(subtract_points(b, a))


def _is_aligned(v: Vector) -> bool:
    """True if exactly one component of ``v`` is zero."""
    return (v[0] == 0) != (v[1] == 0)


def next_step(
    points: Sequence[Point],
    end_points: Sequence[Point],
    boxes: Sequence[Bounds],
    step: int,
    config: RoutingConfig = DEFAULT_CONFIG,
    observer: Optional[RoutingObserver] = None,
) -> Point:
    """
    Compute the next route point.

    Args:
        points: Committed route so far, starting with the start endpoint
        end_points: End stub followed by the end endpoint
        boxes: Obstacle boxes not containing the current point
        step: Index of this step, 0 for the first
        config: Routing constants
        observer: Receives diagnostics

    Returns:
        Next point, axis-aligned with ``points[-1]``
    """
    observer = NullObserver() if observer is None else observer
    observer.new_frame()

    start = points[-1]
    end = end_points[0]
    start_heading = _heading_between(points[-2], start) if len(points) >= 2 else ZERO_VECTOR
    end_heading = _heading_between(end, end_points[1]) if len(end_points) >= 2 else ZERO_VECTOR

    horizontal = start_heading[1] == 0
    end_ahead = dot_product(start_heading, subtract_points(end, start)) > 0

    along: Point = (end[0], start[1])
    across: Point = (start[0], end[1])
    if horizontal:
        candidate = along if end_ahead else across
    else:
        candidate = across if end_ahead else along

    # The first step leaves a stub, so going straight on is allowed there
    if step != 0 and _heading_between(start, candidate) == start_heading:
        candidate = across if horizontal else along

    if points_equal(candidate, start):
        candidate = along if candidate == across else across

    remaining = subtract_points(end, candidate)
    if _is_aligned(remaining) and dot_product(vector_to_heading(remaining), end_heading) == -1:
        # Landing here would force arriving at the end stub from behind
        candidate = add_vectors(start, scale_vector(subtract_points(candidate, start), 0.5))

    if boxes:
        direction = _heading_between(start, candidate)
        candidate = resolve_intersections(
            points,
            candidate,
            boxes,
            end,
            dot_product(end_heading, direction) == -1,
            config,
            observer,
        )

    observer.draw_point(candidate, "blue")
    return candidate


def _bridge(last: Point, end: Point) -> list[Point]:
    """Elbow needed to join ``last`` to ``end`` with axis-aligned segments."""
    if last[0] == end[0] or last[1] == end[1]:
        return []
    return [(end[0], last[1])]


def calculate_route(
    start_points: Sequence[Point],
    end_points: Sequence[Point],
    boxes: Sequence[Bounds],
    config: RoutingConfig = DEFAULT_CONFIG,
    observer: Optional[RoutingObserver] = None,
) -> list[Point]:
    """
    Grow a route from the start stub to the end stub.

    The loop runs until a step lands on the end stub, at most
    ``config.step_count_limit`` times. If the budget runs out, or a step
    makes no progress, a ``StepLimitWarning`` is issued and the route jumps
    to the end stub through a single elbow, so it stays orthogonal.

    Args:
        start_points: Start endpoint followed by its stub point
        end_points: End stub point followed by the end endpoint
        boxes: Obstacle boxes to steer around
        config: Routing constants
        observer: Receives diagnostics

    Returns:
        Full route from the start endpoint to the end endpoint, without
        consecutive duplicates
    """
    points: list[Point] = list(start_points)
    end = end_points[0]
    state = RouteState.DONE if points_equal(points[-1], end) else RouteState.GROWING

    step = 0
    while state is RouteState.GROWING:
        if step >= config.step_count_limit:
            warnings.warn(
                f"Elbow routing step limit ({config.step_count_limit}) reached "
                f"with {len(points)} points; jumping to the target",
                StepLimitWarning,
                stacklevel=3,
            )
            points.extend(_bridge(points[-1], end))
            break

        current = points[-1]
        next_point = next_step(
            points,
            end_points,
            [box for box in boxes if not box.contains(current)],
            step,
            config,
            observer,
        )
        step += 1

        if points_equal(next_point, end):
            state = RouteState.DONE
        elif points_equal(next_point, current):
            warnings.warn(
                f"Elbow routing stalled at {current} after {step} steps; jumping to the target",
                StepLimitWarning,
                stacklevel=3,
            )
            points.extend(_bridge(current, end))
            break
        else:
            points.append(next_point)

    return remove_duplicate_points(points + list(end_points))


__all__ = [
    "RoutingWarning",
    "StepLimitWarning",
    "RouteState",
    "extend_to_bounds_edge",
    "next_step",
    "calculate_route",
]
