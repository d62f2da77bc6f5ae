"""
Obstacle intersection resolver.

Called by the step kernel when a proposed segment may cut through an
obstacle box. The correction is local and greedy: either stop just short
of the obstacle, or step sideways around its nearer corner. Obstacles are
convex axis-aligned boxes and routing is single pass, so no global search
is attempted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Optional, Sequence

import numpy as np

from .config import DEFAULT_CONFIG, RoutingConfig
from .debug import NullObserver, RoutingObserver
from .geometry import (
    add_vectors,
    distance,
    rotate_vector_clockwise,
    rotate_vector_counterclockwise,
    scale_vector,
    segments_overlap,
    subtract_points,
    vector_to_heading,
)
from .types import Bounds, Point, Segment

_PARALLEL_EPS = 1e-10


@dataclass(frozen=True)
class HitOffset:
    """
    Closest crossing of a segment with obstacle edges.

    Attributes:
        ahead: Distance from the segment start to the crossing (inf if none)
        left: Distance from the crossing to the start of the hit edge
        right: Distance from the crossing to the end of the hit edge
        edge: The hit edge, wound clockwise
    """

    ahead: float = math.inf
    left: float = 0.0
    right: float = 0.0
    edge: Optional[Segment] = None

    @property
    def is_hit(self) -> bool:
        return math.isfinite(self.ahead)


def _edge_array(boxes: Sequence[Bounds]) -> np.ndarray:
    """All clockwise edges of ``boxes`` as an (n, 2, 2) array."""
    return np.array([edge for box in boxes for edge in box.clockwise_segments()], dtype=float)


def get_hit_offset(start: Point, end: Point, boxes: Sequence[Bounds]) -> HitOffset:
    """
    Find where the segment ``start -> end`` first crosses an obstacle edge.

    Every box is split into its four clockwise edges and tested at once.
    Parallel edges never count as hits.

    Args:
        start: Segment start
        end: Segment end
        boxes: Obstacle boxes

    Returns:
        Offsets of the crossing closest to ``start``
    """
    if not boxes:
        return HitOffset()

    edges = _edge_array(boxes)
    x1, y1 = start
    x2, y2 = end
    x3, y3 = edges[:, 0, 0], edges[:, 0, 1]
    x4, y4 = edges[:, 1, 0], edges[:, 1, 1]

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    valid = np.abs(denom) >= _PARALLEL_EPS
    safe_denom = np.where(valid, denom, 1.0)

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / safe_denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / safe_denom
    hit = valid & (t >= 0) & (t <= 1) & (u >= 0) & (u <= 1)
    if not hit.any():
        return HitOffset()

    # Axis-aligned edges fix one coordinate of the crossing exactly
    px = np.where(x3 == x4, x3, x1 + t * (x2 - x1))
    py = np.where(y3 == y4, y3, y1 + t * (y2 - y1))
    ahead = np.where(hit, np.hypot(px - x1, py - y1), np.inf)
    i = int(np.argmin(ahead))

    return HitOffset(
        ahead=float(ahead[i]),
        left=float(np.hypot(px[i] - x3[i], py[i] - y3[i])),
        right=float(np.hypot(px[i] - x4[i], py[i] - y4[i])),
        edge=((float(x3[i]), float(y3[i])), (float(x4[i]), float(y4[i]))),
    )


def _boxes_separate(boxes: Sequence[Bounds]) -> bool:
    """At least two boxes and none of them overlap."""
    return len(boxes) >= 2 and not any(a.intersects(b) for a, b in combinations(boxes, 2))


def _is_viable_detour(
    start: Point,
    candidate: Point,
    previous: Optional[Point],
    boxes: Sequence[Bounds],
) -> bool:
    """A detour may not run into another edge nor retrace the last segment."""
    if get_hit_offset(start, candidate, boxes).left > 0:
        return False
    if previous is not None and segments_overlap((start, previous), (start, candidate)):
        return False
    return True


def resolve_intersections(
    points: Sequence[Point],
    next_point: Point,
    boxes: Sequence[Bounds],
    target: Point,
    target_facing: bool,
    config: RoutingConfig = DEFAULT_CONFIG,
    observer: Optional[RoutingObserver] = None,
) -> Point:
    """
    Correct a proposed next point so the route does not cut through a box.

    Two corrections are possible:

    1. Shortening: when the route is not yet running against the final
       approach direction and at least two boxes are in play with none
       overlapping, a distant forward hit is answered by stopping one unit
       short of the obstacle. The next step then turns there. A lone box
       is always answered by a detour.
    2. Detour: when the segment hits an edge, step sideways by the smaller
       of the two corner distances plus one unit, to the left or to the
       right. Each side is rejected if it runs into an edge itself or
       doubles back over the previous segment. The survivors are scored by
       distance to ``target`` plus the corner distance still left on their
       side; the lower score wins and ties go to the right.

    Args:
        points: Committed route so far (last item is the current point)
        next_point: Proposed next point, axis-aligned with the current one
        boxes: Obstacle boxes relevant for this step
        target: Point the kernel is heading to
        target_facing: True if the proposed direction runs against the
            final approach heading
        config: Routing constants
        observer: Receives hit edges and detour candidates

    Returns:
        The corrected next point (``next_point`` itself if no correction
        applies)
    """
    observer = NullObserver() if observer is None else observer
    start = points[-1]
    hit = get_hit_offset(start, next_point, boxes)
    if hit.edge is not None:
        observer.draw_segment(hit.edge, "red")

    direction = vector_to_heading(subtract_points(next_point, start))

    if (
        not target_facing
        and hit.is_hit
        and hit.ahead > config.forward_hit_threshold
        and _boxes_separate(boxes)
    ):
        return add_vectors(start, scale_vector(direction, hit.ahead - 1))

    if hit.left > 0 or hit.right > 0:
        amount = min(hit.left, hit.right) + 1
        left_candidate = add_vectors(
            start, scale_vector(rotate_vector_counterclockwise(direction), amount)
        )
        right_candidate = add_vectors(
            start, scale_vector(rotate_vector_clockwise(direction), amount)
        )

        previous = points[-2] if len(points) >= 2 else None
        left_ok = _is_viable_detour(start, left_candidate, previous, boxes)
        right_ok = _is_viable_detour(start, right_candidate, previous, boxes)

        if left_ok:
            observer.draw_point(left_candidate, "red")
        if right_ok:
            observer.draw_point(right_candidate, "green")

        left_score = distance(left_candidate, target) + hit.right if left_ok else math.inf
        right_score = distance(right_candidate, target) + hit.left if right_ok else math.inf

        if left_score < right_score:
            return left_candidate
        if right_ok:
            return right_candidate
        if left_ok:
            return left_candidate

    return next_point


__all__ = ["HitOffset", "get_hit_offset", "resolve_intersections"]
