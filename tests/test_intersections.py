"""Tests for the obstacle intersection resolver."""

import math

import pytest

from elbow_routing import Bounds, RecordingObserver
from elbow_routing.intersections import HitOffset, get_hit_offset, resolve_intersections


@pytest.fixture
def wall():
    """Box straddling the x axis symmetrically."""
    return Bounds(100, -50, 200, 50)


@pytest.fixture
def low_wall():
    """Box whose top corner is closer to the x axis than its bottom one."""
    return Bounds(100, -20, 200, 80)


# ---------------------------------------------------------------------------
# get_hit_offset
# ---------------------------------------------------------------------------


class TestGetHitOffset:
    def test_no_boxes(self):
        hit = get_hit_offset((0, 0), (10, 0), [])
        assert not hit.is_hit
        assert hit == HitOffset()

    def test_miss(self, wall):
        assert not get_hit_offset((0, 0), (90, 0), [wall]).is_hit

    def test_nearest_edge(self, wall):
        hit = get_hit_offset((30, 0), (270, 0), [wall])
        assert hit.is_hit
        assert hit.ahead == 70
        assert hit.left == 50
        assert hit.right == 50
        assert hit.edge == ((100, 50), (100, -50))

    def test_offsets_follow_clockwise_winding(self, low_wall):
        hit = get_hit_offset((99, 0), (270, 0), [low_wall])
        assert hit.ahead == 1
        # The left edge runs bottom to top
        assert hit.left == 80
        assert hit.right == 20

    def test_closest_of_several_boxes(self, wall):
        near = Bounds(50, -10, 60, 10)
        hit = get_hit_offset((0, 0), (300, 0), [wall, near])
        assert hit.ahead == 50

    def test_parallel_edges_ignored(self, wall):
        """Running along an edge is not a hit."""
        assert not get_hit_offset((120, -50), (180, -50), [wall]).is_hit

    def test_default_offset(self):
        assert math.isinf(HitOffset().ahead)


# ---------------------------------------------------------------------------
# resolve_intersections
# ---------------------------------------------------------------------------


class TestResolveIntersections:
    def test_no_hit_keeps_point(self, wall):
        result = resolve_intersections([(0, 0), (0, 100)], (300, 100), [wall], (300, 100), False)
        assert result == (300, 100)

    def test_distant_hit_shortens(self, wall):
        far = Bounds(400, -50, 500, 50)
        result = resolve_intersections(
            [(0, 0), (30, 0)], (270, 0), [wall, far], (270, 0), False
        )
        assert result == (99, 0)

    def test_single_box_detours_instead_of_shortening(self, wall):
        """A lone obstacle is never answered by stopping short of it."""
        result = resolve_intersections([(0, 0), (30, 0)], (270, 0), [wall], (270, 0), False)
        assert result == (30, 51)

    def test_target_facing_skips_shortening(self, wall):
        result = resolve_intersections([(0, 0), (30, 0)], (270, 0), [wall], (270, 0), True)
        # Tied detour goes right of the direction of travel (down on screen)
        assert result == (30, 51)

    def test_overlapping_boxes_skip_shortening(self, wall):
        other = Bounds(150, -50, 250, 50)
        result = resolve_intersections([(0, 0), (30, 0)], (400, 0), [wall, other], (400, 0), False)
        assert result == (30, 51)

    def test_detour_prefers_nearer_corner(self, low_wall):
        result = resolve_intersections([(30, 0), (99, 0)], (270, 0), [low_wall], (270, 0), False)
        assert result == (99, -21)

    def test_detour_does_not_retrace(self, low_wall):
        """The upward detour would double back over the previous segment."""
        result = resolve_intersections([(99, -40), (99, 0)], (270, 0), [low_wall], (270, 0), False)
        assert result == (99, 21)

    def test_observer_sees_hit_edge_and_candidates(self, wall):
        recorder = RecordingObserver()
        resolve_intersections(
            [(0, 0), (30, 0)], (270, 0), [wall], (270, 0), True, observer=recorder
        )
        frame = recorder.frames[-1]
        assert [s.color for s in frame.segments] == ["red"]
        assert sorted(p.color for p in frame.points) == ["green", "red"]
