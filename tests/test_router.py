"""Tests for the elbow routing entry points."""

import math
import warnings

import pytest

from elbow_routing import (
    Arrow,
    BindableShape,
    Binding,
    Bounds,
    Heading,
    InvalidPointError,
    RecordingObserver,
    RoutingConfig,
    Scene,
    ShapeKind,
    StepLimitWarning,
    is_orthogonal,
    route_crosses_bounds,
    route_elbow_arrow,
    route_points,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def wall():
    return Bounds(100, -50, 200, 50)


@pytest.fixture
def side_by_side():
    """Two shapes with a 200 unit horizontal gap."""
    return Scene(
        [
            BindableShape("a", 0, 0, 100, 100),
            BindableShape("b", 300, 0, 100, 100),
        ]
    )


@pytest.fixture
def staggered():
    """Second shape below and to the right of the first."""
    return Scene(
        [
            BindableShape("a", 0, 0, 100, 100),
            BindableShape("b", 300, 100, 100, 100),
        ]
    )


def _bound_arrow(start, end, x=0, y=0):
    return Arrow(
        x=x,
        y=y,
        points=(start, end),
        start_binding=Binding("a"),
        end_binding=Binding("b"),
    )


# ---------------------------------------------------------------------------
# route_points
# ---------------------------------------------------------------------------


class TestRoutePoints:
    def test_straight_unbound(self):
        assert route_points((0, 0), (100, 0)) == ((0, 0), (100, 0))

    def test_unbound_diagonal(self):
        route = route_points((0, 0), (100, 50))
        assert route == ((0, 0), (70, 0), (70, 50), (100, 50))

    def test_single_elbow_with_headings(self):
        route = route_points(
            (0, 0), (100, 100), start_heading=Heading.RIGHT, end_heading=Heading.UP
        )
        assert route == ((0, 0), (100, 0), (100, 100))

    def test_obstacle_detour(self, wall):
        route = route_points((0, 0), (300, 0), obstacles=[wall])
        assert route == ((0, 0), (30, 0), (30, 51), (270, 51), (270, 0), (300, 0))
        assert not route_crosses_bounds(route, wall)

    def test_unsimplified(self, wall):
        far = Bounds(400, -50, 500, 50)
        route = route_points((0, 0), (300, 0), obstacles=[wall, far], simplify=False)
        assert route == (
            (0, 0),
            (30, 0),
            (99, 0),
            (99, 51),
            (270, 51),
            (270, 0),
            (300, 0),
        )

    def test_close_points(self):
        """Stubs shrink so they never cross each other."""
        assert route_points((0, 0), (20, 0)) == ((0, 0), (20, 0))

    def test_coincident_points(self):
        assert route_points((5, 5), (5, 5)) == ((5, 5),)

    def test_invalid_point(self):
        with pytest.raises(InvalidPointError, match="start"):
            route_points((math.nan, 0), (1, 1))

    def test_step_limit(self, wall):
        config = RoutingConfig(step_count_limit=2)
        with pytest.warns(StepLimitWarning):
            route = route_points((0, 0), (300, 0), obstacles=[wall], config=config)
        assert is_orthogonal(route)
        assert route[0] == (0, 0)
        assert route[-1] == (300, 0)

    def test_tiny_step_limit_still_orthogonal(self, wall):
        config = RoutingConfig(step_count_limit=1)
        with pytest.warns(StepLimitWarning):
            route = route_points((0, 0), (300, 100), obstacles=[wall], config=config)
        assert is_orthogonal(route)
        assert route[-1] == (300, 100)


# ---------------------------------------------------------------------------
# route_elbow_arrow
# ---------------------------------------------------------------------------


class TestRouteElbowArrow:
    def test_facing_shapes(self, side_by_side):
        route = route_elbow_arrow(_bound_arrow((100, 50), (300, 50)), side_by_side)
        assert route == ((100, 50), (300, 50))

    def test_staggered_shapes(self, staggered):
        route = route_elbow_arrow(_bound_arrow((100, 50), (300, 150)), staggered)
        assert route == ((100, 50), (204, 50), (204, 150), (300, 150))

    def test_local_space(self, staggered):
        arrow = _bound_arrow((90, 30), (290, 130), x=10, y=20)
        route = route_elbow_arrow(arrow, staggered)
        assert route == ((90, 30), (194, 30), (194, 130), (290, 130))

    def test_adjacent_shapes(self):
        """Stubs leave their own shape even when the neighbor is 5 units away."""
        a = BindableShape("a", 0, 0, 100, 100)
        b = BindableShape("b", 105, 0, 100, 100)
        arrow = _bound_arrow((100, 50), (105, 50))
        route = route_elbow_arrow(arrow, Scene([a, b]), simplify=False)

        assert route == ((100, 50), (106, 50), (99, 50), (105, 50))
        assert not a.bounds().contains(route[1])
        assert not b.bounds().contains(route[-2])
        assert is_orthogonal(route)

    def test_hover_binding(self, side_by_side):
        """Endpoints on a shape outline attach without an explicit binding."""
        arrow = Arrow(points=((100, 50), (300, 50)))
        assert route_elbow_arrow(arrow, side_by_side) == ((100, 50), (300, 50))

    def test_without_scene(self):
        arrow = Arrow(points=((0, 0), (100, 50)))
        assert route_elbow_arrow(arrow) == ((0, 0), (70, 0), (70, 50), (100, 50))

    def test_inner_points_ignored(self):
        arrow = Arrow(points=((0, 0), (500, 500), (100, 0)))
        assert route_elbow_arrow(arrow) == ((0, 0), (100, 0))

    def test_too_few_points(self):
        arrow = Arrow(points=((1, 2),))
        assert route_elbow_arrow(arrow) == ((1, 2),)
        assert route_elbow_arrow(Arrow()) == ()

    def test_coincident_endpoints(self):
        arrow = Arrow(x=5, y=5, points=((3, 3), (10, 10), (3, 3)))
        assert route_elbow_arrow(arrow) == ((3, 3),)

    def test_missing_binding_routes_unbound(self):
        arrow = Arrow(points=((100, 50), (300, 50)), start_binding=Binding("ghost"))
        route = route_elbow_arrow(arrow, Scene())
        assert route == ((100, 50), (300, 50))

    def test_detached_endpoint(self, side_by_side):
        arrow = _bound_arrow((200, 50), (300, 50))
        route = route_elbow_arrow(arrow, side_by_side)
        assert route[0] == (200, 50)
        assert route[-1] == (300, 50)
        assert is_orthogonal(route)

    def test_observer_does_not_change_route(self, staggered):
        arrow = _bound_arrow((100, 50), (300, 150))
        recorder = RecordingObserver()
        observed = route_elbow_arrow(arrow, staggered, observer=recorder)
        assert observed == route_elbow_arrow(arrow, staggered)
        assert len(recorder.frames) > 1
        assert recorder.frames[0].bounds

    def test_observer_cleared_between_routes(self, staggered):
        arrow = _bound_arrow((100, 50), (300, 150))
        recorder = RecordingObserver()
        route_elbow_arrow(arrow, staggered, observer=recorder)
        first = len(recorder)
        route_elbow_arrow(arrow, staggered, observer=recorder)
        assert len(recorder) == first


# ---------------------------------------------------------------------------
# Properties over many placements
# ---------------------------------------------------------------------------

_SIDES = {
    "top": (50, 0),
    "right": (100, 50),
    "bottom": (50, 100),
    "left": (0, 50),
}


def _placements():
    for dx in (-300, 0, 300):
        for dy in (-250, 0, 250):
            if dx == 0 and dy == 0:
                continue
            for start_side in _SIDES:
                for end_side in _SIDES:
                    yield dx, dy, start_side, end_side


class TestRouteProperties:
    @pytest.mark.parametrize("kind", [ShapeKind.RECTANGLE, ShapeKind.DIAMOND, ShapeKind.ELLIPSE])
    def test_bound_routes_are_orthogonal(self, kind):
        for dx, dy, start_side, end_side in _placements():
            scene = Scene(
                [
                    BindableShape("a", 0, 0, 100, 100, kind=kind),
                    BindableShape("b", dx, dy, 100, 100, kind=kind),
                ]
            )
            sx, sy = _SIDES[start_side]
            ex, ey = _SIDES[end_side]
            arrow = _bound_arrow((sx, sy), (dx + ex, dy + ey))

            with warnings.catch_warnings():
                warnings.simplefilter("ignore", StepLimitWarning)
                route = route_elbow_arrow(arrow, scene)

            assert route[0] == arrow.points[0]
            assert route[-1] == arrow.points[-1]
            assert is_orthogonal(route), (dx, dy, start_side, end_side, route)

    def test_unbound_routes_with_obstacles(self, wall):
        for end in [(300, 0), (300, 120), (-50, 200), (150, -200), (150, 0), (0, 300)]:
            for start in [(0, 0), (0, -100), (250, 250)]:
                with warnings.catch_warnings():
                    warnings.simplefilter("ignore", StepLimitWarning)
                    route = route_points(start, end, obstacles=[wall])
                assert route[0] == start
                assert route[-1] == end
                assert is_orthogonal(route), (start, end, route)
