"""Tests for binding resolution and heading inference."""

import pytest

from elbow_routing import (
    Arrow,
    BindableShape,
    Binding,
    Heading,
    Scene,
    ShapeKind,
)
from elbow_routing.binding import (
    get_heading_for_point,
    get_hovered_shape,
    get_start_end_headings,
    get_start_end_shapes,
    is_point_near_shape,
    resolve_bound_shape,
)


@pytest.fixture
def box():
    return BindableShape("box", 0, 0, 100, 100)


@pytest.fixture
def diamond():
    return BindableShape("diamond", 0, 0, 100, 100, kind=ShapeKind.DIAMOND)


# ---------------------------------------------------------------------------
# get_heading_for_point
# ---------------------------------------------------------------------------


class TestHeadingForPoint:
    @pytest.mark.parametrize(
        "point,expected",
        [
            ((100, 50), Heading.RIGHT),
            ((50, 0), Heading.UP),
            ((50, 100), Heading.DOWN),
            ((0, 50), Heading.LEFT),
            ((110, 30), Heading.RIGHT),
            ((20, -10), Heading.UP),
        ],
    )
    def test_rectangle_sides(self, box, point, expected):
        assert get_heading_for_point(box, point, 25) is expected

    def test_outside_search_box(self, box):
        assert get_heading_for_point(box, (200, 50), 25) is None

    def test_corner_resolves_to_first_cone(self, box):
        assert get_heading_for_point(box, (100, 0), 25) is Heading.UP

    def test_wide_shape_uses_corner_diagonals(self):
        wide = BindableShape("wide", 0, 0, 400, 100)
        assert get_heading_for_point(wide, (300, 0), 25) is Heading.UP
        assert get_heading_for_point(wide, (400, 50), 25) is Heading.RIGHT

    @pytest.mark.parametrize(
        "point,expected",
        [
            ((100, 50), Heading.RIGHT),
            ((0, 50), Heading.LEFT),
            ((60, 0), Heading.RIGHT),
            ((60, 100), Heading.RIGHT),
            ((40, 0), Heading.LEFT),
            ((40, 100), Heading.LEFT),
        ],
    )
    def test_diamond_only_left_or_right(self, diamond, point, expected):
        assert get_heading_for_point(diamond, point, 25) is expected


# ---------------------------------------------------------------------------
# Hover and binding resolution
# ---------------------------------------------------------------------------


class TestHover:
    def test_near_outline(self, box):
        assert is_point_near_shape(box, (110, 50))
        assert is_point_near_shape(box, (90, 50))

    def test_far_outside_or_deep_inside(self, box):
        assert not is_point_near_shape(box, (150, 50))
        assert not is_point_near_shape(box, (50, 50))

    def test_topmost_shape_wins(self):
        bottom = BindableShape("bottom", 0, 0, 100, 100)
        top = BindableShape("top", 50, 0, 100, 100)
        scene = Scene([bottom, top])
        assert get_hovered_shape((75, 100), scene) is top

    def test_nothing_hovered(self, box):
        assert get_hovered_shape((500, 500), Scene([box])) is None

    def test_deleted_shapes_ignored(self):
        deleted = BindableShape("gone", 0, 0, 100, 100, is_deleted=True)
        assert get_hovered_shape((100, 50), Scene([deleted])) is None


class TestResolveBoundShape:
    def test_explicit_binding(self, box):
        scene = Scene([box])
        assert resolve_bound_shape(Binding("box"), (500, 500), scene) is box

    def test_binding_to_deleted_shape(self):
        deleted = BindableShape("gone", 0, 0, 100, 100, is_deleted=True)
        assert resolve_bound_shape(Binding("gone"), (100, 50), Scene([deleted])) is None

    def test_binding_to_missing_shape(self, box):
        assert resolve_bound_shape(Binding("nope"), (100, 50), Scene([box])) is None

    def test_falls_back_to_hover(self, box):
        assert resolve_bound_shape(None, (100, 50), Scene([box])) is box

    def test_no_scene(self):
        assert resolve_bound_shape(Binding("box"), (100, 50), None) is None


class TestStartEnd:
    def test_shapes_and_headings(self, box):
        other = BindableShape("other", 300, 0, 100, 100)
        scene = Scene([box, other])
        arrow = Arrow(
            points=((100, 50), (300, 50)),
            start_binding=Binding("box"),
            end_binding=Binding("other"),
        )
        start_shape, end_shape = get_start_end_shapes(arrow, (100, 50), (300, 50), scene)
        assert start_shape is box
        assert end_shape is other

        headings = get_start_end_headings(start_shape, end_shape, (100, 50), (300, 50))
        assert headings == (Heading.RIGHT, Heading.LEFT)

    def test_unbound_ends_have_no_heading(self, box):
        assert get_start_end_headings(None, None, (0, 0), (10, 10)) == (None, None)
        assert get_start_end_headings(box, None, (100, 50), (500, 50)) == (Heading.RIGHT, None)
