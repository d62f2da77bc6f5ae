"""
SVG export for elbow routes.

Renders routed arrows together with the shapes they connect, plus the
primitives a ``RecordingObserver`` collected, as a diagnostic overlay.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence
from xml.sax.saxutils import escape

from ..debug import DebugPoint, DebugSegment
from ..types import BindableShape, Point, ShapeKind

if TYPE_CHECKING:
    from ..debug import DebugPrimitive, RecordingObserver


def route_to_svg(
    routes: Sequence[Sequence[Point]],
    shapes: Sequence[BindableShape] = (),
    *,
    recording: Optional[RecordingObserver] = None,
    shape_color: str = "#4a90d9",
    shape_stroke: str = "#2c5aa0",
    shape_stroke_width: float = 2.0,
    route_color: str = "#333333",
    route_width: float = 2.0,
    show_labels: bool = True,
    label_color: str = "#000000",
    font_size: float = 12.0,
    font_family: str = "sans-serif",
    debug_point_radius: float = 3.0,
    padding: float = 40.0,
    background: Optional[str] = None,
) -> str:
    """
    Export routes and shapes to SVG format.

    Args:
        routes: Routes in world space, e.g. from ``route_points``
        shapes: Shapes to draw underneath the routes (deleted ones are skipped)
        recording: Observer whose recorded primitives are drawn on top
        shape_color: Fill color for shapes
        shape_stroke: Stroke color for shapes
        shape_stroke_width: Stroke width for shapes
        route_color: Color for routes
        route_width: Width for routes
        show_labels: Whether to show shape ids
        label_color: Color for labels
        font_size: Font size for labels
        font_family: Font family for labels
        debug_point_radius: Radius of recorded debug points
        padding: Padding around the drawing
        background: Background color (None for transparent)

    Returns:
        SVG string representation of the drawing
    """
    shapes = [s for s in shapes if not s.is_deleted]
    primitives = recording.primitives if recording is not None else []

    extent: list[Point] = [p for route in routes for p in route]
    for shape in shapes:
        extent.extend(shape.rotated_corners())
    for primitive in primitives:
        extent.extend(_primitive_points(primitive))

    if not extent:
        return _empty_svg(100, 100, background)

    min_x = min(p[0] for p in extent)
    max_x = max(p[0] for p in extent)
    min_y = min(p[1] for p in extent)
    max_y = max(p[1] for p in extent)

    width = max_x - min_x + 2 * padding
    height = max_y - min_y + 2 * padding
    offset_x = padding - min_x
    offset_y = padding - min_y

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    svg_parts.append('  <g class="shapes">')
    for shape in shapes:
        svg_parts.append(
            _render_shape(shape, offset_x, offset_y, shape_color, shape_stroke, shape_stroke_width)
        )
    svg_parts.append("  </g>")

    svg_parts.append('  <g class="routes">')
    for route in routes:
        route_svg = _render_route(route, offset_x, offset_y, route_color, route_width)
        if route_svg:
            svg_parts.append(route_svg)
    svg_parts.append("  </g>")

    if primitives:
        svg_parts.append('  <g class="debug">')
        for primitive in primitives:
            svg_parts.append(
                _render_primitive(primitive, offset_x, offset_y, debug_point_radius)
            )
        svg_parts.append("  </g>")

    if show_labels and shapes:
        svg_parts.append('  <g class="labels">')
        for shape in shapes:
            svg_parts.append(
                _render_label(shape, offset_x, offset_y, label_color, font_size, font_family)
            )
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _empty_svg(width: float, height: float, background: Optional[str]) -> str:
    """Create an empty SVG."""
    bg = ""
    if background:
        bg = f'\n  <rect width="100%" height="100%" fill="{escape(background)}"/>'
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">{bg}\n</svg>'
    )


def _primitive_points(primitive: DebugPrimitive) -> list[Point]:
    if isinstance(primitive, DebugPoint):
        return [primitive.point]
    if isinstance(primitive, DebugSegment):
        return list(primitive.segment)
    return list(primitive.bounds.corners)


def _format_points(points: Sequence[Point], offset_x: float, offset_y: float) -> str:
    return " ".join(f"{x + offset_x:.1f},{y + offset_y:.1f}" for x, y in points)


def _render_shape(
    shape: BindableShape,
    offset_x: float,
    offset_y: float,
    fill: str,
    stroke: str,
    stroke_width: float,
) -> str:
    """Render a shape with its rotation applied."""
    style = (
        f'fill="{escape(fill)}" stroke="{escape(stroke)}" stroke-width="{stroke_width}"'
    )

    if shape.kind == ShapeKind.ELLIPSE:
        cx, cy = shape.center
        return (
            f'    <ellipse cx="{cx + offset_x:.1f}" cy="{cy + offset_y:.1f}" '
            f'rx="{shape.width / 2:.1f}" ry="{shape.height / 2:.1f}" '
            f'transform="rotate({math.degrees(shape.angle):.1f} '
            f'{cx + offset_x:.1f} {cy + offset_y:.1f})" {style}/>'
        )

    corners = shape.rotated_corners()
    if shape.kind == ShapeKind.DIAMOND:
        # Diamond vertices are the midpoints of the bounding rectangle sides
        corners = [
            ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
            for a, b in zip(corners, corners[1:] + corners[:1])
        ]

    return f'    <polygon points="{_format_points(corners, offset_x, offset_y)}" {style}/>'


def _render_route(
    route: Sequence[Point],
    offset_x: float,
    offset_y: float,
    color: str,
    width: float,
) -> Optional[str]:
    """Render a route as a polyline."""
    if len(route) < 2:
        return None
    return (
        f'    <polyline points="{_format_points(route, offset_x, offset_y)}" '
        f'fill="none" stroke="{escape(color)}" stroke-width="{width}"/>'
    )


def _render_primitive(
    primitive: DebugPrimitive,
    offset_x: float,
    offset_y: float,
    radius: float,
) -> str:
    """Render one recorded debug primitive."""
    color = escape(primitive.color)
    if isinstance(primitive, DebugPoint):
        x, y = primitive.point
        return (
            f'    <circle cx="{x + offset_x:.1f}" cy="{y + offset_y:.1f}" '
            f'r="{radius:.1f}" fill="{color}"/>'
        )
    if isinstance(primitive, DebugSegment):
        (x1, y1), (x2, y2) = primitive.segment
        return (
            f'    <line x1="{x1 + offset_x:.1f}" y1="{y1 + offset_y:.1f}" '
            f'x2="{x2 + offset_x:.1f}" y2="{y2 + offset_y:.1f}" '
            f'stroke="{color}" stroke-width="1"/>'
        )
    b = primitive.bounds
    return (
        f'    <rect x="{b.min_x + offset_x:.1f}" y="{b.min_y + offset_y:.1f}" '
        f'width="{b.width:.1f}" height="{b.height:.1f}" '
        f'fill="none" stroke="{color}" stroke-width="1" stroke-dasharray="4 2"/>'
    )


def _render_label(
    shape: BindableShape,
    offset_x: float,
    offset_y: float,
    color: str,
    font_size: float,
    font_family: str,
) -> str:
    """Render a shape id at the shape center."""
    x, y = shape.center
    return (
        f'    <text x="{x + offset_x:.1f}" y="{y + offset_y:.1f}" '
        f'fill="{escape(color)}" font-size="{font_size}" '
        f'font-family="{escape(font_family)}" '
        f'text-anchor="middle" dominant-baseline="central">'
        f"{escape(shape.id)}</text>"
    )


__all__ = ["route_to_svg"]
