"""
Export functionality for elbow routes.

Example usage:
    from elbow_routing import Bounds, route_points
    from elbow_routing.debug import RecordingObserver
    from elbow_routing.export import route_to_svg

    recorder = RecordingObserver()
    route = route_points(
        (0, 0), (300, 0), obstacles=[Bounds(100, -50, 200, 50)], observer=recorder
    )

    svg_content = route_to_svg([route], recording=recorder)
    with open("route.svg", "w") as f:
        f.write(svg_content)
"""

from .svg import route_to_svg

__all__ = [
    "route_to_svg",
]
