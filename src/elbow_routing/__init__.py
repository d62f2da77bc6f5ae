"""
elbow-routing: Orthogonal connector routing for diagram editors.

Computes axis-aligned, obstacle-avoiding paths between two endpoints that
may be attached to shapes, for drawing right-angle arrows between them.

Main entry points:
- route_elbow_arrow: route an arrow against a read-only scene snapshot
- route_points: route bare world-space points with explicit headings
- simplify_elbow_points: collapse collinear vertices of a route

Supporting modules:
- binding: endpoint-to-shape resolution and heading inference
- bounds: dongle and hit-box construction around bound shapes
- kernel / intersections: the iterative path growth and obstacle handling
- metrics: route quality checks
- debug / export: diagnostic observers and SVG overlays
"""

__version__ = "0.1.0"

from .binding import (
    get_heading_for_point,
    get_hovered_shape,
    resolve_bound_shape,
)
from .bounds import (
    distance_to_shape,
    extended_bounds_for_shape,
    get_start_end_bounds,
    shape_gap,
)
from .config import DEFAULT_CONFIG, RoutingConfig
from .debug import NullObserver, RecordingObserver, RoutingObserver
from .kernel import RoutingWarning, StepLimitWarning, calculate_route
from .metrics import (
    bend_count,
    is_orthogonal,
    path_length,
    route_crosses_bounds,
    route_quality_summary,
)
from .router import route_elbow_arrow, route_points
from .scene import Scene, SceneLike
from .simplify import remove_duplicate_points, simplify_elbow_points
from .types import (
    ZERO_VECTOR,
    Arrow,
    BindableShape,
    Binding,
    Bounds,
    Heading,
    Point,
    Segment,
    ShapeKind,
    Vector,
    default_binding_gap,
)
from .validation import (
    InvalidBoundsError,
    InvalidConfigError,
    InvalidPointError,
    InvalidShapeError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Routing
    "route_elbow_arrow",
    "route_points",
    "calculate_route",
    "simplify_elbow_points",
    "remove_duplicate_points",
    # Types
    "Point",
    "Vector",
    "Segment",
    "ZERO_VECTOR",
    "Heading",
    "Bounds",
    "ShapeKind",
    "BindableShape",
    "Binding",
    "Arrow",
    "default_binding_gap",
    # Scene
    "Scene",
    "SceneLike",
    # Binding and bounds
    "resolve_bound_shape",
    "get_hovered_shape",
    "get_heading_for_point",
    "distance_to_shape",
    "extended_bounds_for_shape",
    "get_start_end_bounds",
    "shape_gap",
    # Configuration
    "RoutingConfig",
    "DEFAULT_CONFIG",
    # Diagnostics
    "RoutingObserver",
    "NullObserver",
    "RecordingObserver",
    "RoutingWarning",
    "StepLimitWarning",
    # Metrics
    "is_orthogonal",
    "bend_count",
    "path_length",
    "route_crosses_bounds",
    "route_quality_summary",
    # Validation
    "ValidationError",
    "InvalidPointError",
    "InvalidBoundsError",
    "InvalidShapeError",
    "InvalidConfigError",
]
