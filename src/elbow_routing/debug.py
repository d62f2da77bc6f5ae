"""
Debug observers for elbow routing.

The router reports intermediate geometry (candidate points, obstacle edges
it hit, the boxes it built) to an observer so diagnostic overlays can be
drawn. Observers only receive data; nothing they do feeds back into the
route.

Key Components:
- RoutingObserver: Protocol the router calls into
- NullObserver: Default no-op observer
- RecordingObserver: Collects primitives per kernel step for later
  inspection or SVG export

Usage:
    >>> from elbow_routing import route_points
    >>> from elbow_routing.debug import RecordingObserver
    >>> recorder = RecordingObserver()
    >>> route = route_points((0, 0), (200, 100), observer=recorder)
    >>> len(recorder.frames) > 0
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union

from .types import Bounds, Point, Segment


class RoutingObserver(Protocol):
    """Receiver for diagnostic drawing calls made while routing."""

    def clear(self) -> None:
        """A new route is starting."""
        ...

    def new_frame(self) -> None:
        """A new kernel step is starting."""
        ...

    def draw_point(self, point: Point, color: str = "red") -> None: ...

    def draw_segment(self, segment: Segment, color: str = "red") -> None: ...

    def draw_bounds(self, bounds: Bounds, color: str = "green") -> None: ...


class NullObserver:
    """Observer that ignores everything."""

    def clear(self) -> None:
        pass

    def new_frame(self) -> None:
        pass

    def draw_point(self, point: Point, color: str = "red") -> None:
        pass

    def draw_segment(self, segment: Segment, color: str = "red") -> None:
        pass

    def draw_bounds(self, bounds: Bounds, color: str = "green") -> None:
        pass


@dataclass(frozen=True)
class DebugPoint:
    point: Point
    color: str


@dataclass(frozen=True)
class DebugSegment:
    segment: Segment
    color: str


@dataclass(frozen=True)
class DebugBounds:
    bounds: Bounds
    color: str


DebugPrimitive = Union[DebugPoint, DebugSegment, DebugBounds]


@dataclass
class DebugFrame:
    """Primitives drawn during one step of the router."""

    index: int
    primitives: list[DebugPrimitive] = field(default_factory=list)

    @property
    def points(self) -> list[DebugPoint]:
        return [p for p in self.primitives if isinstance(p, DebugPoint)]

    @property
    def segments(self) -> list[DebugSegment]:
        return [p for p in self.primitives if isinstance(p, DebugSegment)]

    @property
    def bounds(self) -> list[DebugBounds]:
        return [p for p in self.primitives if isinstance(p, DebugBounds)]


class RecordingObserver:
    """
    Observer that keeps every primitive it receives.

    Drawing calls made before the first ``new_frame`` (box construction,
    stub placement) land in frame 0. Each ``new_frame`` call opens the next
    frame, so frame ``i + 1`` holds what kernel step ``i`` drew.

    Attributes:
        frames: Recorded frames, oldest first
    """

    def __init__(self) -> None:
        self.frames: list[DebugFrame] = [DebugFrame(0)]

    def clear(self) -> None:
        self.frames = [DebugFrame(0)]

    def new_frame(self) -> None:
        self.frames.append(DebugFrame(len(self.frames)))

    def draw_point(self, point: Point, color: str = "red") -> None:
        self.frames[-1].primitives.append(DebugPoint(point, color))

    def draw_segment(self, segment: Segment, color: str = "red") -> None:
        self.frames[-1].primitives.append(DebugSegment(segment, color))

    def draw_bounds(self, bounds: Bounds, color: str = "green") -> None:
        self.frames[-1].primitives.append(DebugBounds(bounds, color))

    @property
    def primitives(self) -> list[DebugPrimitive]:
        """All primitives across frames, in drawing order."""
        return [p for frame in self.frames for p in frame.primitives]

    def __len__(self) -> int:
        return len(self.primitives)


__all__ = [
    "RoutingObserver",
    "NullObserver",
    "RecordingObserver",
    "DebugFrame",
    "DebugPoint",
    "DebugSegment",
    "DebugBounds",
    "DebugPrimitive",
]
