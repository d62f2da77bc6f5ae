"""
Scene access for elbow routing.

The router only needs two read-only queries from the host document: the
ordered list of live shapes (for hover detection) and a lookup by id (for
explicit bindings). ``SceneLike`` describes that contract; ``Scene`` is a
small in-memory implementation for tools, tests and scripts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Mapping, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import BindableShape


class SceneLike(Protocol):
    """Read-only scene queries used during a routing call."""

    def get_non_deleted_elements(self) -> Sequence[BindableShape]:
        """Live shapes in z-order, bottom first."""
        ...

    def get_non_deleted_elements_map(self) -> Mapping[str, BindableShape]:
        """Live shapes keyed by id."""
        ...


class Scene:
    """
    In-memory, z-ordered collection of bindable shapes.

    Shapes are kept in insertion order; later shapes sit on top. Deleted
    shapes stay in storage but are hidden from the routing queries.

    Example:
        scene = Scene([
            BindableShape("a", 0, 0, 100, 100),
            BindableShape("b", 300, 0, 100, 100),
        ])
        route = route_elbow_arrow(arrow, scene)
    """

    def __init__(self, shapes: Optional[Iterable[BindableShape]] = None) -> None:
        self._shapes: dict[str, BindableShape] = {}
        for shape in shapes or ():
            self.add(shape)

    def add(self, shape: BindableShape) -> Self:
        """Add or replace a shape. Replacing keeps the z-order slot."""
        self._shapes[shape.id] = shape
        return self

    def remove(self, shape_id: str) -> Self:
        """Remove a shape; unknown ids are ignored."""
        self._shapes.pop(shape_id, None)
        return self

    def get(self, shape_id: str) -> Optional[BindableShape]:
        """Look up a shape by id, deleted or not."""
        return self._shapes.get(shape_id)

    def get_non_deleted_elements(self) -> list[BindableShape]:
        return [s for s in self._shapes.values() if not s.is_deleted]

    def get_non_deleted_elements_map(self) -> dict[str, BindableShape]:
        return {s.id: s for s in self._shapes.values() if not s.is_deleted}

    def snapshot(self) -> Scene:
        """
        Copy of the current state.

        Shapes are immutable, so a shallow copy is a consistent read
        snapshot that later edits to this scene do not affect.
        """
        return Scene(self._shapes.values())

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[BindableShape]:
        return iter(list(self._shapes.values()))

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._shapes


__all__ = ["SceneLike", "Scene"]
