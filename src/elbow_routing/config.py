"""
Routing configuration.

All tuning constants of the elbow router live on ``RoutingConfig``. The
defaults reproduce the stock routing behavior; pass a custom instance to
``route_elbow_arrow`` / ``route_points`` to experiment with other sizes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .validation import InvalidConfigError


@dataclass(frozen=True)
class RoutingConfig:
    """
    Tuning constants for elbow routing.

    Attributes:
        step_count_limit: Maximum number of kernel iterations per route
        min_dongle_size: Stub length used when an endpoint has no dongle box
        dongle_extension_size: Offset of the dongle regime (stub clearance)
        hitbox_extension_size: Offset of the hit-box regime (obstacles)
        search_cone_multiplier: Outward scaling of the heading search cones
        dongle_offset_reduction: Subtracted from half an offset when sizing
            the boxes around bound shapes
    """

    step_count_limit: int = 50
    min_dongle_size: float = 30.0
    dongle_extension_size: float = 50.0
    hitbox_extension_size: float = 5.0
    search_cone_multiplier: float = 2.0
    dongle_offset_reduction: float = 5.0

    def __post_init__(self) -> None:
        if self.step_count_limit < 1:
            raise InvalidConfigError(
                f"step_count_limit must be at least 1, got {self.step_count_limit}"
            )
        for name in ("min_dongle_size", "dongle_extension_size", "hitbox_extension_size"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidConfigError(f"{name} must be positive, got {value}")
        if self.search_cone_multiplier < 1:
            raise InvalidConfigError(
                f"search_cone_multiplier must be at least 1, got {self.search_cone_multiplier}"
            )
        if self.dongle_offset_reduction < 0:
            raise InvalidConfigError(
                f"dongle_offset_reduction must be non-negative, got {self.dongle_offset_reduction}"
            )

    @property
    def forward_hit_threshold(self) -> float:
        """Forward hits farther away than this are handled by shortening."""
        return self.dongle_extension_size - self.hitbox_extension_size + 1


DEFAULT_CONFIG = RoutingConfig()


__all__ = ["RoutingConfig", "DEFAULT_CONFIG"]
