"""Layout constants for drawing story timelines."""

from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = [
    "X_PADDING",
    "Y_PADDING",
    "CURVE_X_DISTANCE",
    "STRAIGHT_X_DISTANCE",
    "IN_GROUP_Y_DISTANCE",
    "INTER_GROUP_Y_DISTANCE",
    "STROKE_WIDTH",
    "HALO_EXTRA_WIDTH",
    "NAME_EVERY_N_STRAIGHTS",
    "BACKGROUND_COLOR",
    "LayoutSettings",
    "DEFAULT_SETTINGS",
]

X_PADDING = 10.0
Y_PADDING = 10.0
CURVE_X_DISTANCE = 70.0
STRAIGHT_X_DISTANCE = 50.0
# Distance between entities in a group.
IN_GROUP_Y_DISTANCE = 10.0
# Distance between groups.
INTER_GROUP_Y_DISTANCE = 50.0
STROKE_WIDTH = 5.0
HALO_EXTRA_WIDTH = 4.0
NAME_EVERY_N_STRAIGHTS = 4
BACKGROUND_COLOR = "#1b1b1b"


@dataclass(frozen=True)
class LayoutSettings:
    """Geometry and styling used for a single render pass."""

    x_padding: float = X_PADDING
    y_padding: float = Y_PADDING
    curve_span: float = CURVE_X_DISTANCE
    straight_span: float = STRAIGHT_X_DISTANCE
    in_group_gap: float = IN_GROUP_Y_DISTANCE
    inter_group_gap: float = INTER_GROUP_Y_DISTANCE
    stroke_width: float = STROKE_WIDTH
    halo_extra_width: float = HALO_EXTRA_WIDTH
    label_every: int = NAME_EVERY_N_STRAIGHTS
    background: str = BACKGROUND_COLOR

    @property
    def beat_span(self) -> float:
        return self.curve_span + self.straight_span

    @property
    def halo_width(self) -> float:
        return self.stroke_width + self.halo_extra_width

    def with_overrides(self, **changes: object) -> "LayoutSettings":
        """Return a copy with ``changes`` applied, ignoring ``None`` values."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})


DEFAULT_SETTINGS = LayoutSettings()
