"""Deterministic colour assignment for story entities."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from typing import Iterator, Mapping

__all__ = [
    "GOLDEN_RATIO_CONJUGATE",
    "AUTO_SATURATION",
    "AUTO_VALUE",
    "Color",
    "ColorTable",
    "ColorAssigner",
    "auto_color",
]

GOLDEN_RATIO_CONJUGATE = (math.sqrt(5.0) - 1.0) / 2.0  # 0.61803398875
AUTO_SATURATION = 0.85
AUTO_VALUE = 0.5


@dataclass(frozen=True)
class Color:
    """An opaque sRGB colour."""

    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"Expected a #rrggbb colour, got {value!r}")
        return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))

    @classmethod
    def coerce(cls, value: "Color | str") -> "Color":
        return value if isinstance(value, Color) else cls.from_hex(value)


def _srgb_u8_from_linear(component: float) -> int:
    """Encode a linear-light channel the way sRGB framebuffers expect."""

    if component <= 0.0:
        return 0
    if component <= 0.0031308:
        return round(3294.6 * component)
    if component <= 1.0:
        return round(269.025 * component ** (1.0 / 2.4) - 14.025)
    return 255


def auto_color(index: int) -> Color:
    """Return the ``index``-th automatically generated colour.

    Hues advance by the golden ratio conjugate so that consecutive indices land
    far apart on the colour wheel and the sequence never repeats exactly.
    """

    hue = (index * GOLDEN_RATIO_CONJUGATE) % 1.0
    r, g, b = colorsys.hsv_to_rgb(hue, AUTO_SATURATION, AUTO_VALUE)
    return Color(_srgb_u8_from_linear(r), _srgb_u8_from_linear(g), _srgb_u8_from_linear(b))


class ColorTable:
    """Append-only mapping of entity name to :class:`Color`."""

    def __init__(self, presets: Mapping[str, Color | str] | None = None) -> None:
        self._colors: dict[str, Color] = {}
        for entity, color in (presets or {}).items():
            self._colors[entity] = Color.coerce(color)

    def __contains__(self, entity: object) -> bool:
        return entity in self._colors

    def __iter__(self) -> Iterator[str]:  # pragma: no cover - trivial
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def get(self, entity: str) -> Color | None:
        return self._colors.get(entity)

    def add(self, entity: str, color: Color) -> Color:
        if entity in self._colors:
            raise KeyError(f"Colour for {entity!r} is already assigned")
        self._colors[entity] = color
        return color


class ColorAssigner:
    """Hand out stable colours in order of first appearance."""

    def color_for(self, entity: str, color_table: ColorTable) -> Color:
        existing = color_table.get(entity)
        if existing is not None:
            return existing
        # Preset colours count toward the index.
        return color_table.add(entity, auto_color(len(color_table)))
