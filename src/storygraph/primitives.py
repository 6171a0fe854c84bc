"""Drawable shapes produced by the layout pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .colors import Color

__all__ = ["Point", "Layer", "Stroke", "LineSegment", "CubicBezier", "Primitive"]

Point = tuple[float, float]


class Layer(str, Enum):
    """Draw order within a transition; halos go underneath lines."""

    HALO = "halo"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class Stroke:
    width: float
    color: Color


@dataclass(frozen=True, slots=True)
class LineSegment:
    start: Point
    end: Point
    stroke: Stroke
    layer: Layer = Layer.LINE

    kind = "segment"

    @property
    def is_halo(self) -> bool:
        return self.layer is Layer.HALO

    def sample(self, steps: int = 2) -> np.ndarray:
        return np.linspace(self.start, self.end, max(steps, 2))


@dataclass(frozen=True, slots=True)
class CubicBezier:
    points: tuple[Point, Point, Point, Point]
    stroke: Stroke
    layer: Layer = Layer.LINE

    kind = "bezier"

    @property
    def is_halo(self) -> bool:
        return self.layer is Layer.HALO

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[3]

    def sample(self, steps: int = 24) -> np.ndarray:
        """Evaluate the curve at ``steps`` evenly spaced parameter values."""

        t = np.linspace(0.0, 1.0, max(steps, 2))[:, None]
        p0, p1, p2, p3 = (np.asarray(point, dtype=float) for point in self.points)
        u = 1.0 - t
        return u**3 * p0 + 3 * u**2 * t * p1 + 3 * u * t**2 * p2 + t**3 * p3


Primitive = LineSegment | CubicBezier
