"""Turn entity transitions into curve and straight-run primitives."""

from __future__ import annotations

import math

from .colors import Color
from .layout import Transition
from .primitives import CubicBezier, Layer, LineSegment, Primitive, Stroke
from .settings import BACKGROUND_COLOR, HALO_EXTRA_WIDTH

__all__ = ["emit"]


def emit(
    transition: Transition,
    x_old: float,
    x_new: float | None,
    curve_span: float,
    straight_span: float,
    stroke_width: float,
    *,
    halo_width: float | None = None,
    background: Color | str = BACKGROUND_COLOR,
) -> list[Primitive]:
    """Build the primitives for one entity in one beat.

    The Bezier joins ``(x_old, previous_y)`` to ``(x_old + curve_span, new_y)``
    with both inner control points on the horizontal midpoint, giving an
    S-shaped step.
    A straight run of ``straight_span`` follows at ``new_y``. Each shape is
    preceded by a wider halo stroked in the background colour.

    ``x_new`` names the curve end the caller expects; it must equal
    ``x_old + curve_span`` and a mismatch raises :class:`ValueError`.
    """

    curve_end = x_old + curve_span
    if x_new is not None and not math.isclose(x_new, curve_end):
        raise ValueError(f"x_new={x_new} does not match x_old + curve_span={curve_end}")
    middle_x = x_old + curve_span / 2.0
    previous_y = transition.previous_y
    new_y = transition.new_y

    stroke = Stroke(stroke_width, transition.color)
    halo = Stroke(
        stroke_width + HALO_EXTRA_WIDTH if halo_width is None else halo_width,
        Color.coerce(background),
    )

    points = (
        (x_old, previous_y),
        (middle_x, previous_y),
        (middle_x, new_y),
        (curve_end, new_y),
    )
    straight = ((curve_end, new_y), (curve_end + straight_span, new_y))

    return [
        CubicBezier(points, halo, Layer.HALO),
        CubicBezier(points, stroke),
        LineSegment(*straight, halo, Layer.HALO),
        LineSegment(*straight, stroke),
    ]
