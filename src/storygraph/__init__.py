"""Character-proximity timelines in the style of xkcd's movie narrative charts."""

from .colors import Color, ColorAssigner, ColorTable, auto_color
from .curves import emit
from .errors import DuplicateEntityInBeat, StorygraphError
from .layout import BeatLayout, Transition, layout_beat
from .primitives import CubicBezier, Layer, LineSegment, Stroke
from .settings import DEFAULT_SETTINGS, LayoutSettings
from .story import Beat, Story
from .timeline import LabelPlacement, RenderResult, TimelineDriver, render
from .track_state import TrackEntry, TrackState

__all__ = [
    "Beat",
    "BeatLayout",
    "Color",
    "ColorAssigner",
    "ColorTable",
    "CubicBezier",
    "DEFAULT_SETTINGS",
    "DuplicateEntityInBeat",
    "LabelPlacement",
    "Layer",
    "LayoutSettings",
    "LineSegment",
    "RenderResult",
    "Story",
    "StorygraphError",
    "Stroke",
    "TimelineDriver",
    "TrackEntry",
    "TrackState",
    "Transition",
    "auto_color",
    "emit",
    "layout_beat",
    "render",
]
