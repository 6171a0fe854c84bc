"""Drive the layout pass over a whole story."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

import pandas as pd

from .colors import Color, ColorAssigner, ColorTable
from .curves import emit
from .layout import layout_beat
from .primitives import Point, Primitive
from .settings import DEFAULT_SETTINGS, LayoutSettings
from .story import Beat, Story, coerce_beats
from .track_state import TrackState

__all__ = ["LabelPlacement", "RenderResult", "TimelineDriver", "render"]

logger = logging.getLogger(__name__)

PRIMITIVE_COLUMNS = ["beat", "entity", "kind", "layer", "x0", "y0", "x1", "y1", "stroke_width", "stroke_color"]


@dataclass(frozen=True)
class LabelPlacement:
    """Where a name label for ``entity`` may be drawn."""

    beat_index: int
    entity: str
    anchor: Point

    def to_dict(self) -> dict[str, float | int | str]:
        payload = dataclasses.asdict(self)
        payload["anchor"] = list(self.anchor)
        return payload


@dataclass
class RenderResult:
    """Everything a renderer needs to paint one story."""

    primitives: list[Primitive] = field(default_factory=list)
    labels: list[LabelPlacement] = field(default_factory=list)
    track_state: TrackState = field(default_factory=TrackState)
    width: float = 0.0
    height: float = 0.0
    # Parallel to ``primitives``: (beat index, entity) that produced each shape.
    origins: list[tuple[int, str]] = field(default_factory=list)

    def __iter__(self):  # pragma: no cover - trivial
        return iter(self.primitives)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self.primitives)

    def lines(self) -> list[Primitive]:
        return [primitive for primitive in self.primitives if not primitive.is_halo]

    def to_dataframe(self) -> pd.DataFrame:
        rows = []
        for (beat_index, entity), primitive in zip(self.origins, self.primitives):
            (x0, y0), (x1, y1) = primitive.start, primitive.end
            rows.append(
                {
                    "beat": beat_index,
                    "entity": entity,
                    "kind": primitive.kind,
                    "layer": primitive.layer.value,
                    "x0": x0,
                    "y0": y0,
                    "x1": x1,
                    "y1": y1,
                    "stroke_width": primitive.stroke.width,
                    "stroke_color": primitive.stroke.color.hex,
                }
            )
        if not rows:
            return pd.DataFrame(columns=PRIMITIVE_COLUMNS)
        return pd.DataFrame(rows)


class TimelineDriver:
    """Run beats through layout and curve emission in order.

    Each call to :meth:`render` starts from an empty :class:`TrackState` seeded
    only with preset colours, so independent stories never share state.
    """

    def __init__(
        self,
        settings: LayoutSettings | None = None,
        *,
        colors: Mapping[str, Color | str] | None = None,
        skip_duplicates: bool = False,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.colors = dict(colors or {})
        self.skip_duplicates = skip_duplicates

    def render(self, beats: Story | Iterable[Beat | Iterable[Iterable[str]]]) -> RenderResult:
        settings = self.settings
        presets = dict(self.colors)
        if isinstance(beats, Story):
            presets.update(beats.colors)
            beats = beats.beats
        beat_list = coerce_beats(beats)

        state = TrackState(ColorTable(presets))
        assigner = ColorAssigner()
        result = RenderResult(track_state=state)
        cursor = settings.x_padding
        lowest = settings.y_padding

        for beat_index, beat in enumerate(beat_list):
            layout = layout_beat(
                beat,
                settings.y_padding,
                settings.in_group_gap,
                settings.inter_group_gap,
                state,
                beat_index=beat_index,
                assigner=assigner,
                skip_duplicates=self.skip_duplicates,
            )
            curve_end = cursor + settings.curve_span
            for transition in layout.transitions:
                shapes = emit(
                    transition,
                    cursor,
                    curve_end,
                    settings.curve_span,
                    settings.straight_span,
                    settings.stroke_width,
                    halo_width=settings.halo_width,
                    background=settings.background,
                )
                result.primitives.extend(shapes)
                result.origins.extend((beat_index, transition.entity) for _ in shapes)
                lowest = max(lowest, transition.previous_y, transition.new_y)
                if settings.label_every > 0 and beat_index % settings.label_every == 0:
                    result.labels.append(
                        LabelPlacement(beat_index, transition.entity, (curve_end, transition.new_y))
                    )

            logger.debug(
                "Beat %d: %d entities in %d groups at x=%.1f",
                beat_index,
                len(layout.transitions),
                len(beat.groups),
                cursor,
            )
            cursor += settings.beat_span

        if beat_list:
            result.width = cursor + settings.x_padding
            result.height = lowest + settings.y_padding
        return result


def render(
    beats: Story | Iterable[Beat | Iterable[Iterable[str]]],
    settings: LayoutSettings | None = None,
) -> RenderResult:
    return TimelineDriver(settings).render(beats)
