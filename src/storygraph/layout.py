"""Vertical layout of a single beat."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .colors import Color, ColorAssigner
from .errors import DuplicateEntityInBeat
from .story import Beat
from .track_state import TrackState

__all__ = ["Transition", "BeatLayout", "layout_beat"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """Movement of one entity's line from its previous track to its new one."""

    entity: str
    previous_y: float
    new_y: float
    color: Color

    @property
    def travel(self) -> float:
        return self.new_y - self.previous_y


@dataclass
class BeatLayout:
    positions: dict[str, float] = field(default_factory=dict)
    transitions: list[Transition] = field(default_factory=list)


def _dedupe_groups(
    groups: Iterable[tuple[str, ...]],
    *,
    beat_index: int,
    skip_duplicates: bool,
) -> list[tuple[str, ...]]:
    """Return groups with each entity listed once, or raise on repeats."""

    seen: set[str] = set()
    cleaned: list[tuple[str, ...]] = []
    for group in groups:
        kept: list[str] = []
        for entity in group:
            if entity in seen:
                if not skip_duplicates:
                    raise DuplicateEntityInBeat(beat_index, entity)
                logger.warning("Skipping repeated %r in beat %d", entity, beat_index)
                continue
            seen.add(entity)
            kept.append(entity)
        cleaned.append(tuple(kept))
    return cleaned


def layout_beat(
    beat: Beat | Iterable[Iterable[str]],
    vertical_origin: float,
    in_group_gap: float,
    inter_group_gap: float,
    track_state: TrackState,
    *,
    beat_index: int = 0,
    assigner: ColorAssigner | None = None,
    skip_duplicates: bool = False,
) -> BeatLayout:
    """Place every entity of ``beat`` and record how far each one moved.

    Groups are stacked top to bottom from ``vertical_origin``. Entities in a
    group sit ``in_group_gap`` apart and consecutive non-empty groups are
    separated by ``inter_group_gap``; no gap follows the last entity of a
    group. An entity seen for the first time starts where it lands, so its
    joiner has no vertical travel.

    The beat is validated before ``track_state`` is touched: a repeated entity
    raises :class:`DuplicateEntityInBeat` unless ``skip_duplicates`` is set, in
    which case only the first occurrence is placed.
    """

    groups = _dedupe_groups(Beat.coerce(beat).groups, beat_index=beat_index, skip_duplicates=skip_duplicates)
    assigner = assigner or ColorAssigner()

    result = BeatLayout()
    current_y = vertical_origin
    for group in groups:
        if not group:
            continue
        for index, entity in enumerate(group):
            previous_y = track_state.position_of(entity)
            if previous_y is None:
                previous_y = current_y
            color = assigner.color_for(entity, track_state.colors)
            result.transitions.append(
                Transition(entity=entity, previous_y=previous_y, new_y=current_y, color=color)
            )
            result.positions[entity] = current_y
            if index < len(group) - 1:
                current_y += in_group_gap
        current_y += inter_group_gap

    for transition in result.transitions:
        track_state.update(transition.entity, transition.color, transition.new_y)
    return result
