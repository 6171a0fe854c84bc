"""Input model: a story is an ordered list of beats."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .colors import Color

__all__ = ["Beat", "Story", "coerce_beats"]


@dataclass(frozen=True)
class Beat:
    """Groups of co-located entities, in the order they should be displayed."""

    groups: tuple[tuple[str, ...], ...]

    @classmethod
    def from_groups(cls, groups: Iterable[Iterable[str]]) -> "Beat":
        return cls(groups=tuple(tuple(group) for group in groups))

    @classmethod
    def coerce(cls, value: "Beat | Iterable[Iterable[str]]") -> "Beat":
        if isinstance(value, Beat):
            return value
        return cls.from_groups(value)

    @property
    def entities(self) -> list[str]:
        return [entity for group in self.groups for entity in group]


def coerce_beats(beats: Iterable["Beat | Iterable[Iterable[str]]"]) -> list[Beat]:
    return [Beat.coerce(beat) for beat in beats]


@dataclass(frozen=True)
class Story:
    """A titled sequence of beats with optional preset colours per entity."""

    beats: Sequence[Beat]
    colors: Mapping[str, Color | str] = field(default_factory=dict)
    title: str = "Storygraph"

    @property
    def cast(self) -> list[str]:
        """Every entity in order of first appearance."""

        seen: dict[str, None] = {}
        for beat in self.beats:
            for entity in beat.entities:
                seen.setdefault(entity, None)
        return list(seen)
