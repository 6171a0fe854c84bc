"""Per-entity layout state carried from beat to beat."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

import pandas as pd

from .colors import Color, ColorTable

__all__ = ["TrackEntry", "TrackState"]


@dataclass(frozen=True)
class TrackEntry:
    """Where an entity's line currently rests and how it is coloured."""

    color: Color
    y: float


class TrackState:
    """Mutable mapping of entity name to its last known :class:`TrackEntry`.

    Entities that are absent from a beat keep their previous entry, so an
    entity returning later resumes from the position it last occupied.
    """

    def __init__(self, colors: ColorTable | None = None) -> None:
        self.colors = colors if colors is not None else ColorTable()
        self._entries: dict[str, TrackEntry] = {}

    def __contains__(self, entity: object) -> bool:
        return entity in self._entries

    def __iter__(self) -> Iterator[str]:  # pragma: no cover - trivial
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, entity: str) -> TrackEntry | None:
        return self._entries.get(entity)

    def position_of(self, entity: str) -> float | None:
        entry = self._entries.get(entity)
        return None if entry is None else entry.y

    def update(self, entity: str, color: Color, y: float) -> None:
        self._entries[entity] = TrackEntry(color=color, y=y)

    def positions(self) -> dict[str, float]:
        return {entity: entry.y for entity, entry in self._entries.items()}

    def snapshot(self) -> Mapping[str, TrackEntry]:
        return dict(self._entries)

    def to_dataframe(self) -> pd.DataFrame:
        data = [
            {"entity": entity, "y": entry.y, "color": entry.color.hex}
            for entity, entry in self._entries.items()
        ]
        if not data:
            return pd.DataFrame(columns=["entity", "y", "color"])
        return pd.DataFrame(data)
