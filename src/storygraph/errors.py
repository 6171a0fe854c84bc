"""Exceptions raised while laying out a story."""

from __future__ import annotations

__all__ = ["StorygraphError", "DuplicateEntityInBeat"]


class StorygraphError(RuntimeError):
    """Base class for storygraph failures."""


class DuplicateEntityInBeat(StorygraphError, ValueError):
    """Raised when an entity is listed more than once within a single beat."""

    def __init__(self, beat_index: int, entity: str) -> None:
        super().__init__(f"Entity {entity!r} appears in more than one group in beat {beat_index}")
        self.beat_index = beat_index
        self.entity = entity
