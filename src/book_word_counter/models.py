from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True, frozen=True)
class RankedEntry:
    """A word and its occurrence count, detached from the table."""

    word: str
    count: int


class SortMode(str, Enum):
    """Orderings offered for ranked output."""

    ALPHABETICAL = "alphabetical"
    FREQUENCY = "frequency"

    @classmethod
    def parse(cls, value: str | SortMode) -> SortMode:
        if isinstance(value, SortMode):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Sort mode must be a string, got {value!r}.")
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(
                f"Unknown sort mode {value!r}; expected one of: {choices}."
            ) from exc
