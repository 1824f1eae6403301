"""Cursor for stepping through the current match result."""

from __future__ import annotations

from enum import Enum

from .matching import MatchResult
from .models import SeedRecord


class StepDirection(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


class NavigationCursor:
    """Tracks the selected index into a MatchResult; -1 means nothing selected."""

    def __init__(self, result: MatchResult | None = None) -> None:
        self._result = result or MatchResult()
        self._index = -1

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> SeedRecord | None:
        if 0 <= self._index < len(self._result):
            return self._result.seeds[self._index]
        return None

    def reset(self, result: MatchResult | None = None) -> None:
        if result is not None:
            self._result = result
        self._index = -1

    def step(self, direction: StepDirection) -> SeedRecord | None:
        """Move one entry, clamped to the result bounds (no wraparound)."""
        if self._result.is_empty:
            return None
        if direction == StepDirection.PREVIOUS:
            self._index = max(0, self._index - 1)
        else:
            self._index = min(len(self._result) - 1, self._index + 1)
        return self.current

    def select_index(self, index: int) -> bool:
        if not 0 <= index < len(self._result):
            return False
        self._index = index
        return True
