from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List

LOGGER = logging.getLogger(__name__)

MAX_HISTORY = 50


@dataclass(frozen=True)
class HistoryState:
    content: str
    timestamp: int


def _now_ms() -> int:
    return int(time.time() * 1000)


class HistoryManager:
    """Linear undo/redo timeline of content snapshots.

    The timeline always holds at least one entry and at most ``max_entries``.
    Recording after an undo discards the undone entries; once the limit is
    exceeded the oldest entries are evicted.
    """

    def __init__(
        self,
        initial_content: str = "",
        *,
        max_entries: int = MAX_HISTORY,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1.")
        self.max_entries = max_entries
        self._clock = clock or _now_ms
        self._entries: List[HistoryState] = []
        self._cursor = 0
        self.reset(initial_content)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> tuple[HistoryState, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> HistoryState:
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def reset(self, content: str = "") -> None:
        """Start a fresh timeline seeded with ``content``."""

        self._entries = [HistoryState(content, self._clock())]
        self._cursor = 0

    def record(self, content: str) -> None:
        del self._entries[self._cursor + 1 :]
        self._entries.append(HistoryState(content, self._clock()))

        overflow = len(self._entries) - self.max_entries
        if overflow > 0:
            del self._entries[:overflow]
            LOGGER.debug("Evicted %d history entries", overflow)

        self._cursor = len(self._entries) - 1
        LOGGER.debug("Recorded history entry %d/%d", self._cursor + 1, len(self._entries))

    def undo(self) -> str | None:
        if not self.can_undo:
            return None
        self._cursor -= 1
        LOGGER.debug("Undo to history entry %d", self._cursor)
        return self._entries[self._cursor].content

    def redo(self) -> str | None:
        if not self.can_redo:
            return None
        self._cursor += 1
        LOGGER.debug("Redo to history entry %d", self._cursor)
        return self._entries[self._cursor].content
