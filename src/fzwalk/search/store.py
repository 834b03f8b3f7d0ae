"""Append-only, thread-shared collection of scored matches."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Candidate:
    score: int
    display_text: str
    relative_path: str = ""


class MatchStore:
    """Walker threads append; the renderer and orchestrator take snapshots.

    Every operation holds the lock only for a single list operation, so no
    caller ever keeps it across a multi-step update.
    """

    def __init__(self) -> None:
        self._items: list[Candidate] = []
        self._changed = threading.Condition()

    def append(self, candidate: Candidate) -> None:
        with self._changed:
            self._items.append(candidate)
            self._changed.notify_all()

    def snapshot(self) -> list[Candidate]:
        with self._changed:
            return list(self._items)

    def __len__(self) -> int:
        with self._changed:
            return len(self._items)

    def wait_for_growth(self, seen: int, timeout: float | None = None) -> int:
        """Block until more than ``seen`` candidates exist or ``timeout`` passes.

        Returns the current size either way.
        """
        with self._changed:
            self._changed.wait_for(lambda: len(self._items) > seen, timeout=timeout)
            return len(self._items)
