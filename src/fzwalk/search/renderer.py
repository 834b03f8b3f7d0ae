"""Terminal output for in-progress and final rankings."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import IO

import click

from fzwalk.runtime_logging import RuntimeLogger, get_runtime_logger
from fzwalk.search.ranking import TOP_K, RankedFrame, rank
from fzwalk.search.store import MatchStore

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class Terminal:
    """Writes frames to ``stream`` (stdout by default) through ``click.echo``."""

    def __init__(self, stream: IO[str] | None = None, *, color: bool | None = None) -> None:
        self.stream = stream
        self.color = color

    def clear(self) -> None:
        self._write(CLEAR_SCREEN)

    def write_lines(self, lines: Iterable[str]) -> None:
        self._write("".join(f"{line}\n" for line in lines))

    def progress(self, extra_count: int) -> None:
        self._write(f"\r... {extra_count} more matches")

    def summary(self, extra_count: int) -> None:
        self._write(f"... {extra_count} more matches\n")

    def _write(self, text: str) -> None:
        click.echo(text, file=self.stream, nl=False, color=self.color)


class LiveRenderer:
    """Redraws the top matches while the walk is running.

    The displayed list is redrawn only when it differs from the last one
    written; otherwise the in-place progress line is updated. The loop exits
    after the first pass that observes ``done``.
    """

    def __init__(
        self,
        store: MatchStore,
        done: threading.Event,
        terminal: Terminal,
        *,
        limit: int = TOP_K,
        poll_interval_s: float = 0.05,
        logger: RuntimeLogger | None = None,
    ) -> None:
        self.store = store
        self.done = done
        self.terminal = terminal
        self.limit = limit
        self.poll_interval_s = poll_interval_s
        self.redraws = 0
        self._last_rendered: tuple[str, ...] = ()
        self._last_extra: int | None = None
        self._thread: threading.Thread | None = None
        self._logger = logger or get_runtime_logger()

    def start(self) -> None:
        self._thread = threading.Thread(target=self.run, name="fzwalk-render", daemon=True)
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def run(self) -> None:
        self._logger.debug("renderer.started", limit=self.limit)
        try:
            while True:
                snapshot = self.store.snapshot()
                self.render_frame(rank(snapshot, self.limit))
                if self.done.is_set():
                    break
                self.store.wait_for_growth(len(snapshot), timeout=self.poll_interval_s)
        except Exception as exc:
            # A broken terminal must not take the walk down with it.
            self._logger.error("renderer.failed", error=repr(exc))
        self._logger.debug("renderer.stopped", redraws=self.redraws)

    def render_frame(self, frame: RankedFrame) -> bool:
        """Draw ``frame``; return True when a full redraw happened."""
        if frame.lines == self._last_rendered:
            if frame.extra_count != self._last_extra:
                self.terminal.progress(frame.extra_count)
                self._last_extra = frame.extra_count
            return False

        self.terminal.clear()
        self.terminal.write_lines(frame.lines)
        self._last_rendered = frame.lines
        self._last_extra = None
        self.redraws += 1
        return True


def render_final(store: MatchStore, terminal: Terminal, limit: int = TOP_K) -> RankedFrame:
    frame = rank(store.snapshot(), limit)
    terminal.clear()
    terminal.write_lines(frame.lines)
    terminal.summary(frame.extra_count)
    return frame
