"""Wires the tree walk and the live renderer together for one query."""

from __future__ import annotations

import threading
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from fzwalk.config.models import AppSettings
from fzwalk.fs.filtering import PathFilter
from fzwalk.fs.listing import ChildEntry, list_children
from fzwalk.matcher import FuzzyMatcher
from fzwalk.runtime_logging import get_runtime_logger
from fzwalk.search.ranking import RankedFrame, rank_all
from fzwalk.search.renderer import LiveRenderer, Terminal, render_final
from fzwalk.search.store import Candidate, MatchStore
from fzwalk.search.walker import TreeWalker


@dataclass(slots=True)
class SearchReport:
    frame: RankedFrame
    total_matches: int
    elapsed_s: float
    unreadable: list[Path] = field(default_factory=list)
    candidates: list[Candidate] = field(default_factory=list)


class Searcher:
    def __init__(
        self,
        root: Path,
        query: str,
        *,
        settings: AppSettings | None = None,
        verbose: bool = False,
        live: bool | None = None,
        show_all: bool = False,
        terminal: Terminal | None = None,
        lister: Callable[[Path], list[ChildEntry]] = list_children,
        on_unreadable: Callable[[Path], None] | None = None,
    ) -> None:
        self.root = root.expanduser().resolve()
        self.query = query
        self.settings = settings or AppSettings()
        self.verbose = verbose
        self.live = self.settings.display.live if live is None else live
        self.show_all = show_all
        self.terminal = terminal or Terminal()
        self.lister = lister
        self.on_unreadable = on_unreadable
        self._logger = get_runtime_logger()

    def search(self) -> SearchReport:
        search_settings = self.settings.search
        store = MatchStore()
        done = threading.Event()
        logger = self._logger.bind(search_id=uuid.uuid4().hex[:8], root=str(self.root), query=self.query)

        walker = TreeWalker(
            self.root,
            FuzzyMatcher(self.query),
            store,
            max_workers=search_settings.workers,
            verbose=self.verbose,
            color=self.settings.display.color,
            path_filter=PathFilter(self.root) if search_settings.respect_ignore else None,
            lister=self.lister,
            on_unreadable=self.on_unreadable,
            logger=logger,
        )
        renderer = None
        if self.live:
            renderer = LiveRenderer(
                store,
                done,
                self.terminal,
                limit=search_settings.top_k,
                poll_interval_s=search_settings.poll_interval_s,
                logger=logger,
            )

        logger.info(
            "search.started",
            workers=search_settings.workers,
            live=self.live,
        )
        started = time.monotonic()
        if renderer is not None:
            renderer.start()
        try:
            walker.walk()
        finally:
            done.set()
            if renderer is not None:
                renderer.join()

        frame = render_final(store, self.terminal, search_settings.top_k)
        candidates = rank_all(store.snapshot())
        if self.show_all:
            self.terminal.write_lines(candidate.display_text for candidate in candidates)
        elapsed = time.monotonic() - started

        logger.info(
            "search.finished",
            matches=len(candidates),
            unreadable=len(walker.unreadable),
            elapsed_s=round(elapsed, 4),
        )
        return SearchReport(
            frame=frame,
            total_matches=len(candidates),
            elapsed_s=elapsed,
            unreadable=list(walker.unreadable),
            candidates=candidates,
        )
