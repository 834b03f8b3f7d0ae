"""Parallel recursive directory walk feeding the match store."""

from __future__ import annotations

import concurrent.futures
import threading
from collections.abc import Callable
from pathlib import Path

from fzwalk.fs.filtering import PathFilter
from fzwalk.fs.listing import ChildEntry, list_children
from fzwalk.highlight import decorate, display_path
from fzwalk.matcher import FuzzyMatcher
from fzwalk.runtime_logging import RuntimeLogger, get_runtime_logger
from fzwalk.search.store import Candidate, MatchStore


def _undecodable(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


class TreeWalker:
    """Visit every entry under ``root`` once, scoring each by base name.

    Each directory is one pool task: it lists its children, scores them, and
    submits one task per subdirectory. ``walk()`` waits on a pending-task
    counter, so it returns only after every descendant has been processed.
    """

    def __init__(
        self,
        root: Path,
        matcher: FuzzyMatcher,
        store: MatchStore,
        *,
        max_workers: int = 14,
        verbose: bool = False,
        color: bool = True,
        path_filter: PathFilter | None = None,
        lister: Callable[[Path], list[ChildEntry]] = list_children,
        on_unreadable: Callable[[Path], None] | None = None,
        logger: RuntimeLogger | None = None,
    ) -> None:
        self.root = root
        self.matcher = matcher
        self.store = store
        self.max_workers = max_workers
        self.verbose = verbose
        self.color = color
        self.path_filter = path_filter
        self.lister = lister
        self.on_unreadable = on_unreadable
        self.unreadable: list[Path] = []
        self._pool: concurrent.futures.ThreadPoolExecutor | None = None
        self._pending = 0
        self._failures: list[BaseException] = []
        self._idle = threading.Condition()
        self._logger = logger or get_runtime_logger()

    def walk(self) -> None:
        self.unreadable = []
        self._failures = []
        self._pending = 0

        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="fzwalk-walk",
        ) as pool:
            self._pool = pool
            self._submit(self.root)
            with self._idle:
                self._idle.wait_for(lambda: self._pending == 0)
        self._pool = None

        if self._failures:
            raise self._failures[0]

    def _submit(self, directory: Path) -> None:
        assert self._pool is not None
        with self._idle:
            self._pending += 1
        self._pool.submit(self._run, directory)

    def _run(self, directory: Path) -> None:
        try:
            self._visit(directory)
        except Exception as exc:
            self._logger.error("walk.task_failed", path=str(directory), error=repr(exc))
            with self._idle:
                self._failures.append(exc)
        finally:
            with self._idle:
                self._pending -= 1
                if self._pending == 0:
                    self._idle.notify_all()

    def _visit(self, directory: Path) -> None:
        try:
            children = self.lister(directory)
        except OSError as exc:
            self._report_unreadable(directory, exc)
            return

        for child in children:
            name = child.path.name
            if _undecodable(name):
                self._report_unreadable(child.path, None)
                continue
            if self.path_filter is not None and not self.path_filter.include(child.path, is_dir=child.is_dir):
                continue

            self._check_match(child.path, name)
            if child.is_dir:
                self._submit(child.path)

    def _check_match(self, path: Path, name: str) -> None:
        result = self.matcher.score_and_locate(name)
        if result is None:
            return

        score, positions = result
        relative = path.relative_to(self.root)
        self.store.append(
            Candidate(
                score=score,
                display_text=display_path(str(relative.parent), decorate(name, positions, color=self.color)),
                relative_path=str(relative),
            )
        )

    def _report_unreadable(self, path: Path, exc: OSError | None) -> None:
        with self._idle:
            self.unreadable.append(path)
        self._logger.warning(
            "walk.unreadable",
            path=str(path),
            error=repr(exc) if exc is not None else "undecodable name",
        )
        if self.verbose and self.on_unreadable is not None:
            self.on_unreadable(path)
