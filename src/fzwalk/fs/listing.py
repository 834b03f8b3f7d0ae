"""Directory listing used by the tree walker."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class ChildEntry:
    path: Path
    is_dir: bool


def list_children(path: Path) -> list[ChildEntry]:
    """List the immediate entries of ``path``.

    Raises ``OSError`` when the directory cannot be read. Symlinks to
    directories are reported as plain entries so walks never loop.
    """
    entries: list[ChildEntry] = []
    with os.scandir(path) as it:
        for entry in it:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            entries.append(ChildEntry(path=Path(entry.path), is_dir=is_dir))
    return entries
