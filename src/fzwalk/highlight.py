"""Match highlighting for display paths."""

from __future__ import annotations

import os
from collections.abc import Iterable

import click


def decorate(text: str, positions: Iterable[int], *, color: bool = True) -> str:
    if not color:
        return text
    marked = set(positions)
    return "".join(
        click.style(ch, fg="red", bold=True) if index in marked else ch
        for index, ch in enumerate(text)
    )


def display_path(parent: str, name: str) -> str:
    """Render ``./parent/name``; root-level entries render as ``./name``."""
    if not parent or parent == ".":
        return f".{os.sep}{name}"
    return f".{os.sep}{parent}{os.sep}{name}"
