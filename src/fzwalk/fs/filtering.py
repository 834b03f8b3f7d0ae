"""Optional path exclusion using .gitignore patterns."""

from __future__ import annotations

from pathlib import Path

import pathspec


class PathFilter:
    def __init__(self, root: Path) -> None:
        self.root = root.resolve()
        self._spec = self._build_spec()

    def _build_spec(self) -> pathspec.PathSpec:
        patterns: list[str] = [".git/"]

        gitignore = self.root / ".gitignore"
        if gitignore.is_file():
            for line in gitignore.read_text(encoding="utf-8", errors="replace").splitlines():
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                patterns.append(line)

        return pathspec.PathSpec.from_lines("gitwildmatch", patterns)

    def include(self, path: Path, *, is_dir: bool = False) -> bool:
        try:
            rel = path.relative_to(self.root)
        except ValueError:
            return False

        rel_text = rel.as_posix()
        if is_dir:
            rel_text += "/"
        return not self._spec.match_file(rel_text)
