"""Top-K reduction of store snapshots."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from fzwalk.search.store import Candidate

TOP_K = 10


@dataclass(slots=True, frozen=True)
class RankedFrame:
    lines: tuple[str, ...]
    extra_count: int


def rank_all(snapshot: Sequence[Candidate]) -> list[Candidate]:
    # sorted() is stable with reverse=True too: equal scores keep snapshot order.
    return sorted(snapshot, key=lambda candidate: candidate.score, reverse=True)


def rank(snapshot: Sequence[Candidate], limit: int = TOP_K) -> RankedFrame:
    shown = min(len(snapshot), limit)
    ordered = rank_all(snapshot)
    return RankedFrame(
        lines=tuple(candidate.display_text for candidate in ordered[:shown]),
        extra_count=len(snapshot) - shown,
    )
