"""Fuzzy subsequence scoring of entry names against a query.

A name matches when every query character appears in it in order. The
longest common subsequence from rapidfuzz decides that and supplies the
matched positions. The score is rapidfuzz's normalized similarity plus small
bonuses for matches on word boundaries and consecutive runs.
"""

from __future__ import annotations

from functools import lru_cache

from rapidfuzz import fuzz
from rapidfuzz.distance import LCSseq

BONUS_BOUNDARY = 8
BONUS_CONSECUTIVE = 4


def _fold(text: str) -> str:
    # Per-character lowering keeps indices aligned with the original text.
    folded = []
    for ch in text:
        lowered = ch.lower()
        folded.append(lowered if len(lowered) == 1 else ch)
    return "".join(folded)


def _is_boundary(text: str, index: int) -> bool:
    if index == 0:
        return True
    prev, cur = text[index - 1], text[index]
    if not prev.isalnum():
        return cur.isalnum()
    return prev.islower() and cur.isupper()


class FuzzyMatcher:
    """Scores candidates against one query.

    Smart case: matching ignores case unless the query has an upper-case
    character.
    """

    def __init__(self, query: str) -> None:
        self.query = query
        self.case_sensitive = any(ch.isupper() for ch in query)
        self._needle = query if self.case_sensitive else _fold(query)

    def fuzzy_indices(self, text: str) -> tuple[int, list[int]] | None:
        needle = self._needle
        if not needle:
            return 0, []
        if len(needle) > len(text):
            return None

        haystack = text if self.case_sensitive else _fold(text)
        if LCSseq.similarity(needle, haystack, score_cutoff=len(needle)) < len(needle):
            return None

        positions: list[int] = []
        for op in LCSseq.opcodes(needle, haystack):
            if op.tag == "equal":
                positions.extend(range(op.dest_start, op.dest_end))
        if len(positions) != len(needle):
            return None

        score = round(fuzz.ratio(needle, haystack))
        score += BONUS_BOUNDARY * sum(1 for index in positions if _is_boundary(text, index))
        score += BONUS_CONSECUTIVE * sum(1 for a, b in zip(positions, positions[1:]) if b == a + 1)
        return score, positions

    def score_and_locate(self, name: str) -> tuple[int, set[int]] | None:
        result = self.fuzzy_indices(name)
        if result is None:
            return None
        score, positions = result
        return score, set(positions)


@lru_cache(maxsize=16)
def _matcher_for(query: str) -> FuzzyMatcher:
    return FuzzyMatcher(query)


def score_and_locate(name: str, query: str) -> tuple[int, set[int]] | None:
    return _matcher_for(query).score_and_locate(name)
