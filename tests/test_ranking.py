from __future__ import annotations

import unittest

from fzwalk.search.ranking import TOP_K, rank, rank_all
from fzwalk.search.store import Candidate


def _candidates(scores: list[int]) -> list[Candidate]:
    return [Candidate(score=score, display_text=f"c{index}") for index, score in enumerate(scores)]


class RankTests(unittest.TestCase):
    def test_empty_snapshot(self) -> None:
        frame = rank([])
        self.assertEqual(frame.lines, ())
        self.assertEqual(frame.extra_count, 0)

    def test_exactly_top_k(self) -> None:
        frame = rank(_candidates(list(range(TOP_K))))
        self.assertEqual(len(frame.lines), TOP_K)
        self.assertEqual(frame.extra_count, 0)

    def test_bounded_display_counts_the_rest(self) -> None:
        for size in (1, 9, 11, 25):
            frame = rank(_candidates(list(range(size))))
            self.assertEqual(len(frame.lines), min(size, TOP_K))
            self.assertEqual(frame.extra_count, size - min(size, TOP_K))

    def test_orders_by_score_descending(self) -> None:
        frame = rank(_candidates([5, 30, -2, 12]))
        self.assertEqual(frame.lines, ("c1", "c3", "c0", "c2"))

    def test_ties_keep_snapshot_order(self) -> None:
        frame = rank(_candidates([7, 9, 7, 9, 7]))
        self.assertEqual(frame.lines, ("c1", "c3", "c0", "c2", "c4"))

    def test_is_pure_and_deterministic(self) -> None:
        snapshot = _candidates([3, 1, 3, 8, 0, 8, 2, 3, 5, 5, 1, 9])
        before = list(snapshot)
        first = rank(snapshot)
        second = rank(snapshot)
        self.assertEqual(first, second)
        self.assertEqual(snapshot, before)

    def test_custom_limit(self) -> None:
        frame = rank(_candidates([1, 2, 3]), limit=2)
        self.assertEqual(frame.lines, ("c2", "c1"))
        self.assertEqual(frame.extra_count, 1)

    def test_rank_all_keeps_every_candidate(self) -> None:
        ordered = rank_all(_candidates([1, 4, 2]))
        self.assertEqual([c.display_text for c in ordered], ["c1", "c2", "c0"])


if __name__ == "__main__":
    unittest.main()
