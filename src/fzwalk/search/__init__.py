"""Concurrent traversal, ranking and live rendering."""

from fzwalk.search.ranking import TOP_K, RankedFrame, rank, rank_all
from fzwalk.search.renderer import LiveRenderer, Terminal, render_final
from fzwalk.search.searcher import SearchReport, Searcher
from fzwalk.search.store import Candidate, MatchStore
from fzwalk.search.walker import TreeWalker

__all__ = [
    "Candidate",
    "LiveRenderer",
    "MatchStore",
    "RankedFrame",
    "SearchReport",
    "Searcher",
    "TOP_K",
    "Terminal",
    "TreeWalker",
    "rank",
    "rank_all",
    "render_final",
]
