"""Depth-limited minimax search engines."""

from .minimax import (
    MinimaxSearch,
    SearchResult,
    minimax,
    principal_variation,
    select_best,
)
from .parallel_minimax import ParallelMinimaxSearch

__all__ = [
    "MinimaxSearch",
    "ParallelMinimaxSearch",
    "SearchResult",
    "minimax",
    "principal_variation",
    "select_best",
]
