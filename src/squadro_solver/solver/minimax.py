"""
Depth-limited minimax search.

Explores the game tree a fixed number of plies ahead and scores the leaves
with a pluggable heuristic. Maximizing and minimizing plies alternate; the
search returns the principal variation together with the leaf it ends in.
"""

import logging
import time
from typing import List, Optional, Sequence, Tuple

from ..core import GameState, Heuristic, generate_successors, is_completed

logger = logging.getLogger(__name__)

# (path, leaf). The path runs from the deepest ply back to the first move:
# path[-1] is the move played from the searched state.
SearchResult = Tuple[List[GameState], GameState]


def select_best(
    candidates: Sequence[SearchResult], maximizing: bool, heuristic: Heuristic
) -> SearchResult:
    """
    Pick the candidate whose leaf scores best for the side to move.

    Ties go to the earliest candidate, so results follow stone order.

    Args:
        candidates: (path, leaf) per child, in stone order
        maximizing: Prefer the highest score if True, the lowest otherwise
        heuristic: Leaf scoring function

    Returns:
        The selected candidate
    """
    if maximizing:
        return max(candidates, key=lambda candidate: heuristic(candidate[1]))
    return min(candidates, key=lambda candidate: heuristic(candidate[1]))


def minimax(
    state: GameState, depth: int, maximizing: bool, heuristic: Heuristic
) -> SearchResult:
    """
    Search `depth` plies ahead of `state`.

    Args:
        state: Position to search from
        depth: Remaining plies
        maximizing: True if the side to move maximizes the heuristic
        heuristic: Leaf scoring function

    Returns:
        (path, leaf) along the principal variation
    """
    if depth == 0 or is_completed(state):
        return [], state

    candidates = []
    for _, child in generate_successors(state):
        path, leaf = minimax(child, depth - 1, not maximizing, heuristic)
        path.append(child)
        candidates.append((path, leaf))

    if not candidates:
        # Side to move is stuck: treat as a leaf
        return [], state

    return select_best(candidates, maximizing, heuristic)


def principal_variation(path: List[GameState]) -> List[GameState]:
    """Replay order of a search path, first move first."""
    return list(reversed(path))


class MinimaxSearch:
    """
    Single-process minimax search.

    Keeps a node count for the last search, which the parallel search cannot
    provide without sharing state between workers.
    """

    def __init__(self, heuristic: Heuristic):
        """
        Initialize minimax search.

        Args:
            heuristic: Leaf scoring function
        """
        self.heuristic = heuristic
        self.nodes_searched = 0

    def search(self, state: GameState, depth: int, maximizing: bool) -> SearchResult:
        """
        Run minimax from `state`.

        Args:
            state: Position to search from
            depth: Plies to look ahead
            maximizing: True if the side to move maximizes the heuristic

        Returns:
            (path, leaf) along the principal variation
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")

        self.nodes_searched = 0
        start_time = time.time()

        result = self._search(state, depth, maximizing)

        elapsed = time.time() - start_time
        logger.info(
            f"Depth {depth} search: {self.nodes_searched:,} nodes in {elapsed:.2f}s, "
            f"leaf score {self.heuristic(result[1])}"
        )
        return result

    def best_move(
        self, state: GameState, depth: int, maximizing: bool
    ) -> Optional[GameState]:
        """State after the best first move, or None if there is none."""
        path, _ = self.search(state, depth, maximizing)
        return path[-1] if path else None

    def _search(self, state: GameState, depth: int, maximizing: bool) -> SearchResult:
        self.nodes_searched += 1

        if depth == 0 or is_completed(state):
            return [], state

        candidates = []
        for stone, child in generate_successors(state):
            path, leaf = self._search(child, depth - 1, not maximizing)
            path.append(child)
            candidates.append((path, leaf))
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"ply {state.depth}: stone {stone} -> leaf score {self.heuristic(leaf)}"
                )

        if not candidates:
            return [], state

        return select_best(candidates, maximizing, self.heuristic)
