"""
Parallel minimax search.

Expands the top plies of the tree in the calling process, then searches
every subtree below that frontier in a separate worker process. Results are
reduced bottom-up with the same selection rule as the sequential search, so
both return the same principal variation.
"""

import logging
import time
from concurrent.futures import Future, ProcessPoolExecutor
from dataclasses import dataclass, field
from multiprocessing import cpu_count
from typing import List, Optional, Tuple, Union

from ..core import GameState, Heuristic, generate_successors, is_completed
from .minimax import SearchResult, minimax, select_best

logger = logging.getLogger(__name__)

DEFAULT_SPLIT_DEPTH = 2


def _worker_search(
    state: GameState, depth: int, maximizing: bool, heuristic: Heuristic
) -> SearchResult:
    """Worker: search one frontier subtree sequentially."""
    return minimax(state, depth, maximizing, heuristic)


@dataclass
class _Branch:
    """Node expanded in the calling process, awaiting its children."""

    state: GameState
    maximizing: bool
    children: List[Tuple[GameState, "_Node"]] = field(default_factory=list)


_Node = Union[_Branch, "Future[SearchResult]", SearchResult]


class ParallelMinimaxSearch:
    """
    Process-parallel minimax search.

    Subtrees are independent, so they are mapped over a process pool and only
    the final max/min reduction runs in the calling process. The heuristic is
    sent to the workers and must be picklable (a module-level function or a
    TurnHeuristic).
    """

    def __init__(
        self,
        heuristic: Heuristic,
        num_workers: int = None,
        split_depth: int = DEFAULT_SPLIT_DEPTH,
    ):
        """
        Initialize parallel minimax search.

        Args:
            heuristic: Leaf scoring function
            num_workers: Number of worker processes (default: CPU count)
            split_depth: Plies expanded locally before handing subtrees to workers
        """
        if num_workers is not None and num_workers < 1:
            raise ValueError(f"Need at least one worker, got {num_workers}")
        if split_depth < 1:
            raise ValueError(f"Split depth must be at least 1, got {split_depth}")

        self.heuristic = heuristic
        self.num_workers = num_workers or cpu_count()
        self.split_depth = split_depth
        self._pool: Optional[ProcessPoolExecutor] = None

        logger.info(
            f"Using {self.num_workers} worker processes, splitting at ply {self.split_depth}"
        )

    def __enter__(self) -> "ParallelMinimaxSearch":
        self._pool = ProcessPoolExecutor(max_workers=self.num_workers)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the worker pool kept open by the context manager."""
        if self._pool is not None:
            self._pool.shutdown()
            self._pool = None

    def search(self, state: GameState, depth: int, maximizing: bool) -> SearchResult:
        """
        Run minimax from `state` across the worker pool.

        Args:
            state: Position to search from
            depth: Plies to look ahead
            maximizing: True if the side to move maximizes the heuristic

        Returns:
            (path, leaf) along the principal variation
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")

        start_time = time.time()

        if self._pool is not None:
            result, subtrees = self._run(self._pool, state, depth, maximizing)
        else:
            with ProcessPoolExecutor(max_workers=self.num_workers) as pool:
                result, subtrees = self._run(pool, state, depth, maximizing)

        elapsed = time.time() - start_time
        logger.info(
            f"Depth {depth} search: {subtrees} subtrees on {self.num_workers} workers "
            f"in {elapsed:.2f}s, leaf score {self.heuristic(result[1])}"
        )
        return result

    def best_move(
        self, state: GameState, depth: int, maximizing: bool
    ) -> Optional[GameState]:
        """State after the best first move, or None if there is none."""
        path, _ = self.search(state, depth, maximizing)
        return path[-1] if path else None

    def _run(
        self, pool: ProcessPoolExecutor, state: GameState, depth: int, maximizing: bool
    ) -> Tuple[SearchResult, int]:
        futures: List[Future] = []
        root = self._expand(pool, futures, state, depth, maximizing, self.split_depth)
        return self._reduce(root), len(futures)

    def _expand(
        self,
        pool: ProcessPoolExecutor,
        futures: List[Future],
        state: GameState,
        depth: int,
        maximizing: bool,
        split: int,
    ) -> _Node:
        """Expand locally down to the frontier, submitting the subtrees below it."""
        if depth == 0 or is_completed(state):
            return [], state

        if split == 0:
            future = pool.submit(_worker_search, state, depth, maximizing, self.heuristic)
            futures.append(future)
            return future

        branch = _Branch(state=state, maximizing=maximizing)
        for _, child in generate_successors(state):
            node = self._expand(pool, futures, child, depth - 1, not maximizing, split - 1)
            branch.children.append((child, node))
        return branch

    def _reduce(self, node: _Node) -> SearchResult:
        """Collect worker results and select bottom-up."""
        if isinstance(node, Future):
            return node.result()
        if not isinstance(node, _Branch):
            return node

        candidates = []
        for child, child_node in node.children:
            path, leaf = self._reduce(child_node)
            path.append(child)
            candidates.append((path, leaf))

        if not candidates:
            return [], node.state

        return select_best(candidates, node.maximizing, self.heuristic)
