#!/usr/bin/env python3
"""
Validate parallel search against sequential search.

This tests the full search pipeline:
1. Sequential minimax from the starting position
2. Parallel minimax (same depth, several workers)
3. Verify both return the same principal variation
"""

import sys
import time
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from squadro_solver.core import create_starting_state, steps_remaining_heuristic
from squadro_solver.solver import MinimaxSearch, ParallelMinimaxSearch, principal_variation

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,  # Force reconfiguration
)

logger = logging.getLogger(__name__)


def main():
    # Configuration
    DEPTH = 7
    NUM_WORKERS = 8
    SPLIT_DEPTH = 2

    logger.info("=" * 70)
    logger.info(f"SEARCH VALIDATION - depth {DEPTH}")
    logger.info("=" * 70)
    logger.info(f"Workers: {NUM_WORKERS}")
    logger.info(f"Split depth: {SPLIT_DEPTH}")
    logger.info("")

    state = create_starting_state()

    # Phase 1: Sequential
    logger.info("=" * 70)
    logger.info("PHASE 1: Sequential minimax")
    logger.info("=" * 70)

    sequential_start = time.time()
    sequential = MinimaxSearch(steps_remaining_heuristic)
    expected_path, expected_leaf = sequential.search(state, DEPTH, True)
    sequential_time = time.time() - sequential_start

    logger.info(f"Nodes: {sequential.nodes_searched:,}")
    logger.info(f"Time: {sequential_time:.1f}s")
    logger.info("")

    # Phase 2: Parallel
    logger.info("=" * 70)
    logger.info("PHASE 2: Parallel minimax")
    logger.info("=" * 70)

    parallel_start = time.time()
    parallel = ParallelMinimaxSearch(
        steps_remaining_heuristic, num_workers=NUM_WORKERS, split_depth=SPLIT_DEPTH
    )
    path, leaf = parallel.search(state, DEPTH, True)
    parallel_time = time.time() - parallel_start

    logger.info(f"Time: {parallel_time:.1f}s")
    logger.info(f"Speedup: {sequential_time / parallel_time:.2f}x")
    logger.info("")

    # Results
    logger.info("=" * 70)
    logger.info("VALIDATION RESULTS")
    logger.info("=" * 70)

    success = True

    if path == expected_path and leaf == expected_leaf:
        logger.info("Principal variations match")
    else:
        logger.error("Principal variation mismatch!")
        logger.error(f"   Sequential: {[s.slots for s in principal_variation(expected_path)]}")
        logger.error(f"   Parallel:   {[s.slots for s in principal_variation(path)]}")
        success = False

    score = steps_remaining_heuristic(leaf)
    expected_score = steps_remaining_heuristic(expected_leaf)
    if score == expected_score:
        logger.info(f"Leaf scores match: {score}")
    else:
        logger.error(f"Leaf score mismatch! Expected {expected_score}, got {score}")
        success = False

    logger.info("")

    if success:
        logger.info("VALIDATION PASSED")
        return 0
    else:
        logger.error("VALIDATION FAILED")
        return 1


if __name__ == "__main__":
    sys.exit(main())
