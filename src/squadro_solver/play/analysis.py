"""
Position analysis driver.

Loads a board diagram, searches it and reports the principal variation.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..core import YELLOW, GameState, parse_board
from ..solver import principal_variation
from .self_play import Search

logger = logging.getLogger(__name__)


@dataclass
class Analysis:
    """Search result for one position."""

    state: GameState
    depth: int
    line: List[GameState]  # Principal variation, first move first
    leaf: GameState
    score: int

    @property
    def best_move(self) -> Optional[GameState]:
        return self.line[0] if self.line else None


def load_board(path: Union[str, Path], turn: int = YELLOW) -> GameState:
    """
    Read a board diagram file.

    Args:
        path: File holding a diagram in the render_board format
        turn: Side to move in the loaded position

    Returns:
        Parsed GameState
    """
    path = Path(path)
    logger.info(f"Loading board from {path}")
    return parse_board(path.read_text(), turn=turn)


def analyze_position(
    state: GameState,
    depth: int,
    search: Search,
    maximizing: Optional[bool] = None,
) -> Analysis:
    """
    Search a position and collect the principal variation.

    Args:
        state: Position to analyze
        depth: Plies to look ahead
        search: Search engine to use
        maximizing: Whether the side to move maximizes (default: yellow does)

    Returns:
        Analysis with the forward principal variation and its leaf score
    """
    if maximizing is None:
        maximizing = state.turn == YELLOW

    path, leaf = search.search(state, depth, maximizing)
    line = principal_variation(path)

    return Analysis(
        state=state,
        depth=depth,
        line=line,
        leaf=leaf,
        score=search.heuristic(leaf),
    )
