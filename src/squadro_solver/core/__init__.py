"""Core game state representation and rules."""

from .geometry import (
    YELLOW,
    RED,
    SIDE_NAMES,
    OUTBOUND,
    RETURN,
    NUM_STONES,
    STONES,
    LANE_END,
    STEP,
    step_size,
)
from .game_state import GameState
from .rules import (
    create_starting_state,
    movable_stones,
    apply_move,
    generate_successors,
    is_completed,
    finished_count,
    is_win,
    win_factor,
    get_game_result,
)
from .board import MalformedBoardError, parse_board, render_board
from .heuristics import (
    Heuristic,
    HEURISTICS,
    TurnHeuristic,
    capture_heuristic,
    finished_stones_heuristic,
    get_heuristic,
    null_heuristic,
    progress_heuristic,
    steps_remaining_heuristic,
)

__all__ = [
    "YELLOW",
    "RED",
    "SIDE_NAMES",
    "OUTBOUND",
    "RETURN",
    "NUM_STONES",
    "STONES",
    "LANE_END",
    "STEP",
    "step_size",
    "GameState",
    "create_starting_state",
    "movable_stones",
    "apply_move",
    "generate_successors",
    "is_completed",
    "finished_count",
    "is_win",
    "win_factor",
    "get_game_result",
    "MalformedBoardError",
    "parse_board",
    "render_board",
    "Heuristic",
    "HEURISTICS",
    "TurnHeuristic",
    "capture_heuristic",
    "finished_stones_heuristic",
    "get_heuristic",
    "null_heuristic",
    "progress_heuristic",
    "steps_remaining_heuristic",
]
