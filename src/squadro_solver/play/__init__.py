"""Drivers that play games and analyze positions with the search."""

from .analysis import Analysis, analyze_position, load_board
from .self_play import (
    DEFAULT_LOOKAHEAD,
    GameRecord,
    SelfPlayStats,
    play_against_itself,
    play_one_game,
)

__all__ = [
    "Analysis",
    "analyze_position",
    "load_board",
    "DEFAULT_LOOKAHEAD",
    "GameRecord",
    "SelfPlayStats",
    "play_against_itself",
    "play_one_game",
]
