"""Utility modules for the Squadro solver."""

from .rich_display import GameDisplay, console, setup_rich_logging

__all__ = [
    "GameDisplay",
    "console",
    "setup_rich_logging",
]
