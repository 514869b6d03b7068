"""
Rich-based console output for games and searches.

Provides clean, formatted output with:
- Board diagrams
- Principal variations
- Self-play summary tables
"""

import logging
from typing import List

from rich.console import Console
from rich.table import Table

from ..core import SIDE_NAMES, GameState, get_game_result, render_board

console = Console()
logger = logging.getLogger(__name__)


class GameDisplay:
    """
    Rich-based display for boards and search results.

    Board diagrams are printed without markup so the glyphs come out as is.
    """

    def __init__(self, target: Console = None):
        """
        Initialize game display.

        Args:
            target: Console to print to (default: shared module console)
        """
        self.console = target or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_header(self, title: str, workers: int):
        """Show run header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(f"Workers: {workers}")
        self.console.print()

    def show_board(self, state: GameState, title: str = "", indent: int = 0):
        """Print a board diagram with the side to move and capture tally."""
        if title:
            self.console.print(f"[bold]{title}[/bold]")
        self.console.print(render_board(state, indent=indent), markup=False, highlight=False)
        self.console.print(
            f"[dim]{SIDE_NAMES[state.turn]} to move | ply {state.depth} | "
            f"captures {state.points[0]}-{state.points[1]}[/dim]"
        )

    def show_principal_variation(self, line: List[GameState]):
        """Print each position of a forward principal variation, indented by ply."""
        for ply, state in enumerate(line, start=1):
            self.console.print()
            self.show_board(state, title=f"Ply {ply}", indent=ply - 1)

    def show_game_over(self, state: GameState):
        result = get_game_result(state) or "Stopped before the end"
        self.log_success(f"{result} after {state.depth} plies")

    def show_summary(self, games: int, yellow_wins: int, avg_win_factor: float, avg_plies: float):
        """Show self-play totals as a table."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Games", f"{games:,}")
        table.add_row("Yellow wins", f"{yellow_wins:,}")
        table.add_row("Avg win factor (yellow)", f"{avg_win_factor:+.2f}")
        table.add_row("Avg plies", f"{avg_plies:.1f}")

        self.console.print(table)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
