"""
Self-play driver.

Lets the search play both sides from the starting position, one move at a
time, and tallies results over many games.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Union

from tqdm import tqdm

from ..core import (
    YELLOW,
    SIDE_NAMES,
    GameState,
    create_starting_state,
    generate_successors,
    is_completed,
    is_win,
    win_factor,
)
from ..solver import MinimaxSearch, ParallelMinimaxSearch

logger = logging.getLogger(__name__)

DEFAULT_LOOKAHEAD = 8

Search = Union[MinimaxSearch, ParallelMinimaxSearch]


@dataclass
class GameRecord:
    """Outcome of one self-play game."""

    final_state: GameState
    moves: List[GameState]  # Every position after the start, in play order
    win_factor: int
    completed: bool  # False if stopped by the ply cap

    @property
    def plies(self) -> int:
        return len(self.moves)

    @property
    def yellow_won(self) -> bool:
        return is_win(self.final_state)


@dataclass
class SelfPlayStats:
    """Running totals over self-play games."""

    games: int = 0
    yellow_wins: int = 0
    total_win_factor: int = 0
    total_plies: int = 0
    records: List[GameRecord] = field(default_factory=list)

    def add(self, record: GameRecord) -> None:
        self.games += 1
        self.total_win_factor += record.win_factor
        self.total_plies += record.plies
        if record.yellow_won:
            self.yellow_wins += 1
        self.records.append(record)

    @property
    def avg_win_factor(self) -> float:
        return self.total_win_factor / self.games if self.games else 0.0

    @property
    def avg_plies(self) -> float:
        return self.total_plies / self.games if self.games else 0.0


def play_one_game(
    search: Search,
    lookahead: Sequence[int] = (DEFAULT_LOOKAHEAD, DEFAULT_LOOKAHEAD),
    max_plies: Optional[int] = None,
    random_openings: int = 0,
    rng: Optional[random.Random] = None,
    start: Optional[GameState] = None,
    on_move: Optional[Callable[[GameState], None]] = None,
) -> GameRecord:
    """
    Play one game with the search choosing every move.

    Yellow maximizes the search heuristic, red minimizes it. The game ends
    once the side to move has every stone home.

    Args:
        search: Search engine used by both sides
        lookahead: Plies searched per move, indexed by side
        max_plies: Stop after this many plies (default: play to the end)
        random_openings: Number of opening plies played at random
        rng: Random source for the opening plies
        start: Position to play from (default: the starting position)
        on_move: Called with each new position

    Returns:
        GameRecord for the finished (or capped) game
    """
    if min(lookahead) < 1:
        raise ValueError(f"Lookahead must be at least 1 ply per side, got {tuple(lookahead)}")

    rng = rng or random.Random()
    state = start if start is not None else create_starting_state()
    moves: List[GameState] = []

    while not is_completed(state):
        if max_plies is not None and len(moves) >= max_plies:
            logger.info(f"Stopping game at ply cap {max_plies}")
            break

        if len(moves) < random_openings:
            _, next_state = rng.choice(generate_successors(state))
        else:
            logger.debug(
                f"Computing move {state.depth + 1} for {SIDE_NAMES[state.turn]} "
                f"(looking {lookahead[state.turn]} plies ahead)"
            )
            path, _ = search.search(state, lookahead[state.turn], state.turn == YELLOW)
            next_state = path[-1]

        state = next_state
        moves.append(state)
        if on_move is not None:
            on_move(state)

    return GameRecord(
        final_state=state,
        moves=moves,
        win_factor=win_factor(state),
        completed=is_completed(state),
    )


def play_against_itself(
    search: Search,
    num_games: int,
    lookahead: Sequence[int] = (DEFAULT_LOOKAHEAD, DEFAULT_LOOKAHEAD),
    max_plies: Optional[int] = None,
    random_openings: int = 0,
    seed: Optional[int] = None,
    show_progress: bool = True,
) -> SelfPlayStats:
    """
    Play a series of self-play games.

    With a deterministic search every game is the same unless some opening
    plies are randomized.

    Args:
        search: Search engine used by both sides
        num_games: Number of games to play
        lookahead: Plies searched per move, indexed by side
        max_plies: Ply cap per game
        random_openings: Random opening plies per game
        seed: Seed for the opening randomization
        show_progress: Show a progress bar

    Returns:
        Totals over all games
    """
    rng = random.Random(seed)
    stats = SelfPlayStats()

    with tqdm(total=num_games, desc="Self-play", unit=" game", disable=not show_progress) as pbar:
        for game in range(1, num_games + 1):
            record = play_one_game(
                search,
                lookahead=lookahead,
                max_plies=max_plies,
                random_openings=random_openings,
                rng=rng,
            )
            stats.add(record)

            logger.info(
                f"Game {game}: win factor {record.win_factor:+d} after {record.plies} plies "
                f"(yellow wins so far: {stats.yellow_wins}/{stats.games})"
            )
            pbar.set_postfix(yellow_wins=stats.yellow_wins, avg=f"{stats.avg_win_factor:+.2f}")
            pbar.update(1)

    return stats
