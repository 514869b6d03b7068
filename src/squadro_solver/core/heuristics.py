"""
Evaluation functions for minimax leaves.

Every heuristic maps a GameState to an int where higher is better for
yellow. They are plain module-level functions so they can be shipped to
worker processes.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from .game_state import GameState
from .geometry import LANE_END, OUTBOUND, RED, RETURN, SIDES, STONES, YELLOW, step_size
from .rules import win_factor

Heuristic = Callable[[GameState], int]


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def progress_heuristic(state: GameState) -> int:
    """
    Distance travelled by yellow minus distance travelled by red.

    An outbound stone has travelled its slot, a returning one the full
    outbound leg plus what it has covered on the way back.
    """
    travelled = [0, 0]
    for side in SIDES:
        for stone in STONES:
            slot = state.slot(side, stone)
            if state.direction(side, stone) == RETURN:
                travelled[side] += 2 * LANE_END - slot
            else:
                travelled[side] += slot

    return travelled[YELLOW] - travelled[RED]


def steps_remaining_heuristic(state: GameState) -> int:
    """
    Moves red still needs minus moves yellow still needs.

    Outbound stones are charged for the rest of the outbound leg plus a whole
    return leg, both counted with the outbound step size.
    """
    remaining = [0, 0]
    for side in SIDES:
        for stone in STONES:
            slot = state.slot(side, stone)
            if state.direction(side, stone) == RETURN:
                step = step_size(side, RETURN, stone)
                remaining[side] += _ceil_div(slot, step)
            else:
                step = step_size(side, OUTBOUND, stone)
                remaining[side] += _ceil_div(LANE_END - slot, step) + _ceil_div(LANE_END, step)

    return remaining[RED] - remaining[YELLOW]


def capture_heuristic(state: GameState) -> int:
    """Yellow's capture count. Plays the bully and ignores the race."""
    return state.points[YELLOW]


def null_heuristic(state: GameState) -> int:
    return 0


def finished_stones_heuristic(state: GameState) -> int:
    """Yellow's finished stones minus red's."""
    return win_factor(state)


@dataclass(frozen=True)
class TurnHeuristic:
    """
    Pair two heuristics by the side to move at the scored leaf.

    Lets each side steer the search with its own preference while the search
    itself stays unaware of the pairing.
    """

    yellow: Heuristic
    red: Heuristic

    def __call__(self, state: GameState) -> int:
        if state.turn == YELLOW:
            return self.yellow(state)
        return self.red(state)


HEURISTICS: Dict[str, Heuristic] = {
    "progress": progress_heuristic,
    "steps": steps_remaining_heuristic,
    "bully": capture_heuristic,
    "null": null_heuristic,
    "finished": finished_stones_heuristic,
}


def get_heuristic(name: str) -> Heuristic:
    """
    Look up a heuristic by its registry name.

    Args:
        name: One of HEURISTICS

    Returns:
        The heuristic function
    """
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}, choose from {', '.join(sorted(HEURISTICS))}"
        ) from None
