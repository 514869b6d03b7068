"""
Squadro game rules implementation.

Implements the lane race rules:
- Each side moves one unfinished stone per turn, by its lane step size
- A stone may not overshoot either edge of its lane
- Crossing an opponent stone sends it back to the start of its leg
- A stone reaching the far edge turns around for its return leg
- A side is done once all its stones are back home on the return leg
"""

from typing import List, Optional, Tuple

from .game_state import GameState
from .geometry import (
    LANE_END,
    NUM_STONES,
    OUTBOUND,
    RETURN,
    RED,
    SIDE_NAMES,
    STONES,
    YELLOW,
    opponent,
    step_size,
)


def create_starting_state(turn: int = YELLOW) -> GameState:
    """
    Create the initial game state.

    Args:
        turn: Side to move first

    Returns:
        Starting GameState with every stone home on its outbound leg
    """
    home = (0,) * NUM_STONES
    outbound = (OUTBOUND,) * NUM_STONES

    return GameState(
        depth=0,
        turn=turn,
        points=(0, 0),
        slots=(home, home),
        directions=(outbound, outbound),
    )


def movable_stones(state: GameState) -> List[int]:
    """
    Stones the side to move may play.

    A stone is movable as long as it is not finished.

    Args:
        state: Current game state

    Returns:
        Stone numbers (1..5) in ascending order
    """
    return [stone for stone in STONES if not state.is_finished(state.turn, stone)]


def apply_move(state: GameState, stone: int) -> GameState:
    """
    Move a stone and return the resulting state.

    The stone walks slot by slot towards its target. Every slot it enters is
    checked for the crossing opponent stone: the opponent stone whose number is
    that slot, sitting on the slot whose number is the mover's. A crossed stone
    goes back to the start of its current leg and the mover scores a capture.
    After a capture the mover keeps walking only while it keeps crossing
    stones, so it stops on the first free slot past the last capture, whether
    or not that is its normal target.

    Args:
        state: Current game state
        stone: Stone number (1..5) of the side to move

    Returns:
        New GameState after the move
    """
    if stone not in movable_stones(state):
        raise ValueError(f"Illegal move {stone} for {SIDE_NAMES[state.turn]}")

    side = state.turn
    other = opponent(side)

    slots = [list(lane) for lane in state.slots]
    directions = [list(lane) for lane in state.directions]
    points = list(state.points)

    current = state.slot(side, stone)
    direction = state.direction(side, stone)
    step = step_size(side, direction, stone)

    if direction == OUTBOUND:
        target = min(current + step, LANE_END)
        delta = 1
    else:
        target = max(current - step, 0)
        delta = -1

    pos = current + delta
    captures = 0
    while True:
        # Edge slots are outside the crossing area
        if 0 < pos < LANE_END and state.slot(other, pos) == stone:
            captures += 1
            if state.direction(other, pos) == OUTBOUND:
                slots[other][pos - 1] = 0
            else:
                slots[other][pos - 1] = LANE_END

        if not captures and pos == target:
            break
        if pos == 0 or pos == LANE_END:
            break
        if captures and state.slot(other, pos) != stone:
            break

        pos += delta

    slots[side][stone - 1] = pos
    if direction == OUTBOUND and pos == LANE_END:
        directions[side][stone - 1] = RETURN

    points[side] += captures

    return GameState(
        depth=state.depth + 1,
        turn=other,
        points=(points[0], points[1]),
        slots=(tuple(slots[0]), tuple(slots[1])),
        directions=(tuple(directions[0]), tuple(directions[1])),
    )


def generate_successors(state: GameState) -> List[Tuple[int, GameState]]:
    """
    Generate every state reachable in one move.

    Moving different stones always changes a different slot, so the
    successors are pairwise distinct.

    Args:
        state: Current game state

    Returns:
        (stone, next_state) pairs ordered by stone number; empty when every
        stone of the side to move is finished
    """
    return [(stone, apply_move(state, stone)) for stone in movable_stones(state)]


def is_completed(state: GameState) -> bool:
    """
    Check if the side to move has brought every stone home.

    Only the side to move is inspected: the opponent may still have stones on
    the board. Search uses this as its cutoff.

    Args:
        state: Game state to check

    Returns:
        True if the side to move has no stone left to play
    """
    return all(state.is_finished(state.turn, stone) for stone in STONES)


def finished_count(state: GameState, side: int) -> int:
    """Number of stones `side` has brought home."""
    return len(state.finished_stones(side))


def is_win(state: GameState) -> bool:
    """Check if yellow has brought every stone home."""
    return finished_count(state, YELLOW) == NUM_STONES


def win_factor(state: GameState) -> int:
    """
    Margin of finished stones from yellow's perspective.

    Returns:
        Yellow's finished stones minus red's finished stones
    """
    return finished_count(state, YELLOW) - finished_count(state, RED)


def get_game_result(state: GameState) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        state: Game state

    Returns:
        Result string or None if the side to move can still play
    """
    if not is_completed(state):
        return None

    margin = win_factor(state)

    if margin > 0:
        return f"Yellow wins by {margin}"
    elif margin < 0:
        return f"Red wins by {-margin}"
    else:
        return "Tie game"
