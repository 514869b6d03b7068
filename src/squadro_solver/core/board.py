"""
Text board diagrams.

A board is a 9x9 grid of single characters separated by spaces. Yellow stones
are drawn as `>` (outbound) or `<` (returning) along rows 2..6, red stones as
`v` or `^` along columns 2..6. The edges carry the step sizes:

    / - 1 3 2 3 1 - \\
    |   v v v v v   |
    3 >           . 1
    1 >           . 3
    2 >           . 2
    1 >           . 3
    3 >           . 1
    |   . . . . .   |
    \\ - 3 1 2 1 3 - /

Turn, ply count and captures are not part of the diagram.
"""

from typing import List, Tuple

from .game_state import GameState
from .geometry import (
    LANE_END,
    NUM_STONES,
    OUTBOUND,
    RED,
    RETURN,
    SIDE_NAMES,
    STEP,
    STONES,
    YELLOW,
)

GRID_SIZE = LANE_END + 3

GLYPHS = {
    YELLOW: {OUTBOUND: ">", RETURN: "<"},
    RED: {OUTBOUND: "v", RETURN: "^"},
}


class MalformedBoardError(ValueError):
    """Raised when a board diagram does not describe a valid position."""


def _empty_grid() -> List[List[str]]:
    edge = ["-"] * (GRID_SIZE - 2)
    grid = [["/"] + edge + ["\\"]]
    grid.append(["|", " "] + ["."] * NUM_STONES + [" ", "|"])
    for _ in STONES:
        grid.append(["|", "."] + [" "] * NUM_STONES + [".", "|"])
    grid.append(["|", " "] + ["."] * NUM_STONES + [" ", "|"])
    grid.append(["\\"] + edge + ["/"])
    return grid


def render_board(state: GameState, indent: int = 0) -> str:
    """
    Draw a state as a board diagram.

    Args:
        state: Game state to draw
        indent: Indentation level, three spaces per level

    Returns:
        The diagram, one line per grid row
    """
    grid = _empty_grid()

    for stone in STONES:
        grid[stone + 1][0] = str(STEP[YELLOW][OUTBOUND][stone - 1])
        grid[stone + 1][-1] = str(STEP[YELLOW][RETURN][stone - 1])
        grid[0][stone + 1] = str(STEP[RED][OUTBOUND][stone - 1])
        grid[-1][stone + 1] = str(STEP[RED][RETURN][stone - 1])

        slot = state.slot(YELLOW, stone)
        grid[stone + 1][slot + 1] = GLYPHS[YELLOW][state.direction(YELLOW, stone)]

        slot = state.slot(RED, stone)
        grid[slot + 1][stone + 1] = GLYPHS[RED][state.direction(RED, stone)]

    prefix = "   " * indent
    return "\n".join(prefix + " ".join(row) for row in grid)


def _read_lane(cells: List[str], side: int, stone: int) -> Tuple[int, int]:
    """Find the single stone glyph in a lane and return (slot, direction)."""
    found = [
        (slot, direction)
        for slot, cell in enumerate(cells)
        for direction, glyph in GLYPHS[side].items()
        if cell == glyph
    ]

    if len(found) != 1:
        raise MalformedBoardError(
            f"{SIDE_NAMES[side]} lane {stone} must hold exactly one stone, found {len(found)}"
        )

    slot, direction = found[0]
    if direction == OUTBOUND and slot == LANE_END:
        raise MalformedBoardError(
            f"{SIDE_NAMES[side]} stone {stone} cannot be outbound on the far edge"
        )
    return slot, direction


def parse_board(text: str, turn: int = YELLOW) -> GameState:
    """
    Read a board diagram back into a state.

    Only the lane cells are read; edges and step digits are ignored.

    Args:
        text: Diagram as produced by render_board (leading indentation allowed)
        turn: Side to move in the parsed position

    Returns:
        GameState at ply 0 with no captures
    """
    lines = [line.strip() for line in text.strip("\n").splitlines() if line.strip()]
    if len(lines) < GRID_SIZE:
        raise MalformedBoardError(
            f"Board needs {GRID_SIZE} rows, got {len(lines)}"
        )

    grid = [list(line[::2]) for line in lines[:GRID_SIZE]]
    for y, row in enumerate(grid):
        if len(row) < GRID_SIZE:
            raise MalformedBoardError(
                f"Board row {y} needs {GRID_SIZE} cells, got {len(row)}"
            )

    slots = ([], [])
    directions = ([], [])
    for stone in STONES:
        lane = grid[stone + 1][1 : LANE_END + 2]
        slot, direction = _read_lane(lane, YELLOW, stone)
        slots[YELLOW].append(slot)
        directions[YELLOW].append(direction)

        lane = [grid[y][stone + 1] for y in range(1, LANE_END + 2)]
        slot, direction = _read_lane(lane, RED, stone)
        slots[RED].append(slot)
        directions[RED].append(direction)

    try:
        return GameState(
            depth=0,
            turn=turn,
            points=(0, 0),
            slots=(tuple(slots[YELLOW]), tuple(slots[RED])),
            directions=(tuple(directions[YELLOW]), tuple(directions[RED])),
        )
    except ValueError as e:
        raise MalformedBoardError(str(e)) from e
