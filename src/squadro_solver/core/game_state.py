"""
Game state representation.

A Squadro position consists of:
- Slot and direction of each of the five stones per side
- Side to move
- Ply count and capture tally

Board layout (yellow lanes run left to right, red lanes top to bottom):

    / - 1 3 2 3 1 - \\
    |   . . . . .   |
    3 .           . 1
    1 .           . 3
    2 .           . 2
    1 .           . 3
    3 .           . 1
    |   . . . . .   |
    \\ - 3 1 2 1 3 - /

Yellow stone i moves along row i, red stone j along column j. Yellow stone
i on slot j and red stone j on slot i occupy the same cell.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from .geometry import LANE_END, NUM_STONES, OUTBOUND, RETURN, SIDES, SIDE_NAMES, STONES


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state representation.

    `slots` and `directions` hold one tuple per side, indexed by stone - 1.
    """

    depth: int  # Plies played since the starting position
    turn: int  # Side to move (0 = yellow, 1 = red)
    points: Tuple[int, int]  # Captures made by each side
    slots: Tuple[Tuple[int, ...], Tuple[int, ...]]
    directions: Tuple[Tuple[int, ...], Tuple[int, ...]]

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if self.turn not in SIDES:
            raise ValueError(f"Invalid turn {self.turn}, must be 0 or 1")
        if self.depth < 0:
            raise ValueError(f"Negative depth {self.depth} not allowed")
        if len(self.points) != 2 or any(p < 0 for p in self.points):
            raise ValueError(f"Invalid points {self.points}")
        if len(self.slots) != 2 or len(self.directions) != 2:
            raise ValueError("Slots and directions need one entry per side")

        for side in SIDES:
            if len(self.slots[side]) != NUM_STONES or len(self.directions[side]) != NUM_STONES:
                raise ValueError(
                    f"{SIDE_NAMES[side]} must have exactly {NUM_STONES} stones"
                )
            for stone, (slot, direction) in enumerate(
                zip(self.slots[side], self.directions[side]), start=1
            ):
                if not 0 <= slot <= LANE_END:
                    raise ValueError(
                        f"{SIDE_NAMES[side]} stone {stone} on slot {slot}, "
                        f"must be within 0..{LANE_END}"
                    )
                if direction not in (OUTBOUND, RETURN):
                    raise ValueError(
                        f"{SIDE_NAMES[side]} stone {stone} has invalid direction {direction}"
                    )
                if direction == OUTBOUND and slot == LANE_END:
                    raise ValueError(
                        f"{SIDE_NAMES[side]} stone {stone} is outbound on the far edge"
                    )

    def slot(self, side: int, stone: int) -> int:
        """Current slot of a stone along its lane."""
        return self.slots[side][stone - 1]

    def direction(self, side: int, stone: int) -> int:
        """Leg of the lane a stone is travelling (OUTBOUND or RETURN)."""
        return self.directions[side][stone - 1]

    def is_finished(self, side: int, stone: int) -> bool:
        """A stone is finished once it is back home on its return leg."""
        return self.direction(side, stone) == RETURN and self.slot(side, stone) == 0

    def finished_stones(self, side: int) -> Tuple[int, ...]:
        return tuple(stone for stone in STONES if self.is_finished(side, stone))

    def with_turn(self, turn: int) -> "GameState":
        """Copy of this state with a different side to move."""
        return replace(self, turn=turn)

    def __str__(self) -> str:
        """Human-readable board representation."""
        from .board import render_board

        return (
            f"{render_board(self)}\n\n"
            f"{SIDE_NAMES[self.turn]}'s turn (ply {self.depth}, "
            f"captures {self.points[0]}-{self.points[1]})\n"
        )
