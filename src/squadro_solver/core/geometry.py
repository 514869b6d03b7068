"""
Lane geometry for the cross-shaped board.

Each stone travels its own lane of slots 0..6: out to the far edge, then
back. How far it moves per turn depends on the side, the leg it is on and
which stone it is. The step sizes are printed on the board edges:

         1 3 2 3 1          <- red outbound
      3 .         . 1
      1 .         . 3
      2 .  board  . 2       yellow outbound (left), return (right)
      1 .         . 3
      3 .         . 1
         3 1 2 1 3          <- red return
"""

from typing import Tuple

YELLOW = 0
RED = 1
SIDES = (YELLOW, RED)
SIDE_NAMES = ("Yellow", "Red")

OUTBOUND = 0
RETURN = 1

NUM_STONES = 5
STONES = range(1, NUM_STONES + 1)
LANE_END = 6

# side -> direction -> stone - 1
STEP: Tuple[Tuple[Tuple[int, ...], ...], ...] = (
    ((3, 1, 2, 1, 3), (1, 3, 2, 3, 1)),
    ((1, 3, 2, 3, 1), (3, 1, 2, 1, 3)),
)


def step_size(side: int, direction: int, stone: int) -> int:
    """Number of slots `stone` advances on its current leg."""
    return STEP[side][direction][stone - 1]


def opponent(side: int) -> int:
    return 1 - side
