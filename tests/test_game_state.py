"""Tests for game state representation."""

import pytest
from squadro_solver.core import (
    OUTBOUND,
    RED,
    RETURN,
    YELLOW,
    GameState,
    create_starting_state,
    step_size,
)


def test_create_game_state():
    """Test basic game state creation."""
    state = GameState(
        depth=3,
        turn=RED,
        points=(1, 0),
        slots=((0, 1, 2, 3, 4), (6, 5, 4, 3, 2)),
        directions=((OUTBOUND,) * 5, (RETURN,) * 5),
    )

    assert state.depth == 3
    assert state.turn == RED
    assert state.slot(YELLOW, 3) == 2
    assert state.slot(RED, 1) == 6
    assert state.direction(RED, 5) == RETURN
    assert state.direction(YELLOW, 5) == OUTBOUND


def test_starting_state():
    """Test the starting position."""
    state = create_starting_state()

    assert state.depth == 0
    assert state.turn == YELLOW
    assert state.points == (0, 0)
    for side in (YELLOW, RED):
        for stone in range(1, 6):
            assert state.slot(side, stone) == 0
            assert state.direction(side, stone) == OUTBOUND
            assert not state.is_finished(side, stone)


def test_finished_stones():
    """Only a returning stone back on slot 0 is finished."""
    state = GameState(
        depth=0,
        turn=YELLOW,
        points=(0, 0),
        slots=((0, 0, 3, 0, 0), (0,) * 5),
        directions=((RETURN, OUTBOUND, RETURN, RETURN, OUTBOUND), (OUTBOUND,) * 5),
    )

    assert state.finished_stones(YELLOW) == (1, 4)
    assert state.finished_stones(RED) == ()
    assert state.is_finished(YELLOW, 1)
    assert not state.is_finished(YELLOW, 2)
    assert not state.is_finished(YELLOW, 3)


def test_with_turn_copies():
    """with_turn returns a new state and leaves the original alone."""
    state = create_starting_state()
    flipped = state.with_turn(RED)

    assert flipped.turn == RED
    assert state.turn == YELLOW
    assert flipped.slots == state.slots


def test_states_are_hashable_values():
    """Equal positions compare and hash equal."""
    a = create_starting_state()
    b = create_starting_state()

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_step_sizes():
    """Step sizes follow the board edges."""
    assert [step_size(YELLOW, OUTBOUND, s) for s in range(1, 6)] == [3, 1, 2, 1, 3]
    assert [step_size(YELLOW, RETURN, s) for s in range(1, 6)] == [1, 3, 2, 3, 1]
    assert [step_size(RED, OUTBOUND, s) for s in range(1, 6)] == [1, 3, 2, 3, 1]
    assert [step_size(RED, RETURN, s) for s in range(1, 6)] == [3, 1, 2, 1, 3]


def test_str_shows_turn():
    """String form includes the board and the side to move."""
    text = str(create_starting_state())

    assert "Yellow's turn" in text
    assert "v v v v v" in text


def test_state_validation():
    """Test state validation catches errors."""
    home = (0,) * 5
    outbound = (OUTBOUND,) * 5

    # Invalid turn
    with pytest.raises(ValueError):
        GameState(depth=0, turn=2, points=(0, 0), slots=(home, home), directions=(outbound, outbound))

    # Slot out of range
    with pytest.raises(ValueError):
        GameState(
            depth=0, turn=0, points=(0, 0),
            slots=((0, 7, 0, 0, 0), home), directions=(outbound, outbound),
        )

    # Wrong number of stones
    with pytest.raises(ValueError):
        GameState(
            depth=0, turn=0, points=(0, 0),
            slots=((0, 0, 0, 0), home), directions=(outbound, outbound),
        )

    # Outbound stone resting on the far edge
    with pytest.raises(ValueError):
        GameState(
            depth=0, turn=0, points=(0, 0),
            slots=((6, 0, 0, 0, 0), home), directions=(outbound, outbound),
        )

    # Negative points
    with pytest.raises(ValueError):
        GameState(depth=0, turn=0, points=(-1, 0), slots=(home, home), directions=(outbound, outbound))

    # Invalid direction
    with pytest.raises(ValueError):
        GameState(
            depth=0, turn=0, points=(0, 0),
            slots=(home, home), directions=((2, 0, 0, 0, 0), outbound),
        )
