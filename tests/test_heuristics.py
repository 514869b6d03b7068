"""Tests for evaluation functions."""

import pickle

import pytest
from squadro_solver.core import (
    HEURISTICS,
    OUTBOUND,
    RED,
    RETURN,
    YELLOW,
    GameState,
    TurnHeuristic,
    apply_move,
    capture_heuristic,
    create_starting_state,
    finished_stones_heuristic,
    get_heuristic,
    null_heuristic,
    parse_board,
    progress_heuristic,
    render_board,
    steps_remaining_heuristic,
)


def test_starting_position_is_balanced():
    """Both sides start level under every symmetric heuristic."""
    state = create_starting_state()

    assert progress_heuristic(state) == 0
    assert steps_remaining_heuristic(state) == 0
    assert capture_heuristic(state) == 0
    assert finished_stones_heuristic(state) == 0
    assert null_heuristic(state) == 0


def test_progress_counts_distance():
    """Outbound stones count their slot, returning ones 12 minus their slot."""
    state = GameState(
        depth=0,
        turn=YELLOW,
        points=(0, 0),
        slots=((2, 6, 0, 0, 0), (1, 0, 0, 0, 0)),
        directions=((OUTBOUND, RETURN, RETURN, OUTBOUND, OUTBOUND), (OUTBOUND,) * 5),
    )

    # Yellow: 2 + 6 + 12 + 0 + 0, red: 1
    assert progress_heuristic(state) == 20 - 1


def test_steps_remaining():
    """Remaining moves are counted with ceiling division."""
    # Yellow stone 1 (outbound step 3) moves to slot 3: 1 + 2 moves left
    # instead of 2 + 2
    state = apply_move(create_starting_state(), 1)
    assert steps_remaining_heuristic(state) == 1

    # Yellow stone 3 returning from slot 5 with step 2 needs 3 moves
    state = GameState(
        depth=0,
        turn=YELLOW,
        points=(0, 0),
        slots=((0, 0, 5, 0, 0), (0,) * 5),
        directions=((OUTBOUND, OUTBOUND, RETURN, OUTBOUND, OUTBOUND), (OUTBOUND,) * 5),
    )
    # Yellow total: 4 + 12 + 3 + 12 + 4 = 35, red total: 38
    assert steps_remaining_heuristic(state) == 3


def test_capture_heuristic_counts_yellow_points():
    state = GameState(
        depth=4,
        turn=RED,
        points=(2, 5),
        slots=((0,) * 5, (0,) * 5),
        directions=((OUTBOUND,) * 5, (OUTBOUND,) * 5),
    )

    assert capture_heuristic(state) == 2


def test_turn_heuristic_dispatches_on_turn():
    """The pairing scores each leaf with the heuristic of the side to move."""
    heuristic = TurnHeuristic(yellow=lambda s: 1, red=lambda s: -1)
    state = create_starting_state()

    assert heuristic(state) == 1
    assert heuristic(state.with_turn(RED)) == -1


def test_turn_heuristic_pickles():
    """Pairings of library heuristics can be sent to worker processes."""
    heuristic = TurnHeuristic(yellow=capture_heuristic, red=progress_heuristic)
    restored = pickle.loads(pickle.dumps(heuristic))

    assert restored == heuristic


def test_heuristics_agree_on_reparsed_states():
    """Scores depend only on the position, not on how it was built."""
    state = create_starting_state()
    for stone in (1, 3, 5):
        state = apply_move(state, stone)
    state = apply_move(state.with_turn(YELLOW), 2)

    reparsed = parse_board(render_board(state), turn=state.turn)

    for name, heuristic in HEURISTICS.items():
        if name == "bully":
            continue  # Captures are not drawn on the board
        assert heuristic(reparsed) == heuristic(state)


def test_get_heuristic():
    assert get_heuristic("steps") is steps_remaining_heuristic
    assert get_heuristic("bully") is capture_heuristic

    with pytest.raises(ValueError):
        get_heuristic("psychic")
