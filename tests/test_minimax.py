"""Tests for sequential minimax search."""

import pytest
from squadro_solver.core import (
    OUTBOUND,
    RED,
    RETURN,
    YELLOW,
    GameState,
    TurnHeuristic,
    capture_heuristic,
    create_starting_state,
    generate_successors,
    null_heuristic,
    progress_heuristic,
    steps_remaining_heuristic,
)
from squadro_solver.solver import MinimaxSearch, minimax, principal_variation, select_best


def _assert_valid_path(state, path, leaf):
    """Every ply of the path follows from the previous one by a legal move."""
    line = principal_variation(path)
    previous = state
    for next_state in line:
        assert next_state in [s for _, s in generate_successors(previous)]
        previous = next_state
    assert previous == leaf


def test_zero_depth_returns_state():
    """A zero-ply search is a leaf for any heuristic."""
    state = create_starting_state()

    for heuristic in (null_heuristic, progress_heuristic, steps_remaining_heuristic):
        assert minimax(state, 0, True, heuristic) == ([], state)


def test_completed_side_is_a_leaf():
    """Search stops when the side to move has every stone home."""
    state = GameState(
        depth=10,
        turn=YELLOW,
        points=(0, 0),
        slots=((0,) * 5, (0,) * 5),
        directions=((RETURN,) * 5, (OUTBOUND,) * 5),
    )

    assert minimax(state, 4, True, progress_heuristic) == ([], state)


def test_path_is_a_legal_line():
    """The leaf is reached from the root through exactly the returned path."""
    state = create_starting_state()
    path, leaf = minimax(state, 4, True, progress_heuristic)

    assert len(path) == 4
    assert path[0] == leaf
    _assert_valid_path(state, path, leaf)


def test_path_stops_at_completion():
    """The path is shorter than the depth when the game ends on the way."""
    # Yellow has one stone left, one step from home; red is done
    state = GameState(
        depth=30,
        turn=YELLOW,
        points=(0, 0),
        slots=((1, 0, 0, 0, 0), (0,) * 5),
        directions=((RETURN,) * 5, (RETURN,) * 5),
    )
    path, leaf = minimax(state, 5, True, progress_heuristic)

    assert len(path) == 1
    assert leaf.is_finished(YELLOW, 1)
    assert leaf.turn == RED


def test_depth_one_picks_fewest_steps():
    """One ply ahead, yellow picks the move leaving it the least work."""
    state = create_starting_state()
    path, leaf = minimax(state, 1, True, steps_remaining_heuristic)

    scores = [steps_remaining_heuristic(s) for _, s in generate_successors(state)]
    assert steps_remaining_heuristic(leaf) == max(scores)
    assert path == [leaf]


def test_depth_one_picks_longest_advance():
    """Ties go to the lowest stone number."""
    state = create_starting_state()
    path, leaf = minimax(state, 1, True, progress_heuristic)

    # Stones 1 and 5 both advance three slots
    assert leaf.slot(YELLOW, 1) == 3
    assert leaf.slots[YELLOW] == (3, 0, 0, 0, 0)


def test_minimizing_side_picks_lowest():
    """Red, minimizing, advances its own fastest stone."""
    state = create_starting_state(turn=RED)
    _, leaf = minimax(state, 1, False, progress_heuristic)

    # Red stones 2 and 4 move three slots
    assert leaf.slots[RED] == (0, 3, 0, 0, 0)


def test_null_heuristic_follows_stone_order():
    """With every leaf tied, each ply plays the first movable stone."""
    state = create_starting_state()
    path, _ = minimax(state, 3, True, null_heuristic)

    line = principal_variation(path)
    assert line[0].slots[YELLOW] == (3, 0, 0, 0, 0)
    assert line[1].slots[RED] == (1, 0, 0, 0, 0)


def test_capture_seeking_pairing():
    """The bully pairing steers yellow into a capture it can see."""
    # Yellow stone 2 (step 1) can capture red stone 1 sitting on slot 2
    state = GameState(
        depth=0,
        turn=YELLOW,
        points=(0, 0),
        slots=((0,) * 5, (2, 0, 0, 0, 0)),
        directions=((OUTBOUND,) * 5, (OUTBOUND,) * 5),
    )
    heuristic = TurnHeuristic(yellow=capture_heuristic, red=capture_heuristic)
    path, leaf = minimax(state, 1, True, heuristic)

    assert leaf.points[YELLOW] == 1
    assert leaf.slot(RED, 1) == 0


def test_select_best_is_stable():
    state = create_starting_state()
    a = ([], state)
    b = ([], state.with_turn(RED))

    assert select_best([a, b], True, null_heuristic) is a
    assert select_best([a, b], False, null_heuristic) is a


def test_search_engine_matches_function():
    """The search class returns the same line as the plain function."""
    state = create_starting_state()
    search = MinimaxSearch(steps_remaining_heuristic)

    assert search.search(state, 3, True) == minimax(state, 3, True, steps_remaining_heuristic)
    # Root plus 5 + 25 + 125 nodes
    assert search.nodes_searched == 156


def test_best_move():
    state = create_starting_state()
    search = MinimaxSearch(progress_heuristic)

    best = search.best_move(state, 2, True)
    assert best is not None
    assert best.depth == 1
    assert search.best_move(state, 0, True) is None


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        MinimaxSearch(null_heuristic).search(create_starting_state(), -1, True)
