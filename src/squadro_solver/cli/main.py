"""
Main CLI for Squadro solver.
"""

import argparse
import logging
import random
import sys
from contextlib import ExitStack

from ..core import (
    HEURISTICS,
    RED,
    YELLOW,
    MalformedBoardError,
    TurnHeuristic,
    create_starting_state,
    get_heuristic,
)
from ..play import DEFAULT_LOOKAHEAD, analyze_position, load_board, play_against_itself, play_one_game
from ..solver import MinimaxSearch, ParallelMinimaxSearch
from ..solver.parallel_minimax import DEFAULT_SPLIT_DEPTH
from ..utils.rich_display import GameDisplay, setup_rich_logging

TURNS = {"yellow": YELLOW, "red": RED}


def setup_logging(level: str = "INFO", rich: bool = True) -> None:
    """Configure logging."""
    if rich:
        setup_rich_logging(level)
        return

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_search(heuristic, workers: int, split_depth: int = DEFAULT_SPLIT_DEPTH):
    """Sequential search for a single worker, process-parallel otherwise."""
    if workers == 1:
        return MinimaxSearch(heuristic)
    return ParallelMinimaxSearch(heuristic, num_workers=workers, split_depth=split_depth)


def show_command(args) -> int:
    """Render a board file."""
    setup_logging(args.log_level, rich=not args.plain_logs)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    try:
        state = load_board(args.board, turn=TURNS[args.turn])
    except (FileNotFoundError, MalformedBoardError) as e:
        logger.error(f"Cannot load board: {e}")
        return 1

    display.show_board(state, title=str(args.board))
    return 0


def analyze_command(args) -> int:
    """Search a position and print the principal variation."""
    setup_logging(args.log_level, rich=not args.plain_logs)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    try:
        if args.board:
            state = load_board(args.board, turn=TURNS[args.turn])
        else:
            state = create_starting_state(turn=TURNS[args.turn])
        heuristic = get_heuristic(args.heuristic)
        search = build_search(heuristic, args.workers, args.split_depth)
    except (FileNotFoundError, MalformedBoardError, ValueError) as e:
        logger.error(f"Cannot start analysis: {e}")
        return 1

    display.show_header(f"Squadro analysis - {args.depth} plies, {args.heuristic}", args.workers)
    display.show_board(state, title="Position")

    try:
        analysis = analyze_position(state, args.depth, search)
    except ValueError as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    if analysis.best_move is None:
        display.log_info("No move to play: the side to move has every stone home")
        return 0

    display.log("")
    display.log(f"Best line for the side to move, looking {args.depth} plies ahead:")
    display.show_principal_variation(analysis.line)
    display.log("")
    display.log_success(f"Leaf score: {analysis.score}")
    return 0


def selfplay_command(args) -> int:
    """Let the search play against itself."""
    setup_logging(args.log_level, rich=not args.plain_logs)
    logger = logging.getLogger(__name__)
    display = GameDisplay()

    try:
        heuristic = TurnHeuristic(
            yellow=get_heuristic(args.yellow_heuristic),
            red=get_heuristic(args.red_heuristic),
        )
        search = build_search(heuristic, args.workers, args.split_depth)
    except ValueError as e:
        logger.error(f"Cannot start self-play: {e}")
        return 1

    lookahead = (args.yellow_lookahead, args.red_lookahead)
    display.show_header(
        f"Squadro self-play - yellow {args.yellow_heuristic} ({lookahead[YELLOW]}) "
        f"vs red {args.red_heuristic} ({lookahead[RED]})",
        args.workers,
    )

    with ExitStack() as stack:
        if isinstance(search, ParallelMinimaxSearch):
            # Keep one worker pool for the whole run
            stack.enter_context(search)

        try:
            if args.games == 1 and args.verbose:
                record = play_one_game(
                    search,
                    lookahead=lookahead,
                    max_plies=args.max_plies,
                    random_openings=args.random_openings,
                    rng=random.Random(args.seed),
                    on_move=lambda state: display.show_board(state, title=f"Ply {state.depth}"),
                )
                display.show_game_over(record.final_state)
                return 0

            stats = play_against_itself(
                search,
                num_games=args.games,
                lookahead=lookahead,
                max_plies=args.max_plies,
                random_openings=args.random_openings,
                seed=args.seed,
            )
        except ValueError as e:
            logger.error(f"Self-play failed: {e}")
            return 1

    if stats.records:
        display.show_board(stats.records[-1].final_state, title="Final position of the last game")
    display.show_summary(stats.games, stats.yellow_wins, stats.avg_win_factor, stats.avg_plies)
    return 0


def _add_search_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--workers", type=int, default=1, help="Number of worker processes (1 = sequential)"
    )
    parser.add_argument(
        "--split-depth",
        type=int,
        default=DEFAULT_SPLIT_DEPTH,
        help="Plies expanded locally before subtrees go to workers",
    )


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Squadro minimax player")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--plain-logs", action="store_true", help="Plain log lines instead of rich output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Show command
    show_parser = subparsers.add_parser("show", help="Render a board file")
    show_parser.add_argument("--board", required=True, help="Path to a board diagram")
    show_parser.add_argument("--turn", choices=sorted(TURNS), default="yellow")
    show_parser.set_defaults(func=show_command)

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Search a position")
    analyze_parser.add_argument(
        "--board", default=None, help="Path to a board diagram (default: starting position)"
    )
    analyze_parser.add_argument("--turn", choices=sorted(TURNS), default="yellow")
    analyze_parser.add_argument(
        "--depth", type=int, default=DEFAULT_LOOKAHEAD, help="Plies to look ahead"
    )
    analyze_parser.add_argument(
        "--heuristic", choices=sorted(HEURISTICS), default="steps", help="Leaf evaluation"
    )
    _add_search_args(analyze_parser)
    analyze_parser.set_defaults(func=analyze_command)

    # Self-play command
    selfplay_parser = subparsers.add_parser("selfplay", help="Play the search against itself")
    selfplay_parser.add_argument("--games", type=int, default=1, help="Number of games")
    selfplay_parser.add_argument("--yellow-lookahead", type=int, default=DEFAULT_LOOKAHEAD)
    selfplay_parser.add_argument("--red-lookahead", type=int, default=DEFAULT_LOOKAHEAD)
    selfplay_parser.add_argument(
        "--yellow-heuristic", choices=sorted(HEURISTICS), default="bully"
    )
    selfplay_parser.add_argument(
        "--red-heuristic", choices=sorted(HEURISTICS), default="progress"
    )
    selfplay_parser.add_argument(
        "--max-plies", type=int, default=None, help="Stop each game after this many plies"
    )
    selfplay_parser.add_argument(
        "--random-openings", type=int, default=0, help="Opening plies played at random"
    )
    selfplay_parser.add_argument("--seed", type=int, default=None, help="Seed for random openings")
    selfplay_parser.add_argument(
        "--verbose", action="store_true", help="Print every position (single game only)"
    )
    _add_search_args(selfplay_parser)
    selfplay_parser.set_defaults(func=selfplay_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
