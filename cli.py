# cli.py (terminal front-end)
import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

from config import DEFAULT_GOAL, DEFAULT_START, LOG_LEVEL, LOG_LEVELS, MAX_EXPANDED, configure_logging
from puzzle import CELLS, Grid, PuzzleError, parse_grid, rows_of
from render import render_solution
from solver_impl import solve

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _menu(title: str, options: List[str], input_fn: InputFn) -> int:
    while True:
        print(title)
        for i, opt in enumerate(options, 1):
            print(f"{i}. {opt}")
        answer = input_fn("Choice: ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return int(answer)
        print("Unknown menu option, please try again.\n")


def read_grid(label: str, input_fn: InputFn) -> Grid:
    """Read 9 integers, row by row or all at once; extra cells are an error."""
    print(f"Enter {label} state (3 rows of 3 numbers, 0 = blank):")
    cells: List[str] = []
    while len(cells) < CELLS:
        for tok in input_fn("> ").replace(",", " ").split():
            # "102" on one line means three cells
            cells.extend(tok if tok.isdigit() else [tok])
    return parse_grid(" ".join(cells))


def prompt_states(input_fn: InputFn = input):
    """Interactive menu for start and goal; returns (start, goal)."""
    print(f"Predefined start state: {rows_of(DEFAULT_START)}")
    print(f"Predefined goal state:  {rows_of(DEFAULT_GOAL)}\n")
    start, goal = DEFAULT_START, DEFAULT_GOAL
    if _menu("Menu:", ["Use predefined states", "Enter states manually"], input_fn) == 2:
        start = read_grid("start", input_fn)
        if _menu("Goal:", ["Use predefined goal", "Enter goal manually"], input_fn) == 2:
            goal = read_grid("goal", input_fn)
    return start, goal


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="puzzle8", description="Solve the 8-puzzle with A*.")
    ap.add_argument("--start", type=parse_grid, default=None,
                    help="start state as 9 digits, e.g. 102453786")
    ap.add_argument("--goal", type=parse_grid, default=None,
                    help="goal state as 9 digits (default 123456780)")
    ap.add_argument("-i", "--interactive", action="store_true",
                    help="choose the states from a menu")
    ap.add_argument("--max-expanded", type=int, default=MAX_EXPANDED,
                    help="give up after expanding this many nodes")
    ap.add_argument("--no-color", action="store_true", help="plain output without ANSI styling")
    ap.add_argument("--log-level", default=LOG_LEVEL,
                    choices=LOG_LEVELS, type=str.upper)
    return ap


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    print("--- 8 Puzzle Solver ---\n")
    try:
        if args.interactive:
            start, goal = prompt_states(input_fn)
        else:
            start = args.start or DEFAULT_START
            goal = args.goal or DEFAULT_GOAL
        t0 = time.perf_counter()
        result = solve(start, goal, max_expanded=args.max_expanded)
    except PuzzleError as e:
        logger.debug("solve failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_solution(result, color=not args.no_color))
    print(f"Time taken to solve: {(time.perf_counter() - t0) * 1000:.2f} ms")
    print(f"Nodes expanded: {result.expanded}, generated: {result.generated}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
