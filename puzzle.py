# puzzle.py (board model, moves, validation, heuristic)
from enum import Enum
from functools import lru_cache
from typing import Dict, Iterator, List, Sequence, Tuple

# Define the Grid type: 9 cells, row-major; 0 = blank
Grid = Tuple[int, ...]

SIZE = 3
CELLS = SIZE * SIZE


class PuzzleError(Exception):
    """Base class for everything the solver reports to its callers."""


class InvalidConfiguration(PuzzleError, ValueError):
    """Grid is not 3x3, or does not hold each of 0..8 exactly once."""


class Direction(Enum):
    """Direction the blank tile travels, as a (row, col) delta."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def __str__(self) -> str:
        return self.name


def to_grid(cells: Sequence) -> Grid:
    """Validate a 3x3 board (rows, or 9 row-major cells) and return it flat."""
    try:
        rows = list(cells)
    except TypeError:
        raise InvalidConfiguration(f"expected a 3x3 grid, got {cells!r}") from None

    if len(rows) == SIZE and all(not isinstance(r, (int, str)) for r in rows):
        flat: List = []
        for r in rows:
            try:
                row = list(r)
            except TypeError:
                raise InvalidConfiguration(f"row {r!r} is not a sequence") from None
            if len(row) != SIZE:
                raise InvalidConfiguration(f"row {row!r} must have {SIZE} cells")
            flat.extend(row)
    elif len(rows) == CELLS:
        flat = rows
    else:
        raise InvalidConfiguration(f"expected a 3x3 grid, got {len(rows)} rows/cells")

    for v in flat:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidConfiguration(f"cell {v!r} is not an integer")
        if not 0 <= v < CELLS:
            raise InvalidConfiguration(f"cell {v} is outside 0..{CELLS - 1}")
    if len(set(flat)) != CELLS:
        dupes = sorted({v for v in flat if flat.count(v) > 1})
        raise InvalidConfiguration(f"duplicate values {dupes}")
    return tuple(flat)


def rows_of(grid: Grid) -> List[List[int]]:
    return [list(grid[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]


@lru_cache(maxsize=32)
def _positions(goal: Grid) -> Dict[int, Tuple[int, int]]:
    return {tile: divmod(i, SIZE) for i, tile in enumerate(goal)}


def manhattan_distance(grid: Grid, goal: Grid) -> int:
    """Sum of Manhattan distances of every tile except the blank."""
    goal_pos = _positions(goal)
    total_distance = 0
    for i, tile in enumerate(grid):
        if tile == 0:
            continue
        current_row, current_col = divmod(i, SIZE)
        target_row, target_col = goal_pos[tile]
        total_distance += abs(target_row - current_row) + abs(target_col - current_col)
    return total_distance


def neighbors(grid: Grid) -> Iterator[Tuple[Direction, Grid]]:
    """Yield (direction, grid) for every legal blank move, in Direction order."""
    z = grid.index(0)
    r, c = divmod(z, SIZE)
    for d in Direction:
        dr, dc = d.value
        nr, nc = r + dr, c + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            j = nr * SIZE + nc
            arr = list(grid)
            arr[z], arr[j] = arr[j], arr[z]
            yield d, tuple(arr)


def apply_move(grid: Grid, direction: Direction) -> Grid:
    """Move the blank one cell; raises InvalidConfiguration off the board.

    Public helper for callers that replay a list of moves on a grid.
    """
    for d, nxt in neighbors(grid):
        if d is direction:
            return nxt
    raise InvalidConfiguration(f"cannot move blank {direction} in {grid}")


def parse_grid(text: str) -> Grid:
    """'102453786', '1 0 2 4 5 3 7 8 6' or '1,0,2,...' -> validated grid."""
    cleaned = text.replace(",", " ").split()
    if len(cleaned) == 1:
        cleaned = list(cleaned[0])
    try:
        cells = [int(x) for x in cleaned]
    except ValueError:
        raise InvalidConfiguration(f"not a list of digits: {text!r}") from None
    return to_grid(cells)
