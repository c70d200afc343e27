import pytest

from puzzle import (
    Direction,
    InvalidConfiguration,
    PuzzleError,
    apply_move,
    manhattan_distance,
    neighbors,
    parse_grid,
    rows_of,
    to_grid,
)

GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)


def test_to_grid_accepts_rows_and_flat():
    rows = [[1, 0, 2], [4, 5, 3], [7, 8, 6]]
    assert to_grid(rows) == (1, 0, 2, 4, 5, 3, 7, 8, 6)
    assert to_grid((1, 0, 2, 4, 5, 3, 7, 8, 6)) == to_grid(rows)
    assert rows_of(to_grid(rows)) == rows


@pytest.mark.parametrize("bad", [
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],          # out of range
    [[1, 2, 3], [4, 5, 6], [7, 8, 8]],          # duplicate
    [[1, 2, 3], [4, 5, 6]],                     # two rows
    [[1, 2, 3, 4], [5, 6, 7], [8, 0]],          # ragged
    [1, 2, 3, 4, 5, 6, 7, 8],                   # eight cells
    [[1, 2, 3], [4, 5, 6], [7, 8, -1]],
    [[1, 2, 3], [4, 5, 6], [7, 8, "0"]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 0.0]],
    None,
])
def test_to_grid_rejects_malformed(bad):
    with pytest.raises(InvalidConfiguration):
        to_grid(bad)


def test_invalid_configuration_is_value_error():
    assert issubclass(InvalidConfiguration, ValueError)
    assert issubclass(InvalidConfiguration, PuzzleError)


def test_parse_grid_forms():
    expected = (1, 0, 2, 4, 5, 3, 7, 8, 6)
    assert parse_grid("102453786") == expected
    assert parse_grid("1 0 2  4 5 3\n7 8 6") == expected
    assert parse_grid("1,0,2,4,5,3,7,8,6") == expected
    with pytest.raises(InvalidConfiguration):
        parse_grid("12345678x")
    with pytest.raises(InvalidConfiguration):
        parse_grid("1023")


def test_manhattan_distance_excludes_blank():
    assert manhattan_distance(GOAL, GOAL) == 0
    # blank and 8 swapped: only tile 8 counts
    assert manhattan_distance((1, 2, 3, 4, 5, 6, 7, 0, 8), GOAL) == 1
    # 1 0 2 / 4 5 3 / 7 8 6 -> tiles 2, 3, 6 each one cell off
    assert manhattan_distance((1, 0, 2, 4, 5, 3, 7, 8, 6), GOAL) == 3


def test_manhattan_distance_against_custom_goal():
    goal = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    assert manhattan_distance(GOAL, goal) == 12
    assert manhattan_distance(goal, goal) == 0


def test_neighbors_order_and_bounds():
    center = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    moves = [d for d, _ in neighbors(center)]
    assert moves == [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

    corner = (0, 1, 2, 3, 4, 5, 6, 7, 8)
    result = dict(neighbors(corner))
    assert set(result) == {Direction.DOWN, Direction.RIGHT}
    assert result[Direction.RIGHT] == (1, 0, 2, 3, 4, 5, 6, 7, 8)
    assert result[Direction.DOWN] == (3, 1, 2, 0, 4, 5, 6, 7, 8)


def test_apply_move():
    assert apply_move((1, 0, 2, 4, 5, 3, 7, 8, 6), Direction.RIGHT) == (1, 2, 0, 4, 5, 3, 7, 8, 6)
    with pytest.raises(InvalidConfiguration):
        apply_move((1, 0, 2, 4, 5, 3, 7, 8, 6), Direction.UP)
