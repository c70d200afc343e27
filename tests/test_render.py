from render import BOTTOM, MIDDLE, TOP, render_board, render_image, render_solution
from solver_impl import solve

START = (1, 0, 2, 4, 5, 3, 7, 8, 6)
GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)


def test_render_board_plain():
    text = render_board(START, color=False)
    lines = text.splitlines()
    assert lines[0] == TOP == "┌───┬───┬───┐"
    assert lines[1] == "│ 1 │   │ 2 │"
    assert lines[2] == MIDDLE
    assert lines[5] == "│ 7 │ 8 │ 6 │"
    assert lines[-1] == BOTTOM
    assert "\033[" not in text


def test_render_board_color_highlights_blank():
    text = render_board(START, color=True)
    assert "\033[103m   \033[0m" in text
    assert text.count("\033[103m") == 1


def test_render_solution_lists_moves():
    out = render_solution(solve(START, GOAL), color=False)
    assert out.startswith("  | Start State |")
    assert [l for l in out.splitlines() if l.startswith(" Move =>")] == [
        " Move => RIGHT", " Move => DOWN", " Move => DOWN",
    ]
    assert out.rstrip().endswith("Total steps: 3")


def test_render_image_size():
    img = render_image(START, side=300)
    assert img.size == (300, 300)
    assert img.mode == "RGB"
    # blank cell (row 0, col 1) is filled with the highlight colour
    assert img.getpixel((150, 10)) != img.getpixel((10, 10))
