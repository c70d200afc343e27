# render.py: terminal and image views of a board
from typing import List, Tuple

from PIL import Image, ImageDraw, ImageFont

from config import BOARD_SIDE, COLOR_BG, COLOR_BLANK, COLOR_LINE, COLOR_TEXT
from puzzle import SIZE, Grid

#  ANSI styles
BOLD = "\033[1m"
BOLD_YELLOW = "\033[1;33m"
WHITE = "\033[97m"
BLANK_BG = "\033[103m"
RESET = "\033[0m"

CELL_W = 3


def _border(left: str, junction: str, right: str) -> str:
    return left + junction.join(["─" * CELL_W] * SIZE) + right


TOP = _border("┌", "┬", "┐")
MIDDLE = _border("├", "┼", "┤")
BOTTOM = _border("└", "┴", "┘")


def render_board(grid: Grid, color: bool = True) -> str:
    """Draw a bordered 3x3 board; the blank is highlighted when color is on."""
    def line(s: str) -> str:
        return f"{BOLD}{WHITE}{s}{RESET}" if color else s

    bar = line("│")
    out = [line(TOP)]
    for r in range(SIZE):
        cells = []
        for v in grid[r * SIZE:(r + 1) * SIZE]:
            if v == 0:
                cells.append(f"{BLANK_BG}{' ' * CELL_W}{RESET}" if color else " " * CELL_W)
            else:
                cells.append(f" {v} ")
        out.append(bar + bar.join(cells) + bar)
        out.append(line(MIDDLE if r < SIZE - 1 else BOTTOM))
    return "\n".join(out)


def render_solution(result, color: bool = True) -> str:
    """Full move-by-move listing of a SolveResult."""
    bold = BOLD if color else ""
    yellow = BOLD_YELLOW if color else ""
    reset = RESET if color else ""

    out: List[str] = [f"{bold}  | Start State |{reset}"]
    for step in result.steps:
        if step.direction is not None:
            out.append(f" Move => {yellow}{step.direction}{reset}")
        out.append(render_board(step.grid, color=color))
        out.append("")
    out.append(f"{bold} -- Achieved Goal State --{reset}")
    out.append(f"Total steps: {result.cost}")
    return "\n".join(out)


#  image helpers
def _measure_text(draw: ImageDraw.ImageDraw, text: str, font) -> Tuple[int, int]:
    l, t, r, b = draw.textbbox((0, 0), text, font=font)
    return r - l, b - t


def _load_font(size: int):
    try:
        return ImageFont.load_default(size=size)
    except TypeError:  # Pillow < 10.1 has no sized default font
        return ImageFont.load_default()


def render_image(grid: Grid, side: int = BOARD_SIDE) -> Image.Image:
    """Draw the board for a given state."""
    canvas = Image.new("RGB", (side, side), COLOR_BG)
    step = side // SIZE
    draw = ImageDraw.Draw(canvas)
    font = _load_font(step // 2)
    for i, val in enumerate(grid):
        r, c = divmod(i, SIZE)
        x0, y0 = c * step, r * step
        if val == 0:
            draw.rectangle([x0, y0, x0 + step, y0 + step], fill=COLOR_BLANK)
            continue
        text = str(val)
        tw, th = _measure_text(draw, text, font)
        draw.text((x0 + (step - tw) // 2, y0 + (step - th) // 2),
                  text, fill=COLOR_TEXT, font=font)
    for k in range(1, SIZE):
        draw.line([(k * step, 0), (k * step, side)], width=3, fill=COLOR_LINE)
        draw.line([(0, k * step), (side, k * step)], width=3, fill=COLOR_LINE)
    return canvas
