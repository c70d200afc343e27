# config.py: defaults shared by the CLI and the Streamlit app
import logging
import os
from typing import Union

#  puzzle defaults
DEFAULT_START = (1, 0, 2, 4, 5, 3, 7, 8, 6)
DEFAULT_GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)

#  search limits
# one parity class of the 8-puzzle has 9!/2 = 181,440 states
MAX_EXPANDED = 200_000
SHUFFLE_STEPS = 40

#  logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: Union[str, int, None]) -> Union[str, int]:
    """Numeric levels pass through; unknown names fall back to WARNING."""
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    return name if name in LOG_LEVELS else "WARNING"


def level_from_env() -> str:
    return resolve_level(os.environ.get("PUZZLE8_LOG_LEVEL"))


LOG_LEVEL = level_from_env()

#  board image
BOARD_SIDE = 600
COLOR_BG = (245, 245, 245)
COLOR_BLANK = (255, 236, 139)
COLOR_LINE = (30, 30, 30)
COLOR_TEXT = (30, 30, 30)


def configure_logging(level: Union[str, int, None] = None) -> None:
    """Set up root logging once; later calls only adjust the level."""
    level = resolve_level(LOG_LEVEL if level is None else level)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
