import re
from typing import List
from .state import Board, InvalidBoardError, CELLS

BLANK_TOKENS = ("_", ".")

_SPLIT = re.compile(r"[\s,;|]+")


def parse_board_str(board_str: str) -> Board:
    """Parses a board written as 16 integers.

    Accepted layouts: a 4x4 grid (one row per line) or a flat list; values
    may be separated by whitespace, commas, semicolons or '|'.
    The blank may be written as 0, 00, '_' or '.'.
    Lines starting with '#' are comments.
    """
    lines = [ln for ln in board_str.splitlines() if not ln.strip().startswith("#")]
    tokens: List[str] = [t for t in _SPLIT.split(" ".join(lines)) if t]
    if not tokens:
        raise InvalidBoardError("Empty board")
    values: List[int] = []
    for tok in tokens:
        if tok in BLANK_TOKENS:
            values.append(0)
            continue
        try:
            values.append(int(tok))
        except ValueError:
            raise InvalidBoardError(f"Bad tile token {tok!r}") from None
    if len(values) != CELLS:
        raise InvalidBoardError(f"Expected {CELLS} tiles, got {len(values)}")
    return Board(tuple(values))


def parse_board_file(path: str) -> Board:
    with open(path, "r", encoding="utf-8") as f:
        return parse_board_str(f.read())
