"""Emoji rendering of the board for the game-over overlay and sharing."""

from .constants import GLYPHS_HTML, GLYPHS_TEXT
from .models import GameSnapshot


def _cell_kind(snapshot: GameSnapshot, x: int, y: int, trail: set) -> str:
    if (x, y) == tuple(snapshot.head):
        return "head"
    if (x, y) in trail:
        return "trail"
    if (x, y) == tuple(snapshot.food):
        return "food"
    if 0 <= x < snapshot.cols and 0 <= y < snapshot.rows:
        return "empty"
    return "border"


def grid_rows(snapshot: GameSnapshot, glyphs: dict) -> list[str]:
    """One string per row, including a one-cell border around the board."""
    trail = {tuple(seg) for seg in snapshot.trail}
    return [
        "".join(glyphs[_cell_kind(snapshot, x, y, trail)] for x in range(-1, snapshot.cols + 1))
        for y in range(-1, snapshot.rows + 1)
    ]


def grid_to_html(snapshot: GameSnapshot) -> str:
    return "".join(row + "<br>" for row in grid_rows(snapshot, GLYPHS_HTML))


def grid_to_text(snapshot: GameSnapshot) -> str:
    """Copyable result: the board as emoji followed by the score."""
    board = "".join(row + "\n" for row in grid_rows(snapshot, GLYPHS_TEXT))
    return f"{board}\nscore: {snapshot.score}"
