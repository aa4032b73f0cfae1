"""
Tests for the emoji board export.
"""

from swipe_snake.models import Collision, GameSnapshot
from swipe_snake.render import grid_to_html, grid_to_text


def make_snapshot(head, trail, food, score=None):
    return GameSnapshot(
        cols=2,
        rows=2,
        head=head,
        trail=trail,
        food=food,
        score=len(trail) if score is None else score,
        color="green",
        head_color="DarkGreen",
        food_color="red",
        frame_period_ms=190,
        collision=Collision.NONE,
    )


def test_grid_to_text_includes_border_and_score():
    snap = make_snapshot(head=(0, 0), trail=[(1, 0)], food=(1, 1))
    assert grid_to_text(snap) == (
        "⬛⬛⬛⬛\n"
        "⬛💥🟩⬛\n"
        "⬛⬜🍎⬛\n"
        "⬛⬛⬛⬛\n"
        "\nscore: 1"
    )


def test_head_drawn_in_border_after_wall_hit():
    snap = make_snapshot(head=(-1, 0), trail=[(0, 0)], food=(1, 1))
    rows = grid_to_text(snap).split("\n")
    assert rows[1] == "💥🟩⬜⬛"


def test_grid_to_html_uses_entities():
    snap = make_snapshot(head=(0, 0), trail=[], food=(1, 1))
    html = grid_to_html(snap)
    rows = html.split("<br>")
    assert len(rows) == 5 and rows[-1] == ""
    assert rows[1] == "&#11035;&#128165;&#11036;&#11035;"
    assert rows[2] == "&#11035;&#11036;&#127822;&#11035;"
