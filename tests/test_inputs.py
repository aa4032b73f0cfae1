"""
Tests for grid bounds and the input boundary: direction queue, key
bindings and swipe/touch handling.
"""

import pytest

from swipe_snake.grid import Grid
from swipe_snake.inputs import (
    EMPTY,
    PAUSE,
    Bounds,
    InputGestureTracker,
    InputQueue,
    key_to_command,
    resolve_swipe,
)
from swipe_snake.models import Direction


class TestGrid:
    """Tests for Grid.in_bounds."""

    @pytest.mark.parametrize("x,y", [(0, 0), (9, 9), (0, 9), (9, 0), (4, 5)])
    def test_cells_inside_are_in_bounds(self, x, y):
        """Every cell of a 10x10 board, corners included, is in bounds."""
        assert Grid(10, 10).in_bounds(x, y)

    @pytest.mark.parametrize("x,y", [(-1, 5), (10, 5), (5, -1), (5, 10), (-1, -1)])
    def test_cells_outside_are_not_in_bounds(self, x, y):
        """One step past any edge is out of bounds."""
        assert not Grid(10, 10).in_bounds(x, y)

    def test_non_square_grid(self):
        """Columns bound x and rows bound y."""
        grid = Grid(cols=4, rows=2)
        assert grid.in_bounds(3, 1)
        assert not grid.in_bounds(1, 3)
        assert grid.cell_count == 8

    def test_tiny_grid_rejected(self):
        """A board smaller than 2x2 is a configuration error."""
        with pytest.raises(ValueError):
            Grid(1, 5)


class TestInputQueue:
    """Tests for the FIFO of directions."""

    def test_dequeue_empty_returns_sentinel(self):
        """An empty queue hands back EMPTY rather than raising."""
        queue = InputQueue()
        assert queue.dequeue() is EMPTY
        assert not EMPTY

    def test_fifo_order(self):
        """Directions come out in the order they went in."""
        queue = InputQueue()
        queue.enqueue("up")
        queue.enqueue(Direction.LEFT)
        queue.enqueue("down")
        assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [
            Direction.UP, Direction.LEFT, Direction.DOWN,
        ]
        assert queue.dequeue() is EMPTY

    @pytest.mark.parametrize("bad", ["none", "UP", "", None, 3, "forward"])
    def test_invalid_directions_dropped(self, bad):
        """Anything outside the four directions is silently ignored."""
        queue = InputQueue()
        assert queue.enqueue(bad) is False
        assert queue.is_empty()
        assert len(queue) == 0

    def test_clear(self):
        """clear() discards every pending direction."""
        queue = InputQueue()
        for d in ("up", "left", "down"):
            queue.enqueue(d)
        queue.clear()
        assert queue.dequeue() is EMPTY


class TestKeyBindings:
    """Tests for keyboard normalisation."""

    @pytest.mark.parametrize("key,expected", [
        ("ArrowUp", Direction.UP), ("w", Direction.UP), ("k", Direction.UP),
        ("ArrowDown", Direction.DOWN), ("s", Direction.DOWN), ("j", Direction.DOWN),
        ("ArrowLeft", Direction.LEFT), ("a", Direction.LEFT), ("h", Direction.LEFT),
        ("ArrowRight", Direction.RIGHT), ("d", Direction.RIGHT), ("l", Direction.RIGHT),
    ])
    def test_direction_keys(self, key, expected):
        """Arrows, WASD and vi keys all map onto the four directions."""
        assert key_to_command(key) == expected

    @pytest.mark.parametrize("key", [" ", "Escape"])
    def test_pause_keys(self, key):
        """Space and Escape toggle pause."""
        assert key_to_command(key) == PAUSE

    def test_unbound_key(self):
        """Other keys do nothing."""
        assert key_to_command("q") is None


class TestResolveSwipe:
    """Tests for swipe direction resolution."""

    def test_missing_points(self):
        """No swipe without both a start and an end."""
        assert resolve_swipe(None, (100, 100)) is None
        assert resolve_swipe((0, 0), None) is None

    def test_short_movement_is_a_tap(self):
        """Displacement under the threshold is not a swipe."""
        assert resolve_swipe((100, 100), (129, 110)) is None

    @pytest.mark.parametrize("end,expected", [
        ((150, 110), Direction.RIGHT),
        ((50, 90), Direction.LEFT),
        ((110, 150), Direction.DOWN),
        ((90, 50), Direction.UP),
    ])
    def test_larger_axis_wins(self, end, expected):
        """The axis with the larger absolute delta picks the direction."""
        assert resolve_swipe((100, 100), end) == expected

    def test_scaler_raises_threshold(self):
        """The threshold scales with the scaler argument."""
        assert resolve_swipe((0, 0), (40, 0)) == Direction.RIGHT
        assert resolve_swipe((0, 0), (40, 0), scaler=2) is None


class TestInputGestureTracker:
    """Tests for touch tracking and the pause button."""

    @pytest.fixture
    def tracker(self):
        return InputGestureTracker(pause_button=Bounds(left=0, top=500, right=100, bottom=550))

    def test_swipe_while_running(self, tracker):
        """A touch that moves far enough becomes a direction."""
        tracker.touch_start(200, 200)
        tracker.touch_move(260, 205)
        assert tracker.touch_end(300, 210, running=True) == Direction.RIGHT

    def test_tap_on_pause_button_pauses(self, tracker):
        """Starting and ending on the pause button toggles pause."""
        tracker.touch_start(50, 520)
        assert tracker.touch_end(55, 525, running=True) == PAUSE

    def test_swipe_ending_on_pause_button_is_a_swipe(self, tracker):
        """A swipe that merely ends on the button does not pause."""
        tracker.touch_start(50, 300)
        assert tracker.touch_end(50, 520, running=True) == Direction.DOWN

    def test_paused_touch_on_button_resumes(self, tracker):
        """While paused, ending on the pause button resumes."""
        assert tracker.touch_end(10, 510, running=False) == PAUSE
        assert tracker.touch_end(300, 300, running=False) is None

    def test_reset(self, tracker):
        """reset() forgets any touch in progress."""
        tracker.touch_start(50, 520)
        tracker.reset()
        assert tracker.start is None
        assert tracker.waiting_for_pause is False

    def test_bounds_from_dict(self):
        """Bounds accept the shape of a DOMRect."""
        bounds = Bounds.from_dict({"left": 1, "top": 2, "right": 3, "bottom": 4})
        assert bounds.contains((2, 3))
        assert not bounds.contains((5, 3))
        assert not bounds.contains(None)
