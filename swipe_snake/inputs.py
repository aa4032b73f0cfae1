"""Player input: direction queue, key bindings and swipe tracking."""

from collections import deque
from dataclasses import dataclass
from typing import Optional

from .constants import KEY_BINDINGS, PAUSE_KEYS, SWIPE_THRESHOLD
from .models import Direction, parse_direction


class _Empty:
    def __repr__(self):
        return "EMPTY"

    def __bool__(self):
        return False


# Returned by InputQueue.dequeue when there is no new input this tick.
EMPTY = _Empty()

PAUSE = "pause"


class InputQueue:
    """FIFO of directions waiting to be applied by the engine."""

    def __init__(self):
        self._items: deque[Direction] = deque()

    def enqueue(self, direction) -> bool:
        d = parse_direction(direction)
        if d is None:
            return False
        self._items.append(d)
        return True

    def dequeue(self):
        if not self._items:
            return EMPTY
        return self._items.popleft()

    def clear(self):
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)


def key_to_command(key: str):
    """Map a browser ``KeyboardEvent.key`` to a Direction, PAUSE or None."""
    if key in PAUSE_KEYS:
        return PAUSE
    name = KEY_BINDINGS.get(key)
    return Direction(name) if name else None


Point = tuple[float, float]


@dataclass(frozen=True)
class Bounds:
    left: float
    top: float
    right: float
    bottom: float

    def contains(self, point: Optional[Point]) -> bool:
        if point is None:
            return False
        x, y = point
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    @classmethod
    def from_dict(cls, data: dict) -> "Bounds":
        return cls(
            left=float(data["left"]),
            top=float(data["top"]),
            right=float(data["right"]),
            bottom=float(data["bottom"]),
        )


def resolve_swipe(start: Optional[Point], end: Optional[Point],
                  threshold: float = SWIPE_THRESHOLD, scaler: float = 1) -> Optional[Direction]:
    """Direction of a swipe from ``start`` to ``end``.

    Returns None when either point is missing or the displacement is shorter
    than the threshold, so a tap never turns the snake.
    """
    if start is None or end is None:
        return None
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if max(abs(dx), abs(dy)) < threshold * scaler:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class InputGestureTracker:
    """Turns raw touch events into directions or a pause toggle.

    A touch only toggles pause when it both starts and ends on the pause
    button; anything else that ends while running is read as a swipe.
    """

    def __init__(self, pause_button: Optional[Bounds] = None, threshold: float = SWIPE_THRESHOLD):
        self.pause_button = pause_button
        self.threshold = threshold
        self.reset()

    def reset(self):
        self.start: Optional[Point] = None
        self.current: Optional[Point] = None
        self.end: Optional[Point] = None
        self.waiting_for_pause = False

    def _on_pause_button(self, point: Optional[Point]) -> bool:
        return self.pause_button is not None and self.pause_button.contains(point)

    def touch_start(self, x: float, y: float):
        self.start = (x, y)
        self.waiting_for_pause = self._on_pause_button(self.start)

    def touch_move(self, x: float, y: float):
        self.current = (x, y)

    def touch_end(self, x: float, y: float, running: bool):
        """Finish a touch; returns PAUSE, a Direction, or None."""
        self.end = (x, y)
        on_button = self._on_pause_button(self.end)
        waiting = self.waiting_for_pause
        self.waiting_for_pause = False
        if running:
            if on_button and waiting:
                return PAUSE
            return resolve_swipe(self.start, self.end, self.threshold)
        if on_button:
            return PAUSE
        return None
