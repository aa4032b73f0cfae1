"""The player's snake: a head plus a trail of body segments."""

import random
from collections import deque
from typing import Iterator, Optional

from .constants import SNAKE_COLOR, SNAKE_HEAD_COLOR
from .models import Coordinate, Velocity


class Snake:
    """Head position and trail, oldest segment first.

    ``move`` hands back the segment that fell off the tail so the caller can
    pass it to ``grow`` in the same tick.
    """

    def __init__(self, head: Coordinate, velocity: Velocity = (1, 0),
                 color: str = SNAKE_COLOR, head_color: str = SNAKE_HEAD_COLOR,
                 trail=()):
        self.head: Coordinate = tuple(head)
        self.trail: deque[Coordinate] = deque(tuple(seg) for seg in trail)
        self.velocity: Velocity = tuple(velocity)
        self.color = color
        self.head_color = head_color

    @classmethod
    def spawn(cls, cols: int, rows: int, rng: Optional[random.Random] = None, **kwargs) -> "Snake":
        """New snake in the upper-left area of the board, moving right."""
        rng = rng or random.Random()
        x = int((rng.random() + 1) * cols / 8)
        y = int((rng.random() + 1) * rows / 8)
        return cls((x, y), (1, 0), **kwargs)

    def set_velocity(self, velocity: Optional[Velocity]):
        if velocity is None:
            return
        self.velocity = tuple(velocity)

    def move(self) -> Coordinate:
        """Advance one cell; returns the segment removed from the tail."""
        self.trail.append(self.head)
        dx, dy = self.velocity
        self.head = (self.head[0] + dx, self.head[1] + dy)
        return self.trail.popleft()

    def grow(self, popped: Coordinate):
        """Put back the segment removed by the preceding ``move``."""
        self.trail.appendleft(popped)

    def upgrade(self, color: str, head_color: str):
        self.color = color
        self.head_color = head_color

    def is_trail_at(self, location: Coordinate) -> bool:
        for segment in self.trail:
            if segment[0] == location[0] and segment[1] == location[1]:
                return True
        return False

    def hit_self(self) -> bool:
        return self.is_trail_at(self.head)

    def occupies(self, location: Coordinate) -> bool:
        return tuple(location) == self.head or self.is_trail_at(location)

    def length(self) -> int:
        return len(self.trail) + 1

    def score(self) -> int:
        return len(self.trail)

    def segments(self) -> list[Coordinate]:
        """Every occupied cell, oldest trail segment first and head last."""
        return [*self.trail, self.head]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(list(self.trail))

    def __len__(self):
        return self.length()
