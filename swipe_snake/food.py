"""The single apple on the board."""

import random
from typing import Optional

from .constants import FOOD_COLOR
from .models import Coordinate
from .snake import Snake


class Food:
    def __init__(self, cols: int, rows: int, rng: Optional[random.Random] = None, color: str = FOOD_COLOR):
        self.cols = cols
        self.rows = rows
        self.color = color
        self._rng = rng or random.Random()
        self.position: Coordinate = self._random_cell()

    def _random_cell(self) -> Coordinate:
        return (self._rng.randrange(self.cols), self._rng.randrange(self.rows))

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def relocate(self, snake: Snake):
        """Move to a random cell off the snake and away from the current cell.

        Sampling is unbounded, so the board must have at least one such cell;
        the engine levels up instead of growing into a full board to keep that
        true.
        """
        previous = self.position
        candidate = self._random_cell()
        while snake.occupies(candidate) or candidate == previous:
            candidate = self._random_cell()
        self.position = candidate
