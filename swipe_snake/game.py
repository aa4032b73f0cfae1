"""Core game state and logic."""

import logging
import random
from typing import Optional

from .constants import FRAME_PERIOD_MS, LEVEL_SPEEDUP_MS, MIN_FRAME_PERIOD_MS
from .food import Food
from .grid import Grid
from .inputs import EMPTY, InputQueue
from .models import Collision, Direction, GameSnapshot, LevelPalette, StepOutcome, Velocity
from .snake import Snake

logger = logging.getLogger(__name__)


def resolve_velocity(direction, velocity: Velocity) -> Optional[Velocity]:
    """Velocity a direction turns the snake to, or None if it would not turn.

    Only turns onto the other axis count: up/down while moving horizontally,
    left/right while moving vertically. Reversals and repeats are ignored.
    """
    if not isinstance(direction, Direction):
        return None
    moving = "horizontal" if velocity[1] == 0 else "vertical"
    if direction.axis == moving:
        return None
    return direction.velocity


class GameEngine:
    """Owns the snake and the food and advances them one tick at a time."""

    def __init__(self, grid: Optional[Grid] = None, inputs: Optional[InputQueue] = None,
                 rng: Optional[random.Random] = None, palette: Optional[LevelPalette] = None,
                 frame_period_ms: int = FRAME_PERIOD_MS):
        if frame_period_ms <= 0:
            raise ValueError(f"frame_period_ms must be positive, got {frame_period_ms}")
        self.grid = grid or Grid()
        self.inputs = inputs if inputs is not None else InputQueue()
        self.rng = rng or random.Random()
        self.palette = palette if palette is not None else LevelPalette()
        self.initial_frame_period_ms = frame_period_ms
        self.frame_period_ms = frame_period_ms
        self.level = 1
        self.collision = Collision.NONE
        self.snake = Snake.spawn(self.grid.cols, self.grid.rows, self.rng)
        self.food = Food(self.grid.cols, self.grid.rows, self.rng)
        if self.snake.occupies(self.food.position):
            self.food.relocate(self.snake)

    def reset(self):
        """Start a fresh run on the same board."""
        self.inputs.clear()
        self.palette.reset()
        self.frame_period_ms = self.initial_frame_period_ms
        self.level = 1
        self.collision = Collision.NONE
        self.snake = Snake.spawn(self.grid.cols, self.grid.rows, self.rng)
        self.food.relocate(self.snake)

    def score(self) -> int:
        return self.snake.score()

    def _next_velocity(self) -> Optional[Velocity]:
        while True:
            direction = self.inputs.dequeue()
            if direction is EMPTY:
                return None
            velocity = resolve_velocity(direction, self.snake.velocity)
            if velocity is not None:
                return velocity

    def _level_up(self):
        color, head_color = self.palette.next_colors()
        self.snake.upgrade(color, head_color)
        self.frame_period_ms = max(MIN_FRAME_PERIOD_MS, self.frame_period_ms - LEVEL_SPEEDUP_MS)
        self.level += 1
        logger.info(f"Board filled, level {self.level} at {self.frame_period_ms} ms per tick")

    def step(self) -> StepOutcome:
        if self.collision is not Collision.NONE:
            return StepOutcome(collision=self.collision)

        self.snake.set_velocity(self._next_velocity())
        popped = self.snake.move()

        head = self.snake.head
        ate = leveled_up = False
        if not self.grid.in_bounds(*head):
            self.collision = Collision.WALL
        elif self.snake.hit_self():
            self.collision = Collision.TAIL
        elif head == self.food.position:
            ate = True
            if self.snake.length() == self.grid.cell_count - 1:
                self._level_up()
                leveled_up = True
            else:
                self.snake.grow(popped)
            self.food.relocate(self.snake)

        return StepOutcome(collision=self.collision, ate=ate, leveled_up=leveled_up)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            cols=self.grid.cols,
            rows=self.grid.rows,
            head=self.snake.head,
            trail=list(self.snake),
            food=self.food.position,
            score=self.score(),
            color=self.snake.color,
            head_color=self.snake.head_color,
            food_color=self.food.color,
            frame_period_ms=self.frame_period_ms,
            collision=self.collision,
        )
