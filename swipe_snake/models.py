"""Data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .constants import DIRECTIONS, LEVEL_COLORS, SNAKE_COLOR, SNAKE_HEAD_COLOR

Coordinate = tuple[int, int]
Velocity = tuple[int, int]


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def velocity(self) -> Velocity:
        return DIRECTIONS[self.value]

    @property
    def axis(self) -> str:
        return "horizontal" if self.velocity[1] == 0 else "vertical"


class Collision(Enum):
    NONE = "nothing"
    WALL = "the wall"
    TAIL = "your tail"


class GameStatus(Enum):
    START = "start"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class StepOutcome:
    collision: Collision = Collision.NONE
    ate: bool = False
    leveled_up: bool = False

    @property
    def terminal(self) -> bool:
        return self.collision is not Collision.NONE


class LevelPalette:
    """Colours handed to the snake on each level-up.

    Pairs are consumed in order; once exhausted every further level-up gets
    the starting colours back.
    """

    def __init__(self, colors: Iterable[tuple[str, str]] = LEVEL_COLORS,
                 default: tuple[str, str] = (SNAKE_COLOR, SNAKE_HEAD_COLOR)):
        self._colors = list(colors)
        self._remaining = list(self._colors)
        self.default = default

    def next_colors(self) -> tuple[str, str]:
        if not self._remaining:
            return self.default
        return self._remaining.pop(0)

    def reset(self):
        self._remaining = list(self._colors)

    def __len__(self):
        return len(self._remaining)


@dataclass
class GameSnapshot:
    cols: int
    rows: int
    head: Coordinate
    trail: list[Coordinate]
    food: Coordinate
    score: int
    color: str
    head_color: str
    food_color: str
    frame_period_ms: int
    collision: Collision = Collision.NONE
    status: GameStatus = GameStatus.START
    high_score: int = 0
    new_high_score: bool = False

    def to_dict(self) -> dict:
        return {
            "grid": [self.cols, self.rows],
            "head": list(self.head),
            "trail": [list(seg) for seg in self.trail],
            "food": list(self.food),
            "score": self.score,
            "color": self.color,
            "head_color": self.head_color,
            "food_color": self.food_color,
            "frame_period_ms": self.frame_period_ms,
            "collision": self.collision.value,
            "status": self.status.value,
            "high_score": self.high_score,
            "new_high_score": self.new_high_score,
        }


def parse_direction(value) -> Optional[Direction]:
    """Return the Direction for ``value`` or None if it is not one."""
    if isinstance(value, Direction):
        return value
    try:
        return Direction(value)
    except ValueError:
        return None
