"""Playing field bounds."""

from dataclasses import dataclass

from .constants import GRID_W, GRID_H


@dataclass(frozen=True)
class Grid:
    cols: int = GRID_W
    rows: int = GRID_H

    def __post_init__(self):
        if self.cols < 2 or self.rows < 2:
            raise ValueError(f"Grid must be at least 2x2, got {self.cols}x{self.rows}")

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x <= self.cols - 1 and 0 <= y <= self.rows - 1
