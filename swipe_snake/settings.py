"""Runtime configuration from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import GRID_W, GRID_H

load_dotenv()


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8765
    highscore_path: str = "highscore.json"
    log_level: str = "INFO"
    grid_cols: int = GRID_W
    grid_rows: int = GRID_H

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("SNAKE_HOST", cls.host),
            port=int(os.getenv("SNAKE_PORT", cls.port)),
            highscore_path=os.getenv("SNAKE_HIGHSCORE_PATH", cls.highscore_path),
            log_level=os.getenv("SNAKE_LOG_LEVEL", cls.log_level).upper(),
            grid_cols=int(os.getenv("SNAKE_GRID_COLS", cls.grid_cols)),
            grid_rows=int(os.getenv("SNAKE_GRID_ROWS", cls.grid_rows)),
        )
