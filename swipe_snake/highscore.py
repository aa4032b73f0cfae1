"""Persisted best score."""

import json
import logging
import os
import tempfile

from .constants import HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """A single integer kept under a fixed key in a small JSON file."""

    def __init__(self, path: str, key: str = HIGHSCORE_KEY):
        self.path = path
        self.key = key
        self._value = self._read()

    def _read(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data.get(self.key, 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable high score file {self.path}: {e}")
            return 0
        return max(value, 0)

    def load(self) -> int:
        return self._value

    def save(self, score: int):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=directory, prefix=".highscore-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({self.key: int(score)}, f)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
        self._value = int(score)

    def submit(self, score: int) -> bool:
        """Save ``score`` if it beats the stored one; returns True if it did."""
        if score <= self._value:
            return False
        self.save(score)
        logger.info(f"New high score {score}")
        return True
