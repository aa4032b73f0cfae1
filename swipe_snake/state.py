"""Game lifecycle: start, running, paused and game over."""

import logging
from typing import Optional, Protocol

from .game import GameEngine
from .highscore import HighScoreStore
from .models import Collision, GameSnapshot, GameStatus, StepOutcome

logger = logging.getLogger(__name__)


class Timer(Protocol):
    def start(self, period_ms: int) -> None: ...

    def stop(self) -> None: ...

    def set_period(self, period_ms: int) -> None: ...


class GameStateMachine:
    """Gates the engine's timer and the player's input by game status."""

    def __init__(self, engine: GameEngine, timer: Timer, high_scores: HighScoreStore):
        self.engine = engine
        self.timer = timer
        self.high_scores = high_scores
        self.status = GameStatus.START
        self.cause: Collision = Collision.NONE
        self.new_high_score = False
        self.last_outcome: Optional[StepOutcome] = None

    @property
    def inputs(self):
        return self.engine.inputs

    def _transition(self, new_status: GameStatus):
        score = self.engine.score()
        # Sticky for the run: an earlier pause may already have saved the record.
        self.new_high_score = self.high_scores.submit(score) or self.new_high_score

        if new_status is GameStatus.RUNNING:
            self.timer.start(self.engine.frame_period_ms)
        elif new_status is GameStatus.PAUSED:
            self.timer.stop()
            self.inputs.clear()
        elif new_status is GameStatus.GAME_OVER:
            self.timer.stop()
            self.cause = self.engine.collision
            logger.info(f"Game over: hit {self.cause.value}, score {score}")

        logger.debug(f"{self.status.value} -> {new_status.value}")
        self.status = new_status

    def start(self) -> bool:
        if self.status is GameStatus.GAME_OVER:
            self.engine.reset()
            self.cause = Collision.NONE
            self.new_high_score = False
            self.last_outcome = None
        elif self.status is not GameStatus.START:
            logger.debug(f"Ignoring start while {self.status.value}")
            return False
        self._transition(GameStatus.RUNNING)
        return True

    def toggle_pause(self) -> bool:
        if self.status is GameStatus.RUNNING:
            self._transition(GameStatus.PAUSED)
        elif self.status is GameStatus.PAUSED:
            self._transition(GameStatus.RUNNING)
        else:
            logger.debug(f"Ignoring pause while {self.status.value}")
            return False
        return True

    def submit(self, direction) -> bool:
        """Queue a direction; only accepted while the game is running."""
        if self.status is not GameStatus.RUNNING:
            return False
        return self.inputs.enqueue(direction)

    def tick(self) -> Optional[StepOutcome]:
        if self.status is not GameStatus.RUNNING:
            return None
        outcome = self.engine.step()
        self.last_outcome = outcome
        if outcome.leveled_up:
            self.timer.set_period(self.engine.frame_period_ms)
        if outcome.terminal:
            self._transition(GameStatus.GAME_OVER)
        return outcome

    def headline(self) -> str:
        if self.status is GameStatus.START:
            return "Ready to go?"
        if self.status is GameStatus.PAUSED:
            return "Paused"
        if self.status is GameStatus.GAME_OVER:
            if self.new_high_score:
                return "Game Over\nNew high score!"
            return f"Game Over\nYou hit {self.cause.value}"
        return ""

    def detail(self) -> str:
        if self.status is GameStatus.START:
            return f"High Score: {self.high_scores.load()}"
        if self.status is GameStatus.GAME_OVER:
            return f"Final Score: {self.engine.score()}"
        return f"Score: {self.engine.score()}"

    def snapshot(self) -> GameSnapshot:
        snap = self.engine.snapshot()
        snap.status = self.status
        snap.high_score = self.high_scores.load()
        snap.new_high_score = self.new_high_score
        return snap
