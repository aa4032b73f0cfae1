"""WebSocket sessions and state serialization."""

import json
import logging
from typing import Optional

from fastapi import WebSocket

from .game import GameEngine
from .grid import Grid
from .highscore import HighScoreStore
from .inputs import PAUSE, Bounds, InputGestureTracker, key_to_command
from .models import GameStatus
from .render import grid_to_html, grid_to_text
from .state import GameStateMachine
from .ticker import Ticker

logger = logging.getLogger(__name__)


class GameSession:
    """One player's game, bound to one WebSocket."""

    def __init__(self, ws: WebSocket, grid: Grid, high_scores: HighScoreStore, rng=None):
        self.ws = ws
        self.ticker = Ticker(self.on_tick)
        self.machine = GameStateMachine(GameEngine(grid, rng=rng), self.ticker, high_scores)
        self.gestures = InputGestureTracker()

    async def on_tick(self):
        self.machine.tick()
        try:
            await self.send_state()
        except Exception:
            logger.debug("Connection gone, stopping ticks")
            self.ticker.stop()

    async def send_state(self):
        await self.ws.send_text(build_state_msg(self.machine))

    def close(self):
        self.ticker.stop()

    # Input handlers only queue input or request a transition.

    def start(self):
        was_over = self.machine.status is GameStatus.GAME_OVER
        if self.machine.start() and was_over:
            self.gestures.reset()

    def key(self, key: str):
        command = key_to_command(key)
        if command == PAUSE:
            self.machine.toggle_pause()
        elif command is not None:
            self.machine.submit(command)

    def touch(self, phase: str, x: float, y: float):
        status = self.machine.status
        if status in (GameStatus.START, GameStatus.GAME_OVER):
            return
        running = status is GameStatus.RUNNING
        if phase == "start" and running:
            self.gestures.touch_start(x, y)
        elif phase == "move" and running:
            self.gestures.touch_move(x, y)
        elif phase == "end":
            command = self.gestures.touch_end(x, y, running)
            if command == PAUSE:
                self.machine.toggle_pause()
            elif command is not None:
                self.machine.submit(command)

    def set_pause_button(self, bounds: Optional[dict]):
        self.gestures.pause_button = Bounds.from_dict(bounds) if bounds else None

    def share_text(self) -> Optional[str]:
        if self.machine.status is not GameStatus.GAME_OVER:
            return None
        return grid_to_text(self.machine.snapshot())


class ConnectionManager:
    def __init__(self):
        self.sessions: dict[WebSocket, GameSession] = {}

    async def connect(self, ws: WebSocket, session: GameSession):
        await ws.accept()
        self.sessions[ws] = session
        logger.info(f"Player connected ({len(self.sessions)} active)")

    def disconnect(self, ws: WebSocket):
        session = self.sessions.pop(ws, None)
        if session is not None:
            session.close()
            logger.info(f"Player disconnected ({len(self.sessions)} active)")

    async def send_personal(self, ws: WebSocket, message: str):
        await ws.send_text(message)


def build_state_msg(machine: GameStateMachine) -> str:
    snapshot = machine.snapshot()
    msg = {"type": "state", **snapshot.to_dict()}
    msg["headline"] = machine.headline()
    msg["detail"] = machine.detail()
    if machine.status is GameStatus.GAME_OVER:
        msg["grid_html"] = grid_to_html(snapshot)
    return json.dumps(msg)
