"""FastAPI application — HTTP routes, WebSocket endpoint."""

import json
import logging
import os

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse

from .connection_manager import ConnectionManager, GameSession
from .grid import Grid
from .highscore import HighScoreStore
from .settings import Settings

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI()
app.state.settings = settings
app.state.grid = Grid(settings.grid_cols, settings.grid_rows)
app.state.high_scores = HighScoreStore(settings.highscore_path)
manager = ConnectionManager()

HTML_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "index.html")


@app.get("/")
async def serve_index():
    return FileResponse(HTML_PATH, media_type="text/html")


@app.get("/api/highscore")
async def get_highscore():
    return {"highscore": app.state.high_scores.load()}


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    session = GameSession(ws, app.state.grid, app.state.high_scores)
    await manager.connect(ws, session)
    try:
        await session.send_state()
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
                kind = msg["type"]
            except (json.JSONDecodeError, KeyError, TypeError) as e:
                logger.debug(f"Dropping malformed message {raw!r}: {e}")
                continue

            if kind == "hello":
                try:
                    session.set_pause_button(msg.get("pause_button"))
                except (KeyError, TypeError, ValueError) as e:
                    logger.debug(f"Ignoring bad pause button bounds: {e}")
                continue
            elif kind == "key":
                key = msg.get("key")
                if not isinstance(key, str):
                    continue
                session.key(key)
            elif kind == "touch":
                x, y = msg.get("x"), msg.get("y")
                if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
                    continue
                session.touch(msg.get("phase"), x, y)
            elif kind == "start":
                session.start()
            elif kind == "pause":
                session.machine.toggle_pause()
            elif kind == "share":
                text = session.share_text()
                if text is not None:
                    await manager.send_personal(ws, json.dumps({"type": "share", "text": text}))
                continue
            else:
                logger.debug(f"Unknown message type {kind!r}")
                continue
            await session.send_state()
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(ws)


if __name__ == "__main__":
    import uvicorn
    print(f"Snake server starting on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
