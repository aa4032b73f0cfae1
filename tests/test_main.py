"""
Tests for the HTTP routes and the WebSocket protocol.
"""

import json

import pytest
from fastapi.testclient import TestClient

from swipe_snake.highscore import HighScoreStore
from swipe_snake.main import app


@pytest.fixture
def client(tmp_path):
    app.state.high_scores = HighScoreStore(str(tmp_path / "highscore.json"))
    with TestClient(app) as c:
        yield c


def receive_until(ws, predicate, limit=50):
    for _ in range(limit):
        msg = json.loads(ws.receive_text())
        if predicate(msg):
            return msg
    raise AssertionError("expected message never arrived")


def test_index_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "gameCanvas" in response.text


def test_highscore_endpoint(client):
    app.state.high_scores.save(7)
    assert client.get("/api/highscore").json() == {"highscore": 7}


def test_initial_state_message(client):
    with client.websocket_connect("/ws") as ws:
        msg = json.loads(ws.receive_text())
        assert msg["type"] == "state"
        assert msg["status"] == "start"
        assert msg["headline"] == "Ready to go?"
        assert msg["score"] == 0
        assert msg["grid"] == [10, 10]


def test_start_pause_resume(client):
    with client.websocket_connect("/ws") as ws:
        ws.receive_text()
        ws.send_text(json.dumps({"type": "hello", "pause_button": {"left": 0, "top": 0, "right": 10, "bottom": 10}}))
        ws.send_text(json.dumps({"type": "start"}))
        receive_until(ws, lambda m: m.get("status") == "running")

        ws.send_text(json.dumps({"type": "key", "key": "Escape"}))
        paused = receive_until(ws, lambda m: m.get("status") == "paused")
        assert paused["headline"] == "Paused"

        ws.send_text(json.dumps({"type": "pause"}))
        receive_until(ws, lambda m: m.get("status") == "running")


def test_malformed_messages_ignored(client):
    with client.websocket_connect("/ws") as ws:
        ws.receive_text()
        ws.send_text("not json")
        ws.send_text(json.dumps([1, 2]))
        ws.send_text(json.dumps({"type": "bogus"}))
        ws.send_text(json.dumps({"type": "touch", "phase": "end", "x": "a", "y": 1}))
        ws.send_text(json.dumps({"type": "key", "key": "ArrowUp"}))
        msg = json.loads(ws.receive_text())
        assert msg["type"] == "state"
        assert msg["status"] == "start"
