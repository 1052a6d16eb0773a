"""Tests for the FastAPI tic-tac-toe interface."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tictactoe import ui
from tictactoe.ui import app


client = TestClient(app)
ui.AI_SEED = 1234


def _new_game(**payload):
    response = client.post("/api/game", json=payload)
    assert response.status_code == 200
    return response.json()


def test_create_game_defaults():
    payload = _new_game()
    assert payload["gameType"] == "two_player"
    assert payload["difficulty"] == "medium"
    assert payload["currentPlayer"] == "X"
    assert payload["board"] == [["", "", ""]] * 3
    assert payload["outcome"] is None
    assert len(payload["availableMoves"]) == 9
    assert payload["moveLog"] == []
    assert "lastMove" not in payload


def test_single_player_move_gets_computer_reply():
    game = _new_game(gameType="single_player", difficulty="easy")
    response = client.post(f"/api/game/{game['id']}/move", json={"row": 1, "col": 1})
    assert response.status_code == 200
    state = response.json()
    assert state["board"][1][1] == "X"
    assert state["board"][0][0] == "O"
    assert state["currentPlayer"] == "X"
    assert [m["player"] for m in state["moveLog"]] == ["X", "O"]
    assert state["lastMove"] == {"player": "O", "row": 0, "col": 0}

    follow_up = client.get(f"/api/game/{game['id']}")
    assert follow_up.status_code == 200
    assert follow_up.json() == state


def test_invalid_move_rejected():
    game = _new_game()
    first = client.post(f"/api/game/{game['id']}/move", json={"row": 0, "col": 0})
    assert first.status_code == 200

    duplicate = client.post(f"/api/game/{game['id']}/move", json={"row": 0, "col": 0})
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Cell already occupied"


def test_out_of_range_move_is_validation_error():
    game = _new_game()
    response = client.post(f"/api/game/{game['id']}/move", json={"row": 3, "col": 0})
    assert response.status_code == 422


def test_rejects_unknown_difficulty():
    response = client.post("/api/game", json={"difficulty": "impossible"})
    assert response.status_code == 422


def test_win_then_restart():
    game = _new_game()
    game_id = game["id"]
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        response = client.post(f"/api/game/{game_id}/move", json={"row": row, "col": col})
        assert response.status_code == 200
    state = response.json()
    assert state["outcome"] == "X"
    assert state["availableMoves"] == []

    frozen = client.post(f"/api/game/{game_id}/move", json={"row": 2, "col": 2})
    assert frozen.status_code == 400

    restarted = client.post(f"/api/game/{game_id}/restart")
    assert restarted.status_code == 200
    fresh = restarted.json()
    assert fresh["id"] == game_id
    assert fresh["outcome"] is None
    assert fresh["moveLog"] == []
    assert fresh["gameType"] == "two_player"


def test_missing_game_returns_404():
    assert client.get("/api/game/missing").status_code == 404
    assert client.post("/api/game/missing/restart").status_code == 404
