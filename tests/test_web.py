from __future__ import annotations

import json

import pytest

from web import create_app


@pytest.fixture
def scores_path(tmp_path):
    return tmp_path / "scores.json"


@pytest.fixture
def client(scores_path):
    app = create_app({"SCORES_PATH": str(scores_path), "RANDOM_SEED": 0, "TESTING": True})
    return app.test_client()


def test_index_renders_board(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b'data-index="8"' in r.data
    assert b"COMPUTER_DELAY_MS = 600" in r.data
    # New Game cancels a pending delayed computer reply
    assert b"clearTimeout(pending)" in r.data


def test_new_game_state(client):
    r = client.post("/api/new", json={})
    assert r.status_code == 200
    data = r.get_json()
    assert data["board"] == [""] * 9
    assert data["turn"] == "X"
    assert data["active"] is True
    assert data["outcome"] == "ongoing"
    assert data["status"] == "Your turn (X)"
    assert data["scores"] == {"player": 0, "computer": 0, "ties": 0}


def test_move_gets_computer_reply(client):
    client.post("/api/new", json={})
    r = client.post("/api/move", json={"index": 0})
    assert r.status_code == 200
    data = r.get_json()
    assert data["computer_move"] == 4
    assert data["board"][0] == "X"
    assert data["board"][4] == "O"
    assert data["turn"] == "X"


def test_occupied_cell_is_ignored(client):
    client.post("/api/new", json={})
    client.post("/api/move", json={"index": 0})
    r = client.post("/api/move", json={"index": 4})
    assert r.status_code == 200
    data = r.get_json()
    assert data["computer_move"] is None
    assert data["board"].count("") == 7


@pytest.mark.parametrize("payload", [{}, {"index": None}, [4], "x", 5])
def test_missing_index(client, payload):
    r = client.post("/api/move", json=payload)
    assert r.status_code == 400
    assert "error" in r.get_json()


@pytest.mark.parametrize("index", [9, -1, "2"])
def test_bad_index(client, index):
    r = client.post("/api/move", json={"index": index})
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_computer_win_is_scored_and_persisted(client, scores_path):
    client.post("/api/new", json={})
    client.post("/api/move", json={"index": 0})  # O takes center
    client.post("/api/move", json={"index": 1})  # O blocks at 2
    r = client.post("/api/move", json={"index": 3})  # O completes 2-4-6
    data = r.get_json()
    assert data["computer_move"] == 6
    assert data["outcome"] == "win"
    assert data["winner"] == "O"
    assert data["winning_line"] == [2, 4, 6]
    assert data["active"] is False
    assert data["message"] == "🤖 Computer wins! Try again!"
    assert data["scores"]["computer"] == 1

    stored = json.loads(scores_path.read_text(encoding="utf-8"))
    assert stored["ticTacToeScores"] == {"player": 0, "computer": 1, "ties": 0}

    # Finished game ignores further moves
    r = client.post("/api/move", json={"index": 8})
    assert r.get_json()["board"][8] == ""
    assert client.get("/api/scores").get_json()["computer"] == 1


def test_scores_loaded_at_startup(scores_path):
    scores_path.write_text(
        json.dumps({"ticTacToeScores": {"player": 2, "computer": 5, "ties": 1}}),
        encoding="utf-8",
    )
    app = create_app({"SCORES_PATH": str(scores_path)})
    r = app.test_client().get("/api/state")
    assert r.get_json()["scores"] == {"player": 2, "computer": 5, "ties": 1}


def test_corrupt_scores_start_at_zero(scores_path):
    scores_path.write_text("{not json", encoding="utf-8")
    app = create_app({"SCORES_PATH": str(scores_path)})
    r = app.test_client().get("/api/scores")
    assert r.get_json() == {"player": 0, "computer": 0, "ties": 0}


def test_unwritable_scores_do_not_break_the_game(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    app = create_app({"SCORES_PATH": str(blocker / "scores.json"), "RANDOM_SEED": 0})
    client = app.test_client()
    client.post("/api/move", json={"index": 0})
    client.post("/api/move", json={"index": 1})
    r = client.post("/api/move", json={"index": 3})
    assert r.status_code == 200
    data = r.get_json()
    assert data["winner"] == "O"
    assert data["winning_line"] == [2, 4, 6]
    assert data["scores"]["computer"] == 1
    assert blocker.read_text(encoding="utf-8") == ""
