from __future__ import annotations

import tempfile
from pathlib import Path

from web import create_app


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        app = create_app({"SCORES_PATH": str(Path(tmp) / "scores.json")})
        client = app.test_client()

        # new game
        resp = client.post("/api/new", json={})
        assert resp.status_code == 200, resp.data
        data = resp.get_json()
        assert "board" in data and "scores" in data

        # make a move and have the computer reply
        resp = client.post("/api/move", json={"index": 0})
        assert resp.status_code == 200, resp.data
        data = resp.get_json()
        assert "computer_move" in data
        print("Smoke OK. Computer replied:", data["computer_move"])


if __name__ == "__main__":
    main()
