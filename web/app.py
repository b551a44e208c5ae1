from __future__ import annotations

from flask import Flask, Response, jsonify, request, render_template
import random
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from engine import Game, AIPlayer, Mark
from web.scores import DEFAULT_KEY, ScoreStore


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__, static_folder="static", template_folder="templates")
    app.config.from_mapping(
        SCORES_PATH=str(Path(app.instance_path) / "scores.json"),
        SCORES_KEY=DEFAULT_KEY,
        COMPUTER_DELAY_MS=600,
        RANDOM_SEED=None,
    )
    if config:
        app.config.update(config)

    scores = ScoreStore(app.config["SCORES_PATH"], key=app.config["SCORES_KEY"])
    game = Game()
    game.add_listener(scores.record)
    ai = AIPlayer(rng=random.Random(app.config["RANDOM_SEED"]))

    def game_payload(**extra: Any) -> Response:
        snap = game.snapshot()
        snap["scores"] = scores.tally.to_dict()
        snap.update(extra)
        return jsonify(snap)

    @app.get("/")
    def index():
        return render_template("index.html", computer_delay_ms=app.config["COMPUTER_DELAY_MS"])

    @app.get("/api/state")
    def api_state():
        return game_payload()

    @app.get("/api/scores")
    def api_scores():
        return jsonify(scores.tally.to_dict())

    @app.post("/api/new")
    def api_new():
        game.reset()
        return game_payload()

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Missing index"}), 400
        index = payload.get("index")
        if index is None:
            return jsonify({"error": "Missing index"}), 400

        try:
            applied = game.apply_move(index, Mark.PLAYER)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        # Occupied cell, finished game or computer's turn: nothing happens
        if not applied:
            return game_payload(computer_move=None)

        if game.detect_outcome().is_terminal:
            return game_payload(computer_move=None)
        game.advance_turn()

        # Computer reply
        computer_move = ai.choose_move(game.board)
        if computer_move is not None:
            game.apply_move(computer_move, Mark.COMPUTER)
            if not game.detect_outcome().is_terminal:
                game.advance_turn()
        app.logger.debug("Player %s, computer %s", index, computer_move)

        return game_payload(computer_move=computer_move)

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
