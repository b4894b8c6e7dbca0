# frontend/api.py

import logging

from flask import Blueprint, current_app, jsonify, request

from sweeper.game import ACTIONS, GameSession

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

EXTENSION_KEY = "sweeper"


def _store() -> dict:
    return current_app.extensions[EXTENSION_KEY]


def _current_game():
    return _store().get("game")


def _no_game():
    return jsonify({"error": "No game in progress, POST /api/new_game first"}), 409


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    data = _json_body()
    config = _store()["config"]

    difficulty = data.get("difficulty")
    try:
        if difficulty is not None:
            preset = config.preset(str(difficulty))
            width, height, num_mines = preset.width, preset.height, preset.num_mines
        else:
            fields = ("width", "height", "num_mines")
            if all(name in data for name in fields):
                params = data
            else:
                params = config.preset(config.default_difficulty).to_dict()
                params.update({name: data[name] for name in fields if name in data})
            width = int(params["width"])
            height = int(params["height"])
            num_mines = int(params["num_mines"])

        game = GameSession(
            width=width,
            height=height,
            num_mines=num_mines,
            seed=data.get("seed"),
            running_bomb=bool(data.get("running_bomb", False)),
        )
    except (KeyError, ValueError, TypeError) as e:
        message = e.args[0] if e.args else str(e)
        return jsonify({"error": message}), 400

    _store()["game"] = game
    logger.info("New game %dx%d with %d mines (running_bomb=%s)", width, height, num_mines, game.running_bomb)
    return jsonify(game.get_state())


@api_blueprint.route("/step", methods=["POST"])
def step():
    game = _current_game()
    if game is None:
        return _no_game()

    data = _json_body()
    action = data.get("action")
    x = data.get("x")
    y = data.get("y")

    if action not in ACTIONS or not isinstance(x, int) or not isinstance(y, int):
        return jsonify({"error": "Invalid input"}), 400

    result = game.step(action, x, y)
    return jsonify(result)


@api_blueprint.route("/tick", methods=["POST"])
def tick():
    game = _current_game()
    if game is None:
        return _no_game()
    return jsonify(game.tick())


@api_blueprint.route("/state", methods=["GET"])
def get_state():
    game = _current_game()
    if game is None:
        return _no_game()
    return jsonify(game.get_state())


@api_blueprint.route("/difficulties", methods=["GET"])
def difficulties():
    config = _store()["config"]
    return jsonify({
        "default": config.default_difficulty,
        "presets": {name: preset.to_dict() for name, preset in config.presets.items()},
        "tick_interval": config.tick_interval,
    })
