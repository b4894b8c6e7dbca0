# frontend/app.py

import logging

from flask import Flask

from frontend.api import EXTENSION_KEY, api_blueprint
from sweeper.config import load_config


def create_app(config=None):
    """
    Build the Flask app serving the JSON API under /api.
    The game configuration is handed in explicitly; the bundled config.yaml is used otherwise.
    """
    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = {
        "config": config if config is not None else load_config(),
        "game": None,
    }
    app.register_blueprint(api_blueprint, url_prefix="/api")
    return app


def main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="Path to a game config YAML file")
    parser.add_argument("--port", type=int, default=None, help="Port to run the server on")
    parser.add_argument("--host", type=str, default=None, help="Host IP")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    host = args.host or config.host
    port = args.port or config.port
    app = create_app(config)

    print(f"Running on http://{host}:{port}/")
    app.run(debug=args.debug, host=host, port=port)


if __name__ == "__main__":
    main()
