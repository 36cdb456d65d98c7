#!/usr/bin/env python3
"""
csv2json - HTTP conversion service
==================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.  For one-off
conversions use the command line instead (cli.py / `csv2json`).
"""

from flask import Flask
from werkzeug.exceptions import HTTPException

import config
from api import api_bp
from api.errors import json_http_error
from converter.logs import configure_logging


def create_app() -> Flask:
    """Flask application factory."""

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.MAX_UPLOAD_BYTES

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    # ── Error handlers ──────────────────────────────────────────────
    app.register_error_handler(HTTPException, json_http_error)

    return app


def main():
    configure_logging(config.LOG_VERBOSITY, config.LOG_JSON)

    print("=" * 56)
    print(f"  csv2json {config.VERSION} - conversion service")
    print("=" * 56)
    print(f"\n  POST http://{config.HOST}:{config.PORT}/api/v1/convert")
    print("=" * 56)

    app = create_app()
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
