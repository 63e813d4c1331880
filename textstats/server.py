"""HTTP endpoint that serves the analysis of a text file."""

from __future__ import annotations

import argparse
from pathlib import Path

from flask import Flask, jsonify

from .chunking import analyzer

DEFAULT_FILE = "Test.txt"
DEFAULT_PORT = 8080


def create_app(filepath: str | Path = DEFAULT_FILE) -> Flask:
    """Build an app whose ``/getData`` route returns the analysis of ``filepath``."""
    app = Flask(__name__)

    @app.get("/getData")
    def get_data():
        try:
            result = analyzer(filepath)
        except OSError:
            return jsonify({"error": "Failed to read file"}), 500
        return jsonify(result), 200

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the analysis server."""
    parser = argparse.ArgumentParser(description="Serve text statistics over HTTP.")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE, help="text file to analyse")
    parser.add_argument("--host", default="0.0.0.0", help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    create_app(args.file).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())