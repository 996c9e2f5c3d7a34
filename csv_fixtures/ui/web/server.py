"""
Web server — Flask app factory.

Exposes the generator and splitter over a small JSON API (see
``routes_csv``).  Settings are loaded once when the app is created.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from csv_fixtures.core.config.loader import load_settings
from csv_fixtures.core.models.settings import Settings

logger = logging.getLogger(__name__)


def create_app(
    project_root: Path | None = None,
    config_path: Path | None = None,
    settings: Settings | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        project_root: Directory relative output paths resolve against.
        config_path: Path to csvfixtures.yml (default: search upward).
        settings: Pre-built settings; skips loading from disk.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    root = project_root or Path.cwd()
    if settings is None:
        settings = load_settings(config_path, base_dir=root)

    app.config["SETTINGS"] = settings
    app.config["MAX_CONTENT_LENGTH"] = 50 * 1024 * 1024  # 50 MB upload limit

    from csv_fixtures.ui.web.routes_csv import csv_bp

    app.register_blueprint(csv_bp, url_prefix="/api")

    logger.info("Web app created (output=%s)", settings.output_path)
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting web server on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
