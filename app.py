"""Flask application factory for bssidscan."""

from __future__ import annotations

from typing import Any, Optional

from flask import Flask

from routes.bssid import bssid_bp
from utils.bssid import pattern_set_from_settings
from utils.logging import configure_logging, get_logger

logger = get_logger('bssidscan.app')


def create_app(settings: Optional[Any] = None) -> Flask:
    """
    Create the Flask application.

    Args:
        settings: Settings object with dict-style get(). Defaults to the
            Dynaconf settings loaded from settings.toml.

    Returns:
        Configured Flask app.
    """
    if settings is None:
        from config import settings

    configure_logging(settings.get('LOG_LEVEL', 'INFO'))

    app = Flask(__name__)
    # Compiled once per app; a bad pattern aborts startup here
    app.extensions['bssid_patterns'] = pattern_set_from_settings(settings)
    app.register_blueprint(bssid_bp)

    logger.info("bssidscan application created")
    return app


if __name__ == '__main__':
    create_app().run(host='127.0.0.1', port=5000)
