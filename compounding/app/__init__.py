"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from compounding.app.api.routes import api_bp
from compounding.config import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig only applies once per process
    logging.getLogger("compounding").setLevel(level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["DEBUG"] = settings.DEBUG

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).info("%s ready", settings.SERVICE_NAME)
    return app
