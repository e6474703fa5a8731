from __future__ import annotations

from flask import Flask

from figwind.config import FigwindConfig


def create_app(config: FigwindConfig | None = None, settings: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(settings or {})
    app.extensions["figwind_config"] = config or FigwindConfig()

    from figwind.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
