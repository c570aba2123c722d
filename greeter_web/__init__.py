"""Greeter web application factory."""
from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from .config import get_config
from .errors import register_error_handlers
from .greetings import GREETINGS


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application."""
    _load_environment()

    config_class = get_config(config_name)
    config_obj = config_class()

    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_obj)

    config_obj.init_app(app)

    _register_blueprints(app)
    register_error_handlers(app)
    _configure_logging(app)
    _register_shellcontext(app)

    return app


def _load_environment() -> None:
    """Load environment variables from a local .env if present."""
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path, override=False)


def _register_blueprints(app: Flask) -> None:
    from .routes import hello_bp
    from .greeting_routes import greeting_bp

    app.register_blueprint(hello_bp)
    app.register_blueprint(greeting_bp)


def _configure_logging(app: Flask) -> None:
    log_level = app.config.get("LOG_LEVEL", "INFO")
    app.logger.setLevel(log_level)
    # Records already printed by Flask's own handler stay off the root handler.
    app.logger.propagate = not app.logger.handlers
    logging.basicConfig(level=log_level)


def _register_shellcontext(app: Flask) -> None:
    @app.shell_context_processor
    def shell_context():  # type: ignore
        return {"GREETINGS": GREETINGS}
