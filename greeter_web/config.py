"""Application configuration helpers."""
from __future__ import annotations

import os
from typing import Type

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class BaseConfig:
    """Base configuration shared across environments."""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @staticmethod
    def init_app(app) -> None:
        """Hook for app-specific initialization."""
        # Exact path matching: "//hello" must not be folded into "/hello".
        app.url_map.merge_slashes = False
        # .env is loaded after this module is imported.
        app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", app.config["LOG_LEVEL"])


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class TestingConfig(BaseConfig):
    TESTING = True


class ProductionConfig(BaseConfig):
    DEBUG = False


CONFIG_MAP: dict[str, Type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(name: str | None = None) -> Type[BaseConfig]:
    """Return the config class associated with the supplied name."""
    if not name:
        name = os.getenv("GREETER_CONFIG", "development")
    return CONFIG_MAP.get(name, DevelopmentConfig)
