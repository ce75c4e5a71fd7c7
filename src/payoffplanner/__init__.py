"""PayoffPlanner application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestConfig
from .logging_config import get_logger, setup_logging
from .services.payoff import InvalidDebtError

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths in registration order."""

    yield "payoffplanner.blueprints.auth"
    yield "payoffplanner.blueprints.debts"
    yield "payoffplanner.blueprints.strategy"


def create_app(config_name: str | None = None, *, config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = config or _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["PAYOFFPLANNER_CONFIG"] = config_obj

    setup_logging(config_obj)
    _register_blueprints(app)
    _register_error_handlers(app)

    # Imported lazily so model classes can be used without initializing an engine.
    from .extensions import init_db

    init_db(app)
    _cli.init_app(app)

    get_logger(__name__).info(
        "Application created", extra={"config": type(config_obj).__name__}
    )
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


def _register_error_handlers(app: Flask) -> None:
    from .blueprints.common import json_error

    @app.errorhandler(InvalidDebtError)
    def _invalid_debt(exc: InvalidDebtError):
        return json_error("invalid_debt", str(exc), 422, field=exc.field, debt_name=exc.debt_name)


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
