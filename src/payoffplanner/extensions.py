"""Database and repository wiring for the Flask app."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelDebtRepository, SQLModelSettingsRepository

EXTENSION_KEY = "payoffplanner"


def init_db(app: Flask) -> None:
    """Create the engine, schema and repositories from the app configuration."""

    config: BaseConfig = app.config["PAYOFFPLANNER_CONFIG"]
    _engine, session_factory = bootstrap_database(config)
    app.extensions[EXTENSION_KEY] = {
        "session_factory": session_factory,
        "debt_repo": SQLModelDebtRepository(session_factory),
        "settings_repo": SQLModelSettingsRepository(
            session_factory, default_extra_payment=config.DEFAULT_EXTRA_PAYMENT
        ),
    }


def _state() -> dict:
    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - exercised only on misconfigured apps
        raise RuntimeError("Database engine not initialized")
    return state


def get_session_factory() -> SessionFactory:
    return _state()["session_factory"]


def get_debt_repository() -> SQLModelDebtRepository:
    return _state()["debt_repo"]


def get_settings_repository() -> SQLModelSettingsRepository:
    return _state()["settings_repo"]
