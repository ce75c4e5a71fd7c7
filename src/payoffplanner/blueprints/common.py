"""Helpers shared by the JSON blueprints."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from flask import jsonify, session

SESSION_USER_KEY = "user_id"


def json_error(code: str, message: str, status: int, **details: Any):
    payload: dict[str, Any] = {"error": code, "message": message}
    payload.update(details)
    return jsonify(payload), status


def current_user_id() -> int | None:
    value = session.get(SESSION_USER_KEY)
    return int(value) if value is not None else None


def login_required(view: Callable) -> Callable:
    """Reject requests that have no authenticated user in the session."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user_id() is None:
            return json_error("unauthorized", "Log in to continue.", 401)
        return view(*args, **kwargs)

    return wrapper
