"""Registration and login routes."""

from __future__ import annotations

from flask import jsonify, request, session

from ...extensions import get_session_factory
from ...services import auth as auth_service
from ..common import SESSION_USER_KEY, current_user_id, json_error, login_required
from . import bp


def _credentials() -> tuple[str, str]:
    payload = request.get_json(silent=True) or request.form
    return str(payload.get("username", "") or ""), str(payload.get("password", "") or "")


def _user_payload(user) -> dict:
    return {"id": user.id, "username": user.username}


@bp.post("/register")
def register():
    """Create an account and start a session for it."""

    username, password = _credentials()
    try:
        user = auth_service.create_user(
            username=username, password=password, session_factory=get_session_factory()
        )
    except ValueError as exc:
        return json_error("invalid_registration", str(exc), 400)

    session.clear()
    session[SESSION_USER_KEY] = user.id
    return jsonify(_user_payload(user)), 201


@bp.post("/login")
def login():
    """Authenticate and start a session."""

    username, password = _credentials()
    user = auth_service.authenticate(
        username=username, password=password, session_factory=get_session_factory()
    )
    if user is None:
        return json_error("invalid_credentials", "Invalid username or password.", 401)

    session.clear()
    session[SESSION_USER_KEY] = user.id
    return jsonify(_user_payload(user))


@bp.post("/logout")
def logout():
    session.clear()
    return "", 204


@bp.get("/me")
@login_required
def me():
    """Return the logged-in user."""

    user = auth_service.get_user(current_user_id(), get_session_factory())
    if user is None:
        session.clear()
        return json_error("unauthorized", "Log in to continue.", 401)
    return jsonify(_user_payload(user))
