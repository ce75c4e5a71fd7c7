"""Payoff strategy blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("strategy", __name__, url_prefix="/strategy")

from . import routes  # noqa: E402,F401

__all__ = ["bp"]
