"""Service module exports."""

from . import auth, charts, formatters, payoff, planner

__all__ = [
    "auth",
    "charts",
    "formatters",
    "payoff",
    "planner",
]
