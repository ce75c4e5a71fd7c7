"""Blueprint exports."""

from . import auth, debts, strategy

__all__ = [
    "auth",
    "debts",
    "strategy",
]
