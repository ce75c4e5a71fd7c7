"""SQLModel table exports."""

from .debt import Debt
from .settings import UserSettings
from .user import User

__all__ = [
    "Debt",
    "User",
    "UserSettings",
]
