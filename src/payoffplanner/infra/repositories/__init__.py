"""Concrete repository implementations using SQLModel."""

from .debt import SQLModelDebtRepository
from .settings import SQLModelSettingsRepository

__all__ = [
    "SQLModelDebtRepository",
    "SQLModelSettingsRepository",
]
