"""Repository protocols used by the service layer."""

from .debt import DebtRepository
from .settings import SettingsRepository

__all__ = ["DebtRepository", "SettingsRepository"]
