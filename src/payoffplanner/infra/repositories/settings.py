"""Settings repository for the per-user extra payment."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import select

from ...models.settings import UserSettings
from ..database import SessionFactory


class SQLModelSettingsRepository:
    """SQLModel-based settings repository."""

    def __init__(self, session_factory: SessionFactory, *, default_extra_payment: float = 0.0):
        self.session_factory = session_factory
        self.default_extra_payment = default_extra_payment

    def get_extra_payment(self, *, user_id: int) -> float:
        with self.session_factory() as session:
            settings = session.exec(
                select(UserSettings).where(UserSettings.user_id == user_id)
            ).first()
            if settings is None:
                return self.default_extra_payment
            return settings.extra_payment

    def set_extra_payment(self, amount: float, *, user_id: int) -> float:
        if amount < 0:
            raise ValueError("Extra payment cannot be negative")
        with self.session_factory() as session:
            settings = session.exec(
                select(UserSettings).where(UserSettings.user_id == user_id)
            ).first()
            if settings:
                settings.extra_payment = amount
                settings.updated_at = datetime.now(timezone.utc)
            else:
                settings = UserSettings(user_id=user_id, extra_payment=amount)
            session.add(settings)
            session.commit()
            session.refresh(settings)
            return settings.extra_payment


__all__ = ["SQLModelSettingsRepository"]
