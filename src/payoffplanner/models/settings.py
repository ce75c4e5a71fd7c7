"""Per-user payoff settings."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class UserSettings(SQLModel, table=True):
    """Extra monthly payment a user budgets beyond all minimums."""

    __tablename__: ClassVar[str] = "user_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, unique=True, index=True)
    extra_payment: float = Field(default=0.0, nullable=False)
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
