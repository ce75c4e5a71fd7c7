"""SQLModel implementation of the debt repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import select

from ...models.debt import Debt
from ..database import SessionFactory


class SQLModelDebtRepository:
    """SQLModel-based debt repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, debt_id: int, *, user_id: int) -> Optional[Debt]:
        """Retrieve a debt by ID."""
        with self.session_factory() as session:
            return session.exec(
                select(Debt).where(Debt.id == debt_id, Debt.user_id == user_id)
            ).first()

    def list_all(self, *, user_id: int) -> list[Debt]:
        """List all debts in entry order."""
        with self.session_factory() as session:
            statement = (
                select(Debt)
                .where(Debt.user_id == user_id)
                .order_by(Debt.created_at, Debt.id)  # type: ignore[arg-type]
            )
            return list(session.exec(statement).all())

    def create(self, debt: Debt, *, user_id: int) -> Debt:
        """Create a new debt."""
        with self.session_factory() as session:
            debt.user_id = user_id
            session.add(debt)
            session.commit()
            session.refresh(debt)
            return debt

    def update(self, debt: Debt, *, user_id: int) -> Debt:
        """Update an existing debt."""
        with self.session_factory() as session:
            if debt.id is None:
                raise ValueError("Cannot update a debt that has not been saved")
            existing = session.exec(
                select(Debt).where(Debt.id == debt.id, Debt.user_id == user_id)
            ).first()
            if existing is None:
                raise ValueError("Debt not found")
            existing.name = debt.name
            existing.balance = debt.balance
            existing.minimum_payment = debt.minimum_payment
            existing.apr = debt.apr
            existing.updated_at = datetime.now(timezone.utc)
            session.add(existing)
            session.commit()
            session.refresh(existing)
            return existing

    def delete(self, debt_id: int, *, user_id: int) -> bool:
        """Delete a debt by ID."""
        with self.session_factory() as session:
            debt = session.exec(
                select(Debt).where(Debt.id == debt_id, Debt.user_id == user_id)
            ).first()
            if debt is None:
                return False
            session.delete(debt)
            session.commit()
            return True

    def get_total_debt(self, *, user_id: int) -> float:
        """Calculate total outstanding debt."""
        with self.session_factory() as session:
            debts = session.exec(select(Debt).where(Debt.user_id == user_id)).all()
            return sum(debt.balance for debt in debts)
