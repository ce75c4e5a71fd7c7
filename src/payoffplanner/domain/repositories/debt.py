"""Debt repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.debt import Debt


class DebtRepository(Protocol):
    """Repository for managing a user's debt records."""

    def get_by_id(self, debt_id: int, *, user_id: int) -> Optional[Debt]:
        """Retrieve a debt by ID."""
        ...

    def list_all(self, *, user_id: int) -> list[Debt]:
        """List all debts in entry order."""
        ...

    def create(self, debt: Debt, *, user_id: int) -> Debt:
        """Create a new debt."""
        ...

    def update(self, debt: Debt, *, user_id: int) -> Debt:
        """Update an existing debt."""
        ...

    def delete(self, debt_id: int, *, user_id: int) -> bool:
        """Delete a debt by ID, returning whether a row was removed."""
        ...

    def get_total_debt(self, *, user_id: int) -> float:
        """Calculate total outstanding debt."""
        ...
