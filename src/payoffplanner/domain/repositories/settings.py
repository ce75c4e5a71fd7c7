"""Settings repository protocol."""

from __future__ import annotations

from typing import Protocol


class SettingsRepository(Protocol):
    """Repository for the per-user extra payment setting."""

    def get_extra_payment(self, *, user_id: int) -> float:
        """Return the stored extra payment, or the default when unset."""
        ...

    def set_extra_payment(self, amount: float, *, user_id: int) -> float:
        """Persist the extra payment for a user."""
        ...
