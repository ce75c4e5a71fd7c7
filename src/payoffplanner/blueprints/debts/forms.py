"""Debt form definitions and validation helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping

MAX_NAME_LENGTH = 80


def _parse_amount(
    errors: Dict[str, List[str]],
    name: str,
    value: Any,
    *,
    minimum: Decimal,
    maximum: Decimal | None = None,
) -> Decimal | None:
    """Parse and range-check numeric input, recording errors under *name*."""

    if value is None or value == "":
        errors.setdefault(name, []).append("This field is required.")
        return None

    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, TypeError, ValueError):
            errors.setdefault(name, []).append("Enter a valid number.")
            return None

    # Values like 1e400 are finite as Decimal but overflow to inf as float.
    if not value.is_finite() or not math.isfinite(float(value)):
        errors.setdefault(name, []).append("Enter a valid number.")
        return None
    if value < minimum:
        errors.setdefault(name, []).append("Amount must be at least zero.")
    elif maximum is not None and value > maximum:
        errors.setdefault(name, []).append(f"Amount must be at most {maximum}.")
    return value


@dataclass(slots=True)
class DebtForm:
    """Represents debt inputs and associated validation errors."""

    name: str = ""
    balance: Decimal | str | None = None
    minimum_payment: Decimal | str | None = None
    apr: Decimal | str | None = None
    errors: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DebtForm":
        return cls(
            name=str(data.get("name", "") or ""),
            balance=data.get("balance"),
            minimum_payment=data.get("minimum_payment"),
            apr=data.get("apr"),
        )

    def validate(self) -> bool:
        """Validate debt inputs returning True when all values are acceptable."""

        self.errors.clear()

        if not self.name or not self.name.strip():
            self.errors.setdefault("name", []).append("Enter the creditor or account name.")
        else:
            self.name = self.name.strip()
            if len(self.name) > MAX_NAME_LENGTH:
                self.errors.setdefault("name", []).append(
                    f"Name must be {MAX_NAME_LENGTH} characters or fewer."
                )

        self.balance = _parse_amount(self.errors, "balance", self.balance, minimum=Decimal("0"))
        self.minimum_payment = _parse_amount(
            self.errors, "minimum_payment", self.minimum_payment, minimum=Decimal("0")
        )
        self.apr = _parse_amount(
            self.errors, "apr", self.apr, minimum=Decimal("0"), maximum=Decimal("100")
        )

        return not self.errors

    def cleaned(self) -> dict[str, Any]:
        """Validated values as plain floats, ready for the model."""

        return {
            "name": self.name,
            "balance": float(self.balance),
            "minimum_payment": float(self.minimum_payment),
            "apr": float(self.apr),
        }


@dataclass(slots=True)
class ExtraPaymentForm:
    """Validates the monthly extra payment setting."""

    extra_payment: Decimal | str | None = None
    errors: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def validate(self) -> bool:
        self.errors.clear()
        self.extra_payment = _parse_amount(
            self.errors, "extra_payment", self.extra_payment, minimum=Decimal("0")
        )
        return not self.errors
