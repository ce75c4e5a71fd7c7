"""Debt payoff simulation (snowball and avalanche).

The simulator walks a list of debts month by month:

- every active debt first receives its minimum payment (capped at what is
  owed including this month's interest);
- the caller's extra payment, plus any minimum freed by a debt paid off in
  the same month, then goes to the first unpaid debt in the strategy order.

The strategy order is fixed once before the first month and never
recomputed. Interest accumulates unrounded and the total is rounded to cents
only once, after the last month.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Literal, Sequence

from ..logging_config import get_logger

logger = get_logger(__name__)

Strategy = Literal["snowball", "avalanche"]
STRATEGIES: tuple[str, ...] = ("snowball", "avalanche")
MAX_MONTHS = 600

_WHOLE = Decimal(1)
_CURRENCY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


class InvalidDebtError(ValueError):
    """Raised when a debt record fails validation before simulation."""

    def __init__(self, message: str, *, debt_name: str | None = None, field: str | None = None):
        super().__init__(message)
        self.debt_name = debt_name
        self.field = field


@dataclass(frozen=True, slots=True)
class DebtAccount:
    """Represents a liability input for payoff projections."""

    id: str
    name: str
    balance: float
    minimum_payment: float
    apr: float  # annual percentage rate, e.g. 18.0 for 18%


@dataclass(slots=True)
class _WorkingDebt:
    debt: DebtAccount
    current_balance: float
    paid_off: bool = False


@dataclass(slots=True)
class MonthlyPayment:
    """One ledger row: what a single debt received in a single month."""

    month: int
    debt_id: str
    debt_name: str
    payment: float
    principal: float
    interest: float
    remaining_balance: float


@dataclass(slots=True)
class DebtPaymentSummary:
    """Static per-debt label of the planned monthly payment."""

    debt_id: str
    debt_name: str
    monthly_payment: float


@dataclass(slots=True)
class PayoffStrategy:
    """Aggregate result of a simulation for one strategy."""

    method: str
    monthly_payments: list[MonthlyPayment] = field(default_factory=list)
    total_interest_paid: float = 0.0
    months_to_payoff: int = 0
    debt_payments: list[DebtPaymentSummary] = field(default_factory=list)
    converged: bool = True


@dataclass(slots=True)
class PayoffComparison:
    """Both strategies computed over the same debts and extra payment."""

    snowball: PayoffStrategy
    avalanche: PayoffStrategy
    debts: list[DebtAccount]
    extra_payment: float


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_debt(debt: DebtAccount) -> None:
    """Raise :class:`InvalidDebtError` when *debt* violates an input constraint."""

    name = debt.name.strip() if isinstance(debt.name, str) else ""
    label = name or "<unnamed>"

    if not isinstance(debt.id, str) or not debt.id:
        raise InvalidDebtError(f"Invalid debt ID for {label}", debt_name=name or None, field="id")
    if not name:
        raise InvalidDebtError("Debt name is required", field="name")
    if not _is_number(debt.balance) or not math.isfinite(debt.balance) or debt.balance < 0:
        raise InvalidDebtError(f"Invalid balance for {name}", debt_name=name, field="balance")
    if (
        not _is_number(debt.minimum_payment)
        or not math.isfinite(debt.minimum_payment)
        or debt.minimum_payment < 0
    ):
        raise InvalidDebtError(
            f"Invalid minimum payment for {name}", debt_name=name, field="minimum_payment"
        )
    if not _is_number(debt.apr) or not math.isfinite(debt.apr) or not 0 <= debt.apr <= 100:
        raise InvalidDebtError(f"Invalid APR for {name}", debt_name=name, field="apr")


def _monthly_interest(balance: float, apr: float) -> float:
    return balance * (apr / 100 / 12)


def _round_currency(amount: float) -> float:
    """Round to cents, half-up, on the value scaled to cents.

    Scaling happens in float arithmetic first, so ``1.005`` (stored as
    ``100.49999999999999`` cents) rounds down to ``1.0``.
    """

    cents = amount * 100
    if not math.isfinite(cents):
        return amount
    # Runaway balances can exceed the default 28-digit context.
    return float(Decimal(cents).quantize(_WHOLE, context=_CURRENCY_CONTEXT)) / 100


def _priority_order(debts: Sequence[DebtAccount], strategy: str) -> list[int]:
    """Return debt indexes in payoff priority order (stable for ties)."""

    indexes = range(len(debts))
    if strategy == "snowball":
        # Smallest balance first.
        return sorted(indexes, key=lambda i: debts[i].balance)
    # Highest APR first.
    return sorted(indexes, key=lambda i: debts[i].apr, reverse=True)


def simulate(
    debts: Sequence[DebtAccount],
    extra_payment: float,
    strategy: str,
    *,
    max_months: int = MAX_MONTHS,
) -> PayoffStrategy:
    """Project the month-by-month payoff of *debts* under *strategy*.

    ``extra_payment`` is added on top of all minimums every month and goes
    entirely to the first unpaid debt in strategy order. Raises
    :class:`InvalidDebtError` for bad debt data and ``ValueError`` for an
    unknown strategy or a negative/non-finite extra payment.
    """

    if strategy not in STRATEGIES:
        raise ValueError(f"Invalid debt payoff strategy: {strategy!r}")
    if not debts:
        return PayoffStrategy(method=strategy)

    for debt in debts:
        validate_debt(debt)
    if not _is_number(extra_payment) or not math.isfinite(extra_payment) or extra_payment < 0:
        raise ValueError("Extra payment must be a non-negative amount")

    order = _priority_order(debts, strategy)
    working = [_WorkingDebt(debt=debts[i], current_balance=debts[i].balance) for i in order]

    monthly_payments: list[MonthlyPayment] = []
    total_interest = 0.0
    month = 0

    while any(not item.paid_off for item in working) and month < max_months:
        month += 1
        pool = extra_payment
        # position in working -> index of this month's ledger row
        row_index: dict[int, int] = {}

        for position, item in enumerate(working):
            if item.paid_off:
                continue

            interest = _monthly_interest(item.current_balance, item.debt.apr)
            applied = min(item.debt.minimum_payment, item.current_balance + interest)
            principal = applied - interest

            item.current_balance -= principal
            total_interest += interest

            row_index[position] = len(monthly_payments)
            monthly_payments.append(
                MonthlyPayment(
                    month=month,
                    debt_id=item.debt.id,
                    debt_name=item.debt.name,
                    payment=applied,
                    principal=principal,
                    interest=interest,
                    remaining_balance=max(0.0, item.current_balance),
                )
            )

            if item.current_balance <= 0:
                item.paid_off = True
                pool += item.debt.minimum_payment

        if pool > 0:
            target = next(
                (position for position, item in enumerate(working) if not item.paid_off), None
            )
            if target is not None:
                item = working[target]
                extra = min(pool, item.current_balance)
                item.current_balance -= extra

                row = monthly_payments[row_index[target]]
                row.payment += extra
                row.principal += extra
                row.remaining_balance = max(0.0, item.current_balance)

                if item.current_balance <= 0:
                    item.paid_off = True

    converged = all(item.paid_off for item in working)
    if not converged:
        logger.warning(
            "Payoff simulation reached the month cap before all debts were paid",
            extra={
                "strategy": strategy,
                "months": month,
                "unpaid_debts": [item.debt.name for item in working if not item.paid_off],
            },
        )

    debt_payments = [
        DebtPaymentSummary(
            debt_id=item.debt.id,
            debt_name=item.debt.name,
            monthly_payment=item.debt.minimum_payment + (extra_payment if position == 0 else 0.0),
        )
        for position, item in enumerate(working)
    ]

    return PayoffStrategy(
        method=strategy,
        monthly_payments=monthly_payments,
        total_interest_paid=_round_currency(total_interest),
        months_to_payoff=month,
        debt_payments=debt_payments,
        converged=converged,
    )


def snowball(debts: Sequence[DebtAccount], extra_payment: float) -> PayoffStrategy:
    """Return payoff projection prioritizing smallest balances first."""
    return simulate(debts, extra_payment, "snowball")


def avalanche(debts: Sequence[DebtAccount], extra_payment: float) -> PayoffStrategy:
    """Return payoff projection prioritizing highest APR first."""
    return simulate(debts, extra_payment, "avalanche")


def compare_strategies(debts: Sequence[DebtAccount], extra_payment: float) -> PayoffComparison:
    """Run both strategies over the same input."""

    return PayoffComparison(
        snowball=snowball(debts, extra_payment),
        avalanche=avalanche(debts, extra_payment),
        debts=list(debts),
        extra_payment=extra_payment,
    )


__all__ = [
    "DebtAccount",
    "DebtPaymentSummary",
    "InvalidDebtError",
    "MAX_MONTHS",
    "MonthlyPayment",
    "PayoffComparison",
    "PayoffStrategy",
    "STRATEGIES",
    "Strategy",
    "avalanche",
    "compare_strategies",
    "simulate",
    "snowball",
    "validate_debt",
]
