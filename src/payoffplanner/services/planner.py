"""Payoff plan assembly for a stored user's debts."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Iterable, Sequence

from ..domain.repositories import DebtRepository, SettingsRepository
from ..logging_config import get_logger
from ..models.debt import Debt
from .formatters import format_currency
from .payoff import (
    DebtAccount,
    MonthlyPayment,
    PayoffComparison,
    PayoffStrategy,
    compare_strategies,
)

logger = get_logger(__name__)

HIGH_APR_THRESHOLD = 15.0


@dataclass(slots=True)
class DebtTotals:
    """Headline numbers for the dashboard.

    ``estimated_months`` is a rough ``ceil(total_debt / monthly_payment)``
    that ignores interest; use a strategy result for the real payoff time.
    """

    total_debt: float
    total_minimum: float
    monthly_payment: float
    weighted_apr: float
    estimated_months: int = 0
    high_apr_debts: list[DebtAccount] = field(default_factory=list)


@dataclass(slots=True)
class StrategySavings:
    """How the two strategies differ and which one comes out ahead."""

    recommended: str  # "avalanche", "snowball" or "same"
    interest_difference: float
    months_difference: int
    message: str


@dataclass(slots=True)
class PayoffPlan:
    comparison: PayoffComparison
    totals: DebtTotals
    savings: StrategySavings


def debt_accounts_from_models(debts: Iterable[Debt]) -> list[DebtAccount]:
    """Convert stored debts into simulation inputs."""

    return [
        DebtAccount(
            id=str(debt.id) if debt.id is not None else "",
            name=debt.name,
            balance=float(debt.balance),
            minimum_payment=float(debt.minimum_payment),
            apr=float(debt.apr),
        )
        for debt in debts
    ]


def portfolio_totals(debts: Sequence[DebtAccount], extra_payment: float) -> DebtTotals:
    """Sum balances and minimums and compute a balance-weighted APR."""

    total_debt = sum(debt.balance for debt in debts)
    total_minimum = sum(debt.minimum_payment for debt in debts)
    weighted_apr = (
        sum(debt.balance * debt.apr for debt in debts) / total_debt if total_debt else 0.0
    )
    monthly_payment = total_minimum + extra_payment
    return DebtTotals(
        total_debt=total_debt,
        total_minimum=total_minimum,
        monthly_payment=monthly_payment,
        weighted_apr=weighted_apr,
        estimated_months=math.ceil(total_debt / monthly_payment) if monthly_payment > 0 else 0,
        high_apr_debts=high_apr_debts(debts),
    )


def high_apr_debts(
    debts: Sequence[DebtAccount], threshold: float = HIGH_APR_THRESHOLD
) -> list[DebtAccount]:
    """Debts whose APR is strictly above *threshold*, in input order."""

    return [debt for debt in debts if debt.apr > threshold]


def filter_payments(payments: Iterable[MonthlyPayment], search: str | None) -> list[MonthlyPayment]:
    """Ledger rows whose debt name contains *search*, ignoring case."""

    if not search:
        return list(payments)
    needle = search.lower()
    return [payment for payment in payments if needle in payment.debt_name.lower()]


def compare_savings(comparison: PayoffComparison) -> StrategySavings:
    """Compare interest and payoff time between snowball and avalanche."""

    interest_diff = (
        comparison.snowball.total_interest_paid - comparison.avalanche.total_interest_paid
    )
    months_diff = comparison.snowball.months_to_payoff - comparison.avalanche.months_to_payoff

    if abs(interest_diff) < 1 and months_diff == 0:
        return StrategySavings(
            recommended="same",
            interest_difference=round(interest_diff, 2),
            months_difference=months_diff,
            message="Both methods cost about the same",
        )

    if interest_diff > 0:
        recommended = "avalanche"
        faster = months_diff if months_diff > 0 else 0
    else:
        recommended = "snowball"
        faster = -months_diff if months_diff < 0 else 0

    message = f"Saves {format_currency(abs(interest_diff))} in interest"
    if faster:
        message += f" and is {faster} months faster"
    return StrategySavings(
        recommended=recommended,
        interest_difference=round(interest_diff, 2),
        months_difference=months_diff,
        message=message,
    )


def payoff_date(months: int, today: date | None = None) -> date:
    """Return the first day of the month *months* after *today*."""

    start = today or date.today()
    index = start.year * 12 + (start.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def total_paid(strategy: PayoffStrategy, debts: Sequence[DebtAccount]) -> float:
    """Original principal plus all interest paid under *strategy*."""

    return round(sum(debt.balance for debt in debts) + strategy.total_interest_paid, 2)


def build_plan(
    *,
    user_id: int,
    debt_repo: DebtRepository,
    settings_repo: SettingsRepository,
) -> PayoffPlan:
    """Load a user's debts and extra payment and simulate both strategies."""

    debts = debt_accounts_from_models(debt_repo.list_all(user_id=user_id))
    extra_payment = settings_repo.get_extra_payment(user_id=user_id)
    comparison = compare_strategies(debts, extra_payment)

    for strategy in (comparison.snowball, comparison.avalanche):
        if not strategy.converged:
            logger.warning(
                "Strategy did not pay off all debts within the simulation window",
                extra={"user_id": user_id, "method": strategy.method},
            )

    plan = PayoffPlan(
        comparison=comparison,
        totals=portfolio_totals(debts, extra_payment),
        savings=compare_savings(comparison),
    )
    logger.info(
        "Payoff plan built",
        extra={
            "user_id": user_id,
            "debt_count": len(debts),
            "extra_payment": extra_payment,
            "recommended": plan.savings.recommended,
        },
    )
    return plan


def strategy_to_dict(
    strategy: PayoffStrategy,
    debts: Sequence[DebtAccount],
    *,
    today: date | None = None,
    search: str | None = None,
) -> dict:
    """JSON-friendly view of a single strategy result.

    *search* narrows ``monthly_payments`` by debt name; totals always cover
    the full schedule.
    """

    data = asdict(strategy)
    if search:
        data["monthly_payments"] = [
            asdict(payment) for payment in filter_payments(strategy.monthly_payments, search)
        ]
    data["total_paid"] = total_paid(strategy, debts)
    data["payoff_date"] = (
        payoff_date(strategy.months_to_payoff, today).isoformat() if strategy.months_to_payoff else None
    )
    return data


def plan_to_dict(plan: PayoffPlan, *, today: date | None = None) -> dict:
    """JSON-friendly view of a full plan."""

    comparison = plan.comparison
    return {
        "extra_payment": comparison.extra_payment,
        "debts": [asdict(debt) for debt in comparison.debts],
        "totals": asdict(plan.totals),
        "savings": asdict(plan.savings),
        "snowball": strategy_to_dict(comparison.snowball, comparison.debts, today=today),
        "avalanche": strategy_to_dict(comparison.avalanche, comparison.debts, today=today),
    }


__all__ = [
    "DebtTotals",
    "HIGH_APR_THRESHOLD",
    "PayoffPlan",
    "StrategySavings",
    "build_plan",
    "compare_savings",
    "debt_accounts_from_models",
    "filter_payments",
    "high_apr_debts",
    "payoff_date",
    "plan_to_dict",
    "portfolio_totals",
    "strategy_to_dict",
    "total_paid",
]
