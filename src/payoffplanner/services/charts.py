"""Chart helpers for payoff projections."""

from __future__ import annotations

from collections import defaultdict
from io import BytesIO

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
from matplotlib.figure import Figure

from .payoff import PayoffComparison, PayoffStrategy

_STRATEGY_COLORS = {"snowball": "#4F46E5", "avalanche": "#EF4444"}


def _balances_by_debt(strategy: PayoffStrategy) -> dict[str, list[float]]:
    """Remaining balance per debt for every simulated month (0 once paid off)."""

    months = strategy.months_to_payoff
    series: dict[str, list[float]] = defaultdict(lambda: [0.0] * months)
    for row in strategy.monthly_payments:
        # key by id so two debts sharing a name stay separate
        series[row.debt_id][row.month - 1] = row.remaining_balance
    return dict(series)


def total_balance_series(strategy: PayoffStrategy) -> list[float]:
    """Total remaining balance at the end of each month."""

    totals = [0.0] * strategy.months_to_payoff
    for row in strategy.monthly_payments:
        totals[row.month - 1] += row.remaining_balance
    return totals


def _empty_figure(message: str) -> Figure:
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.text(0.5, 0.5, message, ha="center", va="center", fontsize=12, color="#999")
    ax.axis("off")
    return fig


def _format_axes(ax, title: str) -> None:
    ax.grid(True, linestyle="--", alpha=0.3)
    ax.set_axisbelow(True)
    ax.set_title(title, fontsize=14, fontweight="bold", pad=15)
    ax.set_xlabel("Month", fontsize=11)
    ax.set_ylabel("Remaining balance ($)", fontsize=11)
    ax.yaxis.set_major_formatter(mticker.FuncFormatter(lambda x, p: f"${x:,.0f}"))
    ax.legend(loc="upper right", framealpha=0.9)


def balance_timeline_chart(strategy: PayoffStrategy) -> Figure:
    """Per-debt remaining balance by month, with the total overlaid."""

    if not strategy.monthly_payments:
        return _empty_figure("No debts yet\nAdd a debt to see your payoff timeline")

    names = {row.debt_id: row.debt_name for row in strategy.monthly_payments}
    x_vals = list(range(1, strategy.months_to_payoff + 1))

    fig, ax = plt.subplots(figsize=(10, 6))
    for debt_id, balances in _balances_by_debt(strategy).items():
        ax.plot(x_vals, balances, linewidth=1.8, label=names[debt_id])
    ax.plot(
        x_vals,
        total_balance_series(strategy),
        color="#111827",
        linewidth=2.5,
        linestyle="--",
        label="Total",
    )
    _format_axes(ax, f"{strategy.method.title()} payoff timeline")
    fig.tight_layout()
    return fig


def comparison_chart(comparison: PayoffComparison) -> Figure:
    """Total remaining balance by month for both strategies."""

    strategies = (comparison.snowball, comparison.avalanche)
    if not any(strategy.monthly_payments for strategy in strategies):
        return _empty_figure("No debts yet\nAdd a debt to compare strategies")

    fig, ax = plt.subplots(figsize=(10, 6))
    for strategy in strategies:
        totals = total_balance_series(strategy)
        ax.plot(
            range(1, len(totals) + 1),
            totals,
            color=_STRATEGY_COLORS.get(strategy.method),
            linewidth=2.5,
            label=f"{strategy.method.title()} ({strategy.months_to_payoff} months)",
        )
    _format_axes(ax, "Snowball vs avalanche")
    fig.tight_layout()
    return fig


def figure_to_png(figure: Figure) -> bytes:
    """Render *figure* to PNG bytes and release it."""

    buffer = BytesIO()
    try:
        figure.savefig(buffer, format="png", bbox_inches="tight", dpi=100)
    finally:
        plt.close(figure)
    return buffer.getvalue()


__all__ = [
    "balance_timeline_chart",
    "comparison_chart",
    "figure_to_png",
    "total_balance_series",
]
