"""Tests for payoff chart rendering."""

from __future__ import annotations

from matplotlib.figure import Figure

from payoffplanner.services.charts import (
    balance_timeline_chart,
    comparison_chart,
    figure_to_png,
    total_balance_series,
)
from payoffplanner.services.payoff import compare_strategies, snowball
from tests.conftest import make_debt

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _debts():
    return [
        make_debt("1", "Card", balance=1000.0, minimum_payment=100.0, apr=0.0),
        make_debt("2", "Card", balance=300.0, minimum_payment=100.0, apr=0.0),
    ]


def test_total_balance_series_sums_remaining_balances():
    strategy = snowball(_debts(), 0.0)

    totals = total_balance_series(strategy)

    assert len(totals) == strategy.months_to_payoff
    # Month 1: 200 paid plus nothing extra.
    assert totals[0] == 1100.0
    assert totals[-1] == 0.0


def test_timeline_chart_keeps_debts_with_same_name_apart():
    figure = balance_timeline_chart(snowball(_debts(), 0.0))

    assert isinstance(figure, Figure)
    labels = [line.get_label() for line in figure.axes[0].get_lines()]
    assert labels == ["Card", "Card", "Total"]
    assert figure_to_png(figure).startswith(PNG_MAGIC)


def test_comparison_chart_renders_png():
    figure = comparison_chart(compare_strategies(_debts(), 50.0))

    labels = [line.get_label() for line in figure.axes[0].get_lines()]
    assert labels[0].startswith("Snowball")
    assert labels[1].startswith("Avalanche")
    assert figure_to_png(figure).startswith(PNG_MAGIC)


def test_empty_inputs_render_placeholder():
    empty = compare_strategies([], 0.0)

    assert figure_to_png(balance_timeline_chart(empty.snowball)).startswith(PNG_MAGIC)
    assert figure_to_png(comparison_chart(empty)).startswith(PNG_MAGIC)
