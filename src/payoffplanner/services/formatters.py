"""Display helpers for money, rates and durations."""

from __future__ import annotations


def format_currency(amount: float | None) -> str:
    """Format a number as US currency with 2 decimal places."""

    value = float(amount or 0.0)
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def format_percent(rate: float | None) -> str:
    """Format a number as a percentage with 2 decimal places."""

    return f"{float(rate or 0.0):.2f}%"


def format_number(value: float | None, decimals: int = 2) -> str:
    """Format a number with thousand separators and fixed decimal places."""

    return f"{float(value or 0.0):,.{decimals}f}"


def format_duration(months: int) -> str:
    """Render a month count as "N years, M months"."""

    years, remainder = divmod(max(int(months), 0), 12)
    year_label = "year" if years == 1 else "years"
    month_label = "month" if remainder == 1 else "months"
    return f"{years} {year_label}, {remainder} {month_label}"


__all__ = ["format_currency", "format_duration", "format_number", "format_percent"]
