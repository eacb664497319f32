"""
Number formatting helpers for KPI cards, bars and chart axes.
"""

from typing import Optional

MISSING_VALUE = "-"


def format_currency(value: Optional[float]) -> str:
    """Format an amount as whole pesos, e.g. 1234.5 -> "$1,235"."""
    if value is None:
        return MISSING_VALUE
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_compact(value: Optional[float]) -> str:
    """
    Format an amount for chart axes.

    Millions keep two decimals ("$1.25M"), anything smaller is shown in
    thousands ("$450K").
    """
    if value is None:
        return MISSING_VALUE
    if value >= 1_000_000:
        return f"${value / 1_000_000:.2f}M"
    return f"${value / 1000:.0f}K"


def format_percent(ratio: Optional[float]) -> str:
    """Format a ratio as a percentage with one decimal, e.g. 0.256 -> "25.6%"."""
    if ratio is None:
        return MISSING_VALUE
    return f"{ratio * 100:.1f}%"


def format_count(value: Optional[int]) -> str:
    """Format a count with thousands separators."""
    if value is None:
        return MISSING_VALUE
    return f"{value:,}"
