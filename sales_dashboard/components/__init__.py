"""
Components module for reusable UI elements.

Provides KPI cards, ranked bars, the date filter and styling for the dashboard.
"""

from sales_dashboard.components.date_filter import (
    render_date_filter,
    render_period_banner,
)
from sales_dashboard.components.kpi_cards import build_kpi_cards, render_kpi_cards
from sales_dashboard.components.ranked_bars import render_ranked_bars
from sales_dashboard.components.styles import apply_custom_css, apply_page_config

__all__ = [
    "apply_page_config",
    "apply_custom_css",
    "build_kpi_cards",
    "render_kpi_cards",
    "render_ranked_bars",
    "render_date_filter",
    "render_period_banner",
]
