"""
KPI cards component for dashboard header metrics.

Provides functions for building and displaying the summary KPI row.
"""

from typing import List

import streamlit as st

from sales_dashboard.components.formatting import (
    format_count,
    format_currency,
    format_percent,
)
from sales_dashboard.schemas import SalesSummary
from sales_dashboard.types import KpiCard


def build_kpi_cards(summary: SalesSummary) -> List[KpiCard]:
    """
    Build the formatted KPI cards from the summary scalars.

    Args:
        summary: Headline scalars of the current display model.

    Returns:
        Cards in display order.
    """
    return [
        KpiCard(label="Total Sales", value=format_currency(summary.total_sales), caption=None),
        KpiCard(label="Total Margin", value=format_currency(summary.total_margin), caption=None),
        KpiCard(label="Total Orders", value=format_count(summary.total_orders), caption=None),
        KpiCard(
            label="Average Ticket",
            value=format_currency(summary.average_ticket),
            caption=None,
        ),
        KpiCard(
            label="Profitability",
            value=format_percent(summary.profitability),
            caption="margin / sales",
        ),
    ]


def render_kpi_cards(cards: List[KpiCard]) -> None:
    """
    Render the KPI cards row.

    Args:
        cards: Cards from build_kpi_cards.
    """
    columns = st.columns(len(cards))
    for column, card in zip(columns, cards):
        with column:
            st.metric(card["label"], card["value"])
            if card["caption"]:
                st.caption(card["caption"])
