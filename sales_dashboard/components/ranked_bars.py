"""
Ranked bars component for the top products and top customers lists.

Each row shows the label, the formatted amount and a thin bar whose
width is the row's share of the leading value.
"""

from html import escape
from typing import Sequence, Tuple

import streamlit as st

from sales_dashboard.components.formatting import format_currency
from sales_dashboard.config import DashboardConfig
from sales_dashboard.types import RankedBar


def ranking_title(subject: str, limit: int) -> str:
    """Section title for a ranking, e.g. "Top 5 Products"."""
    return f"Top {limit} {subject}"


def bar_color(index: int, colors: Tuple[str, str]) -> str:
    """Leader color for the first row, muted color for the rest."""
    return colors[0] if index == 0 else colors[1]


def build_bar_html(bar: RankedBar, color: str) -> str:
    """
    Build the HTML for one ranked row.

    Args:
        bar: Ranked entry with its normalized width.
        color: Bar and amount color.

    Returns:
        HTML snippet for st.markdown.
    """
    style = DashboardConfig.style
    width_pct = bar.width_fraction * 100
    return (
        '<div class="ranked-row">'
        '<div class="ranked-row-header">'
        f'<span class="ranked-label">{escape(bar.label)}</span>'
        f'<span class="ranked-value" style="color: {color}">'
        f"{format_currency(bar.value)}</span>"
        "</div>"
        f'<div class="ranked-track" style="background: {style.bar_track_color}">'
        f'<div class="ranked-fill" style="width: {width_pct:.1f}%; '
        f'background: {color}"></div>'
        "</div>"
        "</div>"
    )


def render_ranked_bars(
    title: str,
    bars: Sequence[RankedBar],
    colors: Tuple[str, str],
) -> None:
    """
    Render a titled top-N list.

    Args:
        title: Section title.
        bars: Ranked entries from the display model.
        colors: (leader, rest) colors.
    """
    st.subheader(title)
    if not bars:
        st.caption("No data for this period.")
        return

    html = "".join(
        build_bar_html(bar, bar_color(index, colors)) for index, bar in enumerate(bars)
    )
    st.markdown(html, unsafe_allow_html=True)
