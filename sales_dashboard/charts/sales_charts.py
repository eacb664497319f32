"""
Sales chart components.

Provides the daily sales and margin area chart.
"""

from typing import List, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from sales_dashboard.components.formatting import format_compact
from sales_dashboard.config import DashboardConfig


def _hex_to_rgba(color: str, alpha: float) -> str:
    red, green, blue = (int(color[i : i + 2], 16) for i in (1, 3, 5))
    return f"rgba({red}, {green}, {blue}, {alpha})"


def _axis_ticks(top: float, count: int = 5) -> List[float]:
    """Evenly spaced tick values from 0 to top."""
    if top <= 0:
        return [0.0]
    return [top * i / (count - 1) for i in range(count)]


def create_daily_sales_figure(daily: pd.DataFrame) -> Optional[go.Figure]:
    """
    Create an area chart of sales and margin per day.

    Args:
        daily: Combined daily series with date, sales and margin columns.

    Returns:
        Plotly Figure object, or None if data is empty.
    """
    if daily.empty:
        return None

    config = DashboardConfig.charts

    fig = go.Figure()
    for column, name, color in (
        ("sales", config.sales_label, config.sales_color),
        ("margin", config.margin_label, config.margin_color),
    ):
        fig.add_trace(
            go.Scatter(
                x=daily["date"],
                y=daily[column],
                name=name,
                mode="lines",
                line={"color": color, "width": 2, "shape": "spline"},
                fill="tozeroy",
                fillcolor=_hex_to_rgba(color, 0.15),
                hovertemplate="%{x}<br>" + name + ": $%{y:,.0f}<extra></extra>",
            )
        )

    ticks = _axis_ticks(float(daily[["sales", "margin"]].max().max()))
    fig.update_layout(
        height=config.daily_height,
        margin={"t": 10, "r": 8, "l": 8, "b": 0},
        legend={"orientation": "h", "y": -0.15},
        yaxis={"tickvals": ticks, "ticktext": [format_compact(v) for v in ticks]},
        xaxis={"type": "category", "showgrid": False},
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def render_daily_sales_chart(daily: pd.DataFrame) -> None:
    """
    Render the daily sales and margin chart to Streamlit.

    Args:
        daily: Combined daily series from the display model.
    """
    fig = create_daily_sales_figure(daily)
    if fig is not None:
        st.plotly_chart(fig, use_container_width=True)
