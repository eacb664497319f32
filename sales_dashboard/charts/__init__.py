"""
Charts module for data visualization components.

Provides Plotly chart creation and rendering functions for the dashboard.
"""

from sales_dashboard.charts.sales_charts import (
    create_daily_sales_figure,
    render_daily_sales_chart,
)

__all__ = [
    "create_daily_sales_figure",
    "render_daily_sales_chart",
]
