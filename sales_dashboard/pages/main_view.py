"""
Main dashboard view.

Composes the header filter, KPI row, daily chart and top-N rankings
from the session controller's current state.
"""

import streamlit as st

from sales_dashboard.charts.sales_charts import render_daily_sales_chart
from sales_dashboard.components.date_filter import (
    LOADING_MESSAGE,
    render_date_filter,
    render_period_banner,
)
from sales_dashboard.components.kpi_cards import build_kpi_cards, render_kpi_cards
from sales_dashboard.components.ranked_bars import ranking_title, render_ranked_bars
from sales_dashboard.config import DashboardConfig
from sales_dashboard.services.controller import DashboardController
from sales_dashboard.types import LoadState, footer_period_label


def render_main_view(controller: DashboardController) -> None:
    """
    Render the main dashboard view.

    Args:
        controller: Session dashboard controller.
    """
    config = DashboardConfig.charts
    top_limit = DashboardConfig.api.top_limit

    st.caption("LIVE ANALYTICS")
    st.title(DashboardConfig.page.title)

    render_date_filter(controller)
    render_period_banner(controller)

    if controller.last_error is not None:
        message = f"Could not refresh data ({controller.last_error})."
        if controller.is_stale:
            message += " Showing the last loaded data."
        st.warning(message)

    model = controller.display_model
    if model is None:
        if controller.load_state is LoadState.LOADING:
            st.info(LOADING_MESSAGE)
        return

    render_kpi_cards(build_kpi_cards(model.summary))

    st.markdown("---")

    st.subheader("Sales and Margin per Day")
    render_daily_sales_chart(model.daily_frame())

    col_products, col_customers = st.columns(2)
    with col_products:
        render_ranked_bars(
            ranking_title("Products", top_limit),
            model.top_products,
            config.product_colors,
        )
    with col_customers:
        render_ranked_bars(
            ranking_title("Customers", top_limit),
            model.top_customers,
            config.customer_colors,
        )

    st.caption(f"SALES ANALYTICS · {footer_period_label(controller.filters)}")
