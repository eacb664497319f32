"""
Date filter component for the dashboard header.

Provides the From/To date inputs, the refresh button and the active
period banner with its clear action. Every change is forwarded to the
controller, which starts a new fetch cycle.
"""

from typing import Awaitable, Callable

import streamlit as st

from sales_dashboard.services.controller import DashboardController
from sales_dashboard.services.session_service import run_trigger
from sales_dashboard.types import CycleOutcome, describe_period

START_KEY = "filter_start"
END_KEY = "filter_end"
LOADING_MESSAGE = "Loading data..."


def _run_with_spinner(trigger: Callable[[], Awaitable[CycleOutcome]]) -> CycleOutcome:
    with st.spinner(LOADING_MESSAGE):
        return run_trigger(trigger)


def _on_start_change(controller: DashboardController) -> None:
    _run_with_spinner(lambda: controller.set_start(st.session_state[START_KEY]))


def _on_end_change(controller: DashboardController) -> None:
    _run_with_spinner(lambda: controller.set_end(st.session_state[END_KEY]))


def _on_refresh(controller: DashboardController) -> None:
    _run_with_spinner(controller.refresh)


def _on_clear(controller: DashboardController) -> None:
    # Widget values must be reset before the rerun recreates the inputs
    st.session_state[START_KEY] = None
    st.session_state[END_KEY] = None
    _run_with_spinner(controller.clear_filter)


def render_date_filter(controller: DashboardController) -> None:
    """
    Render the header date inputs and refresh button.

    Args:
        controller: Session dashboard controller.
    """
    st.session_state.setdefault(START_KEY, controller.filters.start)
    st.session_state.setdefault(END_KEY, controller.filters.end)

    col_from, col_to, col_refresh = st.columns([2, 2, 1])

    with col_from:
        st.date_input(
            "From",
            key=START_KEY,
            format="YYYY-MM-DD",
            on_change=_on_start_change,
            args=(controller,),
        )

    with col_to:
        st.date_input(
            "To",
            key=END_KEY,
            format="YYYY-MM-DD",
            on_change=_on_end_change,
            args=(controller,),
        )

    with col_refresh:
        st.button(
            "Refresh",
            icon=":material/refresh:",
            on_click=_on_refresh,
            args=(controller,),
        )


def render_period_banner(controller: DashboardController) -> None:
    """
    Render the active period banner with a clear-filter button.

    Nothing is shown when no date bound is set.

    Args:
        controller: Session dashboard controller.
    """
    filters = controller.filters
    if not filters.is_active:
        return

    col_text, col_clear = st.columns([5, 1])
    with col_text:
        st.info(f"Showing data for period: {describe_period(filters)}")
    with col_clear:
        st.button("Clear filter", on_click=_on_clear, args=(controller,))
