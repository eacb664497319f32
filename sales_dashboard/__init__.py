"""
Dashboard module for sales analytics visualization.

This module provides the main dashboard application over the sales
reporting API.

Usage:
    from sales_dashboard import run_dashboard
    run_dashboard()
"""

import streamlit as st

from sales_dashboard.components.date_filter import LOADING_MESSAGE
from sales_dashboard.pages.main_view import render_main_view
from sales_dashboard.services.session_service import get_session_controller, run_trigger
from sales_dashboard.types import LoadState


def run_dashboard() -> None:
    """
    Main dashboard application entry point.

    Runs the initial fetch cycle on first load, then renders the main view.
    """
    controller = get_session_controller()

    if controller.load_state is LoadState.IDLE:
        with st.spinner(LOADING_MESSAGE):
            run_trigger(controller.mount)

    render_main_view(controller)


__all__ = ["run_dashboard"]
