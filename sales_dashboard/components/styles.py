"""
Styling module for dashboard appearance.

Provides functions for applying page configuration and custom CSS.
"""

import streamlit as st

from sales_dashboard.config import DashboardConfig


def apply_page_config() -> None:
    """
    Apply Streamlit page configuration.

    Must be called before any other Streamlit commands.
    """
    config = DashboardConfig.page
    st.set_page_config(
        page_title=config.title,
        page_icon=config.icon,
        layout=config.layout,
        initial_sidebar_state=config.sidebar_state,
    )


def apply_custom_css() -> None:
    """
    Apply custom CSS styling to the dashboard.

    Injects CSS for metric cards and ranked bar rows based on
    settings defined in DashboardConfig.style.
    """
    style = DashboardConfig.style

    css = f"""
    <style>
        .stApp {{
            background-color: {style.page_bg};
        }}

        [data-testid="stMetric"] {{
            background-color: {style.card_bg};
            border: 1px solid {style.card_border};
            border-radius: 16px;
            padding: 20px 24px;
        }}

        [data-testid="stMetricValue"] {{
            font-size: {style.metric_value_size} !important;
            font-weight: 700 !important;
            color: {style.metric_value_color} !important;
        }}

        [data-testid="stMetricLabel"] {{
            font-size: {style.metric_label_size} !important;
            letter-spacing: 0.12em;
            text-transform: uppercase;
            color: {style.metric_label_color} !important;
        }}

        .ranked-row {{
            margin-bottom: 16px;
        }}

        .ranked-row-header {{
            display: flex;
            justify-content: space-between;
            margin-bottom: 6px;
            font-size: 12px;
        }}

        .ranked-value {{
            font-weight: 600;
            font-family: monospace;
        }}

        .ranked-track {{
            height: {style.bar_height};
            border-radius: 2px;
        }}

        .ranked-fill {{
            height: 100%;
            border-radius: 2px;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
