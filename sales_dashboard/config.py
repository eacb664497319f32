"""
Dashboard configuration module.

Centralizes all configuration values, magic numbers, and defaults
used throughout the dashboard application. API settings are read from
the environment (or a local .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "http://localhost:8000"


@dataclass(frozen=True)
class ApiConfig:
    """
    Reporting API connection settings.

    Attributes:
        base_url: Root URL of the reporting API.
        timeout_seconds: Per-request timeout. None keeps the httpx default.
        top_limit: Number of rows requested from the ranking endpoints.
    """

    base_url: str = DEFAULT_API_URL
    timeout_seconds: Optional[float] = None
    top_limit: int = 5

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """
        Build the API config from environment variables.

        Reads SALES_API_URL, SALES_API_TIMEOUT and SALES_API_TOP_LIMIT.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        timeout = os.getenv("SALES_API_TIMEOUT")
        top_limit = os.getenv("SALES_API_TOP_LIMIT")
        return cls(
            base_url=os.getenv("SALES_API_URL") or DEFAULT_API_URL,
            timeout_seconds=float(timeout) if timeout else None,
            top_limit=int(top_limit) if top_limit else 5,
        )


@dataclass(frozen=True)
class PageConfig:
    """Streamlit page configuration."""

    title: str = "Sales Dashboard"
    icon: str = "bar_chart"
    layout: str = "wide"
    sidebar_state: str = "collapsed"


@dataclass(frozen=True)
class ChartConfig:
    """Default chart configuration values."""

    daily_height: int = 300
    sales_color: str = "#6c63ff"
    margin_color: str = "#4ecdc4"
    sales_label: str = "Sales MXN"
    margin_label: str = "ERP Margin"

    # Ranked bar colors (leader, rest)
    product_colors: tuple = ("#6c63ff", "#4a3fa8")
    customer_colors: tuple = ("#4ecdc4", "#2a8a87")


@dataclass(frozen=True)
class StyleConfig:
    """CSS styling configuration."""

    page_bg: str = "#0b0d14"
    card_bg: str = "#13151f"
    card_border: str = "#2a2d3a"
    metric_value_color: str = "#f0f2ff"
    metric_label_color: str = "#5a5f7a"
    metric_value_size: str = "28px"
    metric_label_size: str = "11px"
    bar_track_color: str = "#1e2030"
    bar_height: str = "3px"


class DashboardConfig:
    """Main configuration container providing access to all config sections."""

    page = PageConfig()
    charts = ChartConfig()
    style = StyleConfig()
    api = ApiConfig.from_env()
