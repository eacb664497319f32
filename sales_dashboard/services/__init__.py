"""
Services module for fetching and deriving dashboard data.

Provides the query builder, API client, fetch orchestrator, merge
stage and the lifecycle controller.
"""

from sales_dashboard.services.api_client import Endpoint, SalesApiClient
from sales_dashboard.services.controller import DashboardController
from sales_dashboard.services.fetch_orchestrator import FetchOrchestrator
from sales_dashboard.services.merge_service import (
    build_display_model,
    combine_daily,
    rank_bars,
)
from sales_dashboard.services.query_service import build_params, build_query

__all__ = [
    # Query service
    "build_query",
    "build_params",
    # API client
    "Endpoint",
    "SalesApiClient",
    # Orchestration
    "FetchOrchestrator",
    "DashboardController",
    # Merge service
    "build_display_model",
    "combine_daily",
    "rank_bars",
]
