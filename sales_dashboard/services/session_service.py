"""
Session service module for wiring the controller into Streamlit.

Keeps one controller per browser session and runs its async triggers
from Streamlit's synchronous callbacks.
"""

import asyncio
import logging
from typing import Awaitable, Callable

import streamlit as st

from sales_dashboard.config import DashboardConfig
from sales_dashboard.services.api_client import SalesApiClient
from sales_dashboard.services.controller import DashboardController
from sales_dashboard.services.fetch_orchestrator import FetchOrchestrator
from sales_dashboard.types import CycleOutcome

logger = logging.getLogger(__name__)

__all__ = [
    "get_session_controller",
    "run_trigger",
]

_CLIENT_KEY = "sales_api_client"
_CONTROLLER_KEY = "dashboard_controller"


def get_session_controller() -> DashboardController:
    """
    Return the controller of the current session, creating it on first use.

    Returns:
        DashboardController bound to a SalesApiClient built from config.
    """
    if _CONTROLLER_KEY not in st.session_state:
        client = SalesApiClient(DashboardConfig.api)
        st.session_state[_CLIENT_KEY] = client
        st.session_state[_CONTROLLER_KEY] = DashboardController(
            FetchOrchestrator(client)
        )
        logger.info("Created dashboard controller for %s", DashboardConfig.api.base_url)
    return st.session_state[_CONTROLLER_KEY]


def run_trigger(trigger: Callable[[], Awaitable[CycleOutcome]]) -> CycleOutcome:
    """
    Run a controller trigger to completion on a fresh event loop.

    The HTTP client is closed afterwards because its connections are
    bound to the loop that opened them.

    Args:
        trigger: Controller coroutine function, e.g. controller.refresh.

    Returns:
        The CycleOutcome of the triggered cycle.
    """
    client: SalesApiClient = st.session_state[_CLIENT_KEY]

    async def _runner() -> CycleOutcome:
        try:
            return await trigger()
        finally:
            await client.close()

    return asyncio.run(_runner())
