"""
Reporting API client.

Performs single GET requests against the reporting API endpoints and
translates httpx failures into the dashboard's FetchError hierarchy.
Requests are never retried at this layer.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any, Optional

import httpx

from sales_dashboard.config import ApiConfig
from sales_dashboard.exceptions import (
    SourcePayloadError,
    SourceStatusError,
    SourceUnavailableError,
)

logger = logging.getLogger(__name__)


class Endpoint(Enum):
    """Reporting API endpoints used by the dashboard."""

    SUMMARY = "resumen_general"
    DAILY_SALES = "ventas_por_dia"
    DAILY_MARGIN = "margen_por_dia"
    TOP_PRODUCTS = "top_productos"
    TOP_CUSTOMERS = "top_clientes"

    @property
    def path(self) -> str:
        return f"/{self.value}"

    @property
    def is_ranking(self) -> bool:
        """Ranking endpoints take a limit parameter."""
        return self in (Endpoint.TOP_PRODUCTS, Endpoint.TOP_CUSTOMERS)


class SalesApiClient:
    """
    Async client for the sales reporting API.

    Each fetch is independent and stateless apart from the shared
    connection pool.

    Attributes:
        _config: API connection settings.
        _client: Lazily created async HTTP client.
    """

    def __init__(self, config: Optional[ApiConfig] = None) -> None:
        """
        Initialize the client.

        Args:
            config: API settings. If None, reads them from the environment.
        """
        self._config = config or ApiConfig.from_env()
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def config(self) -> ApiConfig:
        return self._config

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            kwargs: dict = {"base_url": self._config.base_url}
            if self._config.timeout_seconds is not None:
                kwargs["timeout"] = httpx.Timeout(self._config.timeout_seconds)
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                follow_redirects=True,
                **kwargs,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> SalesApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def fetch(
        self,
        endpoint: Endpoint,
        query: str,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Fetch one endpoint and return its parsed JSON body.

        Args:
            endpoint: Endpoint to call.
            query: Shared query string built from the filter state.
            limit: Result limit for ranking endpoints.

        Returns:
            The decoded JSON payload.

        Raises:
            SourceUnavailableError: On network failures and timeouts.
            SourceStatusError: If the API returns a non-2xx status code.
            SourcePayloadError: If the body is not valid JSON.
        """
        params = httpx.QueryParams(query)
        if limit is not None:
            params = params.set("limit", str(limit))

        client = await self._get_client()
        start_time = time.perf_counter()
        try:
            response = await client.get(endpoint.path, params=params)
        except httpx.RequestError as e:
            raise SourceUnavailableError(endpoint.value, str(e) or type(e).__name__) from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "GET %s -> %d in %.0fms", response.request.url, response.status_code, elapsed_ms
        )

        if not response.is_success:
            raise SourceStatusError(endpoint.value, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise SourcePayloadError(endpoint.value, f"invalid JSON: {e}") from e
