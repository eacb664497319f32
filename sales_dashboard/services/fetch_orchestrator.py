"""
Fetch Orchestrator - Coordinates the five-source fetch of one cycle.

Builds the shared query string once, starts every endpoint request
before awaiting any of them, and only hands a RawResultSet to the
merge stage when all five sources succeeded (all-or-nothing).
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from sales_dashboard.exceptions import CycleFetchError, FetchError, SourcePayloadError
from sales_dashboard.schemas import (
    CustomerPurchases,
    DailyMargin,
    DailySales,
    ProductSales,
    RawResultSet,
    SalesSummary,
)
from sales_dashboard.services.api_client import Endpoint, SalesApiClient
from sales_dashboard.services.query_service import build_query
from sales_dashboard.types import FilterState

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Order in which payloads are gathered and failures reported
CYCLE_ENDPOINTS: Tuple[Endpoint, ...] = (
    Endpoint.SUMMARY,
    Endpoint.DAILY_SALES,
    Endpoint.DAILY_MARGIN,
    Endpoint.TOP_PRODUCTS,
    Endpoint.TOP_CUSTOMERS,
)

_ROW_MODELS: Dict[Endpoint, Type[BaseModel]] = {
    Endpoint.DAILY_SALES: DailySales,
    Endpoint.DAILY_MARGIN: DailyMargin,
    Endpoint.TOP_PRODUCTS: ProductSales,
    Endpoint.TOP_CUSTOMERS: CustomerPurchases,
}


def _parse_record(endpoint: Endpoint, payload: Any, model: Type[ModelT]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise SourcePayloadError(endpoint.value, f"unexpected shape: {e}") from e


def _parse_rows(
    endpoint: Endpoint, payload: Any, model: Type[ModelT]
) -> Tuple[ModelT, ...]:
    if not isinstance(payload, list):
        raise SourcePayloadError(
            endpoint.value, f"expected a list, got {type(payload).__name__}"
        )
    return tuple(_parse_record(endpoint, row, model) for row in payload)


class FetchOrchestrator:
    """
    Domain service issuing the coordinated fetch for one filter snapshot.

    Every source is fetched and parsed independently; a malformed payload
    counts as a failure of its source, like a transport error.

    Attributes:
        _client: Reporting API client.
        _top_limit: Row limit for the ranking endpoints.
    """

    def __init__(self, client: SalesApiClient, top_limit: Optional[int] = None) -> None:
        """
        Initialize the orchestrator.

        Args:
            client: Reporting API client.
            top_limit: Ranking limit. If None, uses the client's config.
        """
        self._client = client
        self._top_limit = top_limit if top_limit is not None else client.config.top_limit

    async def fetch_all(self, filters: FilterState) -> RawResultSet:
        """
        Fetch and parse all five sources for a filter snapshot.

        All requests are in flight concurrently and every one of them is
        allowed to settle before the cycle resolves.

        Args:
            filters: Filter snapshot for this cycle.

        Returns:
            RawResultSet with all five payloads.

        Raises:
            CycleFetchError: If any source failed. No partial result is produced.
        """
        query = build_query(filters)
        start_time = time.perf_counter()

        results = await asyncio.gather(
            *(self._fetch_one(endpoint, query) for endpoint in CYCLE_ENDPOINTS),
            return_exceptions=True,
        )

        failures: List[FetchError] = []
        for result in results:
            if isinstance(result, FetchError):
                failures.append(result)
            elif isinstance(result, BaseException):
                raise result

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        if failures:
            logger.debug(
                "Fetch cycle failed in %.0fms: %d of %d sources",
                elapsed_ms,
                len(failures),
                len(CYCLE_ENDPOINTS),
            )
            raise CycleFetchError(failures)

        logger.debug("Fetched %d sources in %.0fms", len(CYCLE_ENDPOINTS), elapsed_ms)
        summary, daily_sales, daily_margin, top_products, top_customers = results
        return RawResultSet(
            summary=summary,
            daily_sales=daily_sales,
            daily_margin=daily_margin,
            top_products=top_products,
            top_customers=top_customers,
        )

    async def _fetch_one(self, endpoint: Endpoint, query: str) -> Any:
        """Fetch one source and parse it into its schema."""
        limit = self._top_limit if endpoint.is_ranking else None
        payload = await self._client.fetch(endpoint, query, limit=limit)
        if endpoint is Endpoint.SUMMARY:
            return _parse_record(endpoint, payload, SalesSummary)
        return _parse_rows(endpoint, payload, _ROW_MODELS[endpoint])
