"""
Pytest fixtures for dashboard tests.

Provides reporting API payloads, parsed result sets and clients used
across dashboard test modules.
"""

from typing import Any, Dict, List

import pytest

from sales_dashboard.config import ApiConfig
from sales_dashboard.schemas import (
    CustomerPurchases,
    DailyMargin,
    DailySales,
    ProductSales,
    RawResultSet,
    SalesSummary,
)
from sales_dashboard.services.api_client import SalesApiClient

BASE_URL = "https://reports.test"


@pytest.fixture
def anyio_backend():
    """Use only asyncio backend (trio not installed)."""
    return "asyncio"


@pytest.fixture
def api_config() -> ApiConfig:
    """API config pointing at the mocked reporting host."""
    return ApiConfig(base_url=BASE_URL, timeout_seconds=2.0, top_limit=5)


@pytest.fixture
def api_client(api_config: ApiConfig) -> SalesApiClient:
    """Reporting API client for the mocked host."""
    return SalesApiClient(api_config)


@pytest.fixture
def summary_payload() -> Dict[str, Any]:
    """Sample /resumen_general response."""
    return {
        "total_ventas": 125000.0,
        "total_margen": 31250.0,
        "total_ordenes": 410,
        "ticket_promedio": 304.88,
        "rentabilidad": 0.25,
    }


@pytest.fixture
def daily_sales_payload() -> List[Dict[str, Any]]:
    """Sample /ventas_por_dia response."""
    return [
        {"Fecha_Venta": "2024-01-01", "total_ventas": 100.0},
        {"Fecha_Venta": "2024-01-02", "total_ventas": 200.0},
    ]


@pytest.fixture
def daily_margin_payload() -> List[Dict[str, Any]]:
    """Sample /margen_por_dia response (one day missing)."""
    return [{"Fecha_Venta": "2024-01-01", "total_margen": 30.0}]


@pytest.fixture
def top_products_payload() -> List[Dict[str, Any]]:
    """Sample /top_productos response."""
    return [
        {"Producto": "A", "total_ventas": 500.0},
        {"Producto": "B", "total_ventas": 250.0},
    ]


@pytest.fixture
def top_customers_payload() -> List[Dict[str, Any]]:
    """Sample /top_clientes response."""
    return [
        {"Cliente": "Acme", "total_compras": 800.0},
        {"Cliente": "Globex", "total_compras": 200.0},
    ]


@pytest.fixture
def payloads(
    summary_payload,
    daily_sales_payload,
    daily_margin_payload,
    top_products_payload,
    top_customers_payload,
) -> Dict[str, Any]:
    """All endpoint payloads keyed by endpoint name."""
    return {
        "resumen_general": summary_payload,
        "ventas_por_dia": daily_sales_payload,
        "margen_por_dia": daily_margin_payload,
        "top_productos": top_products_payload,
        "top_clientes": top_customers_payload,
    }


@pytest.fixture
def raw_result_set(
    summary_payload,
    daily_sales_payload,
    daily_margin_payload,
    top_products_payload,
    top_customers_payload,
) -> RawResultSet:
    """Parsed result set built from the sample payloads."""
    return RawResultSet(
        summary=SalesSummary.model_validate(summary_payload),
        daily_sales=tuple(DailySales.model_validate(r) for r in daily_sales_payload),
        daily_margin=tuple(DailyMargin.model_validate(r) for r in daily_margin_payload),
        top_products=tuple(ProductSales.model_validate(r) for r in top_products_payload),
        top_customers=tuple(
            CustomerPurchases.model_validate(r) for r in top_customers_payload
        ),
    )
