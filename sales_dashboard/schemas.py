"""
Payload schemas for the reporting API.

Pydantic models for the five endpoint responses. Field aliases match
the names the API emits; Python attribute names are used everywhere
else in the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ApiModel(BaseModel):
    """Base for API rows: immutable, populated by alias or attribute name."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class SalesSummary(_ApiModel):
    """Headline scalars from /resumen_general."""

    total_sales: Optional[float] = Field(alias="total_ventas")
    total_margin: Optional[float] = Field(alias="total_margen")
    total_orders: Optional[int] = Field(alias="total_ordenes")
    average_ticket: Optional[float] = Field(alias="ticket_promedio")
    profitability: Optional[float] = Field(alias="rentabilidad")


class _DailyRow(_ApiModel):
    sale_date: str = Field(alias="Fecha_Venta")

    @field_validator("sale_date", mode="before")
    @classmethod
    def _date_as_text(cls, value: Any) -> str:
        # Join keys are compared textually, never parsed
        return str(value)


class DailySales(_DailyRow):
    """One row of /ventas_por_dia."""

    total_sales: float = Field(alias="total_ventas")


class DailyMargin(_DailyRow):
    """One row of /margen_por_dia."""

    total_margin: float = Field(alias="total_margen")


class ProductSales(_ApiModel):
    """One row of /top_productos."""

    product: str = Field(alias="Producto")
    total_sales: float = Field(alias="total_ventas")


class CustomerPurchases(_ApiModel):
    """One row of /top_clientes."""

    customer: str = Field(alias="Cliente")
    total_purchases: float = Field(alias="total_compras")


@dataclass(frozen=True)
class RawResultSet:
    """
    The five parsed payloads of one fetch cycle.

    Only ever built once every source has answered successfully.

    Attributes:
        summary: Headline scalars.
        daily_sales: Sales per day, in API order.
        daily_margin: Margin per day, in API order.
        top_products: Best-selling products, expected descending.
        top_customers: Best customers, expected descending.
    """

    summary: SalesSummary
    daily_sales: Tuple[DailySales, ...]
    daily_margin: Tuple[DailyMargin, ...]
    top_products: Tuple[ProductSales, ...]
    top_customers: Tuple[CustomerPurchases, ...]
