"""
Type definitions for the dashboard module.

Provides the filter state, load lifecycle states and the display
model consumed by the rendering components.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple, TypedDict, Union

import pandas as pd

if TYPE_CHECKING:
    from sales_dashboard.exceptions import FetchError
    from sales_dashboard.schemas import SalesSummary

DateValue = Union[date, str]

ALL_PERIODS_LABEL = "All periods"
UNSET_BOUND_LABEL = "—"


def _normalize_bound(value: Optional[DateValue]) -> Optional[DateValue]:
    """Treat empty input the same as an unset bound."""
    if value is None or value == "":
        return None
    return value


@dataclass(frozen=True)
class FilterState:
    """
    User-selected date range scoping every query.

    Either bound may be unset independently. No ordering between
    start and end is enforced; the API interprets the range.
    """

    start: Optional[DateValue] = None
    end: Optional[DateValue] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _normalize_bound(self.start))
        object.__setattr__(self, "end", _normalize_bound(self.end))

    @classmethod
    def cleared(cls) -> FilterState:
        """Return a fully-unset filter."""
        return cls()

    @property
    def is_active(self) -> bool:
        """True when at least one bound is set."""
        return self.start is not None or self.end is not None

    def with_start(self, value: Optional[DateValue]) -> FilterState:
        return replace(self, start=value)

    def with_end(self, value: Optional[DateValue]) -> FilterState:
        return replace(self, end=value)


def format_bound(value: Optional[DateValue]) -> str:
    """Render a filter bound as text, ISO format for dates."""
    if value is None:
        return UNSET_BOUND_LABEL
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def describe_period(filters: FilterState) -> str:
    """
    Describe the active period for the banner.

    Args:
        filters: Current filter state.

    Returns:
        "start → end" with a dash for unset bounds, or "All periods"
        when no bound is set.
    """
    if not filters.is_active:
        return ALL_PERIODS_LABEL
    return f"{format_bound(filters.start)} → {format_bound(filters.end)}"


def footer_period_label(filters: FilterState) -> str:
    """Footer label: the range only when both bounds are set."""
    if filters.start is None or filters.end is None:
        return ALL_PERIODS_LABEL
    return describe_period(filters)


class LoadState(Enum):
    """Lifecycle of the dashboard data."""

    IDLE = "idle"
    """Nothing requested yet."""

    LOADING = "loading"
    """The latest fetch cycle is in flight."""

    READY = "ready"
    """The latest cycle settled (successfully or not)."""


class JoinPolicy(Enum):
    """How the daily sales and margin series are combined."""

    SALES_DRIVEN = "sales_driven"
    """Keep the sales dates in order; margin-only dates are dropped."""

    UNION = "union"
    """Keep dates from both series, zero-filling the missing side."""


@dataclass(frozen=True)
class DailyPoint:
    """Sales and margin for one date key."""

    date: str
    sales: float
    margin: float


@dataclass(frozen=True)
class RankedBar:
    """
    One row of a top-N ranking.

    Attributes:
        label: Product or customer name.
        value: Ranked amount.
        width_fraction: value relative to the ranking's largest value, in [0, 1].
    """

    label: str
    value: float
    width_fraction: float


@dataclass(frozen=True)
class DisplayModel:
    """
    Render-ready aggregate for one fetch cycle.

    Attributes:
        summary: Headline scalars passed through from the API.
        combined_daily: Joined per-day sales and margin.
        top_products: Ranked product bars.
        top_customers: Ranked customer bars.
    """

    summary: SalesSummary
    combined_daily: Tuple[DailyPoint, ...]
    top_products: Tuple[RankedBar, ...]
    top_customers: Tuple[RankedBar, ...]

    def daily_frame(self) -> pd.DataFrame:
        """Return the combined daily series as a DataFrame for charting."""
        return pd.DataFrame(
            [(p.date, p.sales, p.margin) for p in self.combined_daily],
            columns=["date", "sales", "margin"],
        )


@dataclass(frozen=True)
class CycleOutcome:
    """
    Result of one fetch cycle as seen by the controller.

    Exactly one of model and error is set. Outcomes of cycles that
    were superseded by a later one are returned with accepted=False
    and never touch controller state.
    """

    sequence: int
    filters: FilterState
    model: Optional[DisplayModel] = None
    error: Optional[FetchError] = None
    accepted: bool = True

    @property
    def ok(self) -> bool:
        return self.error is None


class KpiCard(TypedDict):
    """One formatted KPI card."""

    label: str
    value: str
    caption: Optional[str]
