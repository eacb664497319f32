"""
Merge service module for deriving the display model.

Provides pure functions that turn the raw payloads of one fetch cycle
into the render-ready DisplayModel: the joined daily series and the
normalized top-N rankings.
"""

from typing import Iterable, Tuple

import pandas as pd

from sales_dashboard.schemas import DailyMargin, DailySales, RawResultSet
from sales_dashboard.types import DailyPoint, DisplayModel, JoinPolicy, RankedBar

__all__ = [
    "build_display_model",
    "combine_daily",
    "rank_bars",
]


def combine_daily(
    daily_sales: Iterable[DailySales],
    daily_margin: Iterable[DailyMargin],
    policy: JoinPolicy = JoinPolicy.SALES_DRIVEN,
) -> Tuple[DailyPoint, ...]:
    """
    Join the daily sales and margin series on their date key.

    Dates are matched by exact text equality. When a date has several
    margin rows, the first one wins.

    Args:
        daily_sales: Sales per day, in API order.
        daily_margin: Margin per day.
        policy: SALES_DRIVEN keeps the sales rows in order and drops
            margin-only dates; UNION keeps both sides, sorted by date key.

    Returns:
        Tuple of DailyPoint, missing amounts filled with 0.
    """
    sales = pd.DataFrame(
        [(row.sale_date, row.total_sales) for row in daily_sales],
        columns=["date", "sales"],
    )
    margin = pd.DataFrame(
        [(row.sale_date, row.total_margin) for row in daily_margin],
        columns=["date", "margin"],
    ).drop_duplicates(subset="date", keep="first")

    if policy is JoinPolicy.UNION:
        merged = sales.merge(margin, on="date", how="outer", sort=True)
    else:
        # Left merge keeps the order of the sales rows
        merged = sales.merge(margin, on="date", how="left")

    merged[["sales", "margin"]] = merged[["sales", "margin"]].astype(float).fillna(0.0)

    return tuple(
        DailyPoint(date=str(day), sales=float(amount), margin=float(margin_amount))
        for day, amount, margin_amount in merged.itertuples(index=False)
    )


def rank_bars(
    rows: Iterable[Tuple[str, float]],
    resort: bool = True,
) -> Tuple[RankedBar, ...]:
    """
    Rank labelled values and normalize them against the largest one.

    Args:
        rows: (label, value) pairs, expected descending by value.
        resort: Stable-sort descending locally instead of trusting the
            incoming order.

    Returns:
        Tuple of RankedBar with width_fraction in [0, 1]. Empty input
        gives an empty tuple.
    """
    frame = pd.DataFrame(list(rows), columns=["label", "value"])
    if frame.empty:
        return ()

    if resort:
        frame = frame.sort_values("value", ascending=False, kind="stable")

    # The leading value is the divisor; a non-positive one falls back to 1
    top = frame["value"].iloc[0]
    divisor = float(top) if top > 0 else 1.0
    frame["width_fraction"] = (frame["value"] / divisor).clip(lower=0.0, upper=1.0)

    return tuple(
        RankedBar(label=str(label), value=float(value), width_fraction=float(width))
        for label, value, width in frame.itertuples(index=False)
    )


def build_display_model(
    raw: RawResultSet,
    join_policy: JoinPolicy = JoinPolicy.SALES_DRIVEN,
    resort_rankings: bool = True,
) -> DisplayModel:
    """
    Derive the DisplayModel of one fetch cycle.

    Pure: the same RawResultSet always yields an equal DisplayModel.
    Summary scalars are passed through as received.

    Args:
        raw: Complete payloads of the cycle.
        join_policy: How the daily series are combined.
        resort_rankings: Sort rankings locally before normalizing.

    Returns:
        DisplayModel ready for rendering.
    """
    return DisplayModel(
        summary=raw.summary,
        combined_daily=combine_daily(raw.daily_sales, raw.daily_margin, join_policy),
        top_products=rank_bars(
            ((row.product, row.total_sales) for row in raw.top_products),
            resort=resort_rankings,
        ),
        top_customers=rank_bars(
            ((row.customer, row.total_purchases) for row in raw.top_customers),
            resort=resort_rankings,
        ),
    )
