"""
Query service module for building reporting API query strings.

Translates the current filter state into the query string shared by
every endpoint of a fetch cycle.
"""

from typing import Dict

import httpx

from sales_dashboard.types import FilterState, format_bound

__all__ = [
    "build_query",
    "build_params",
]

START_PARAM = "start_date"
END_PARAM = "end_date"


def build_params(filters: FilterState) -> Dict[str, str]:
    """
    Map the set filter bounds to query parameters.

    Args:
        filters: Current filter state.

    Returns:
        Dict with start_date and/or end_date, only for bounds that are set.
    """
    params: Dict[str, str] = {}
    if filters.start is not None:
        params[START_PARAM] = format_bound(filters.start)
    if filters.end is not None:
        params[END_PARAM] = format_bound(filters.end)
    return params


def build_query(filters: FilterState) -> str:
    """
    Build the canonical query string for a filter snapshot.

    Values are passed through as entered (dates as ISO strings), without
    validation. An unset filter produces an empty string.

    Args:
        filters: Current filter state.

    Returns:
        URL-encoded query string, e.g. "start_date=2024-01-01&end_date=2024-01-31".
    """
    return str(httpx.QueryParams(build_params(filters)))
