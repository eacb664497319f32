"""Tests for query service module."""

from datetime import date

import httpx
import pytest

from sales_dashboard.services.query_service import build_params, build_query
from sales_dashboard.types import FilterState


class TestBuildQuery:
    """Tests for the build_query function."""

    def test_unset_filter_gives_empty_query(self) -> None:
        """Test that no parameters are emitted without a date range."""
        assert build_query(FilterState()) == ""

    @pytest.mark.parametrize(
        "filters, expected",
        [
            (FilterState(start="2024-01-01"), {"start_date": "2024-01-01"}),
            (FilterState(end="2024-01-31"), {"end_date": "2024-01-31"}),
            (
                FilterState(start="2024-01-01", end="2024-01-31"),
                {"start_date": "2024-01-01", "end_date": "2024-01-31"},
            ),
        ],
    )
    def test_only_set_bounds_are_emitted(self, filters, expected) -> None:
        """Test that each set bound appears exactly once with its literal value."""
        params = httpx.QueryParams(build_query(filters))

        assert set(params.keys()) == set(expected)
        for key, value in expected.items():
            assert params.get_list(key) == [value]

    def test_date_objects_use_iso_format(self) -> None:
        """Test that date bounds are rendered as ISO strings."""
        query = build_query(FilterState(start=date(2024, 3, 5), end=date(2024, 3, 9)))

        assert query == "start_date=2024-03-05&end_date=2024-03-09"

    def test_string_bounds_are_passed_through(self) -> None:
        """Test that user input is not validated or normalized."""
        query = build_query(FilterState(start="05/03/2024"))

        assert httpx.QueryParams(query)["start_date"] == "05/03/2024"

    def test_no_ordering_is_enforced(self) -> None:
        """Test that a start after the end is still sent as-is."""
        params = build_params(FilterState(start="2024-02-01", end="2024-01-01"))

        assert params == {"start_date": "2024-02-01", "end_date": "2024-01-01"}

    def test_empty_string_counts_as_unset(self) -> None:
        """Test that cleared inputs produce no parameter."""
        assert build_query(FilterState(start="", end="2024-01-31")) == "end_date=2024-01-31"
