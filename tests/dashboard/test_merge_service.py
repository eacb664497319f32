"""Tests for merge service module."""

import pytest

from sales_dashboard.schemas import DailyMargin, DailySales, RawResultSet
from sales_dashboard.services.merge_service import (
    build_display_model,
    combine_daily,
    rank_bars,
)
from sales_dashboard.types import DailyPoint, JoinPolicy, RankedBar


def sales(*rows):
    return [DailySales(sale_date=d, total_sales=v) for d, v in rows]


def margins(*rows):
    return [DailyMargin(sale_date=d, total_margin=v) for d, v in rows]


class TestCombineDaily:
    """Tests for the combine_daily function."""

    def test_missing_margin_defaults_to_zero(self) -> None:
        """Test the reference join: a day without margin gets 0."""
        result = combine_daily(
            sales(("2024-01-01", 100), ("2024-01-02", 200)),
            margins(("2024-01-01", 30)),
        )

        assert result == (
            DailyPoint(date="2024-01-01", sales=100, margin=30),
            DailyPoint(date="2024-01-02", sales=200, margin=0),
        )

    def test_margin_only_dates_are_dropped(self) -> None:
        """Test that the sales series drives the join."""
        result = combine_daily(
            sales(("2024-01-02", 200)),
            margins(("2024-01-01", 30), ("2024-01-02", 50)),
        )

        assert [p.date for p in result] == ["2024-01-02"]
        assert result[0].margin == 50

    def test_keeps_sales_order(self) -> None:
        """Test that rows follow the sales series order, not date order."""
        result = combine_daily(
            sales(("2024-01-03", 3), ("2024-01-01", 1), ("2024-01-02", 2)),
            margins(("2024-01-01", 10)),
        )

        assert [p.date for p in result] == ["2024-01-03", "2024-01-01", "2024-01-02"]

    def test_dates_match_by_exact_text(self) -> None:
        """Test that equivalent but differently written dates do not match."""
        result = combine_daily(
            sales(("2024-01-01", 100)),
            margins(("2024-01-01T00:00:00", 30)),
        )

        assert result[0].margin == 0

    def test_first_margin_row_wins(self) -> None:
        """Test that duplicated margin dates use the first row."""
        result = combine_daily(
            sales(("2024-01-01", 100)),
            margins(("2024-01-01", 30), ("2024-01-01", 99)),
        )

        assert result == (DailyPoint("2024-01-01", 100, 30),)

    def test_empty_sales(self) -> None:
        """Test that no sales rows give an empty series."""
        assert combine_daily([], margins(("2024-01-01", 30))) == ()

    def test_empty_margin(self) -> None:
        """Test that every day gets a zero margin without margin data."""
        result = combine_daily(sales(("2024-01-01", 100)), [])

        assert result == (DailyPoint("2024-01-01", 100, 0),)

    def test_union_policy_keeps_both_sides(self) -> None:
        """Test the symmetric join with zero fill on both sides."""
        result = combine_daily(
            sales(("2024-01-02", 200), ("2024-01-03", 300)),
            margins(("2024-01-01", 30), ("2024-01-02", 50)),
            policy=JoinPolicy.UNION,
        )

        assert result == (
            DailyPoint("2024-01-01", 0, 30),
            DailyPoint("2024-01-02", 200, 50),
            DailyPoint("2024-01-03", 300, 0),
        )


class TestRankBars:
    """Tests for the rank_bars function."""

    def test_normalizes_against_leader(self) -> None:
        """Test the reference ranking: widths are 1.0 and 0.5."""
        result = rank_bars([("A", 500), ("B", 250)])

        assert [bar.width_fraction for bar in result] == [1.0, 0.5]
        assert result[0] == RankedBar(label="A", value=500, width_fraction=1.0)

    def test_empty_input(self) -> None:
        """Test that an empty ranking stays empty."""
        assert rank_bars([]) == ()

    def test_resorts_descending(self) -> None:
        """Test that unsorted input is ranked locally."""
        result = rank_bars([("B", 250), ("A", 500), ("C", 125)])

        assert [bar.label for bar in result] == ["A", "B", "C"]
        assert [bar.width_fraction for bar in result] == [1.0, 0.5, 0.25]

    def test_sort_is_stable(self) -> None:
        """Test that ties keep their incoming order."""
        result = rank_bars([("X", 100), ("Y", 100), ("Z", 100)])

        assert [bar.label for bar in result] == ["X", "Y", "Z"]

    def test_trusting_server_order_clips_widths(self) -> None:
        """Test that without resorting, widths are still kept within [0, 1]."""
        result = rank_bars([("B", 250), ("A", 500)], resort=False)

        assert [bar.label for bar in result] == ["B", "A"]
        assert [bar.width_fraction for bar in result] == [1.0, 1.0]

    def test_zero_leader_uses_unit_divisor(self) -> None:
        """Test that an all-zero ranking does not divide by zero."""
        result = rank_bars([("A", 0), ("B", 0)])

        assert [bar.width_fraction for bar in result] == [0.0, 0.0]

    @pytest.mark.parametrize("value", [1, 42.5, 1_000_000])
    def test_single_entry_is_full_width(self, value) -> None:
        """Test that a lone entry always spans the full width."""
        assert rank_bars([("Only", value)])[0].width_fraction == 1.0


class TestBuildDisplayModel:
    """Tests for the build_display_model function."""

    def test_summary_is_passed_through(self, raw_result_set: RawResultSet) -> None:
        """Test that summary scalars are copied verbatim."""
        model = build_display_model(raw_result_set)

        assert model.summary == raw_result_set.summary
        assert model.summary.profitability == 0.25

    def test_derives_series_and_rankings(self, raw_result_set: RawResultSet) -> None:
        """Test the full derivation from the sample payloads."""
        model = build_display_model(raw_result_set)

        assert model.combined_daily == (
            DailyPoint("2024-01-01", 100, 30),
            DailyPoint("2024-01-02", 200, 0),
        )
        assert [b.width_fraction for b in model.top_products] == [1.0, 0.5]
        assert [b.label for b in model.top_customers] == ["Acme", "Globex"]
        assert [b.width_fraction for b in model.top_customers] == [1.0, 0.25]

    def test_is_idempotent(self, raw_result_set: RawResultSet) -> None:
        """Test that merging the same input twice gives equal models."""
        first = build_display_model(raw_result_set)
        second = build_display_model(raw_result_set)

        assert first == second

    def test_join_policy_is_forwarded(self, raw_result_set: RawResultSet) -> None:
        """Test that the union policy reaches the daily join."""
        raw = RawResultSet(
            summary=raw_result_set.summary,
            daily_sales=(),
            daily_margin=tuple(margins(("2024-01-05", 7))),
            top_products=(),
            top_customers=(),
        )

        model = build_display_model(raw, join_policy=JoinPolicy.UNION)

        assert model.combined_daily == (DailyPoint("2024-01-05", 0, 7),)
        assert model.top_products == ()
