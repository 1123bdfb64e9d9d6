"""Tests for the price range and category chart services."""
from datetime import datetime
from decimal import Decimal

import pytest

from report_api.services.chart_service import (
    PRICE_RANGES,
    compute_category_counts,
    compute_price_ranges,
)

EXPECTED_LABELS = [
    "0-100", "101-200", "201-300", "301-400", "401-500",
    "501-600", "601-700", "701-800", "801-900", "901-above",
]


def test_price_ranges_are_fixed():
    """Ten buckets, the last open-ended."""
    assert len(PRICE_RANGES) == 10
    assert PRICE_RANGES[0] == (0, 100)
    assert PRICE_RANGES[-1] == (901, None)


@pytest.mark.asyncio
class TestComputePriceRanges:
    """Integration tests for compute_price_ranges."""

    async def test_march_histogram(self, db_session, sample_transactions):
        result = await compute_price_ranges(db_session, "March")
        counts = {item.range: item.count for item in result}

        assert [item.range for item in result] == EXPECTED_LABELS
        assert counts["0-100"] == 1
        assert counts["101-200"] == 1
        assert counts["901-above"] == 1
        assert sum(counts.values()) == 3

    async def test_boundary_price_matches_no_bucket(self, db_session, sample_transactions):
        """April has prices 64 and 100; 100 is in the gap between buckets."""
        result = await compute_price_ranges(db_session, "April")
        counts = {item.range: item.count for item in result}

        assert counts["0-100"] == 1
        assert counts["101-200"] == 0
        assert sum(counts.values()) == 1

    async def test_gap_between_buckets(self, db_session, make_transaction):
        """Prices in [n*100, n*100 + 1) are not counted."""
        prices = ["200.00", "200.50", "900.00", "900.99", "901.00"]
        db_session.add_all([
            make_transaction(id=i, price=Decimal(price), date_of_sale=datetime(2022, 8, 1))
            for i, price in enumerate(prices)
        ])
        await db_session.commit()

        result = await compute_price_ranges(db_session, "August")
        counts = {item.range: item.count for item in result}

        assert counts["901-above"] == 1
        assert sum(counts.values()) == 1

    async def test_empty_month_returns_all_buckets(self, db_session, sample_transactions):
        result = await compute_price_ranges(db_session, "June")

        assert [item.range for item in result] == EXPECTED_LABELS
        assert all(item.count == 0 for item in result)


@pytest.mark.asyncio
class TestComputeCategoryCounts:
    """Integration tests for compute_category_counts."""

    async def test_march_categories(self, db_session, sample_transactions):
        result = await compute_category_counts(db_session, "March")

        assert {item.category: item.count for item in result} == {
            "men's clothing": 1,
            "jewelery": 1,
            "electronics": 1,
        }

    async def test_counts_group_by_category(self, db_session, make_transaction):
        db_session.add_all([
            make_transaction(id=1, category="electronics", date_of_sale=datetime(2022, 5, 1)),
            make_transaction(id=2, category="electronics", date_of_sale=datetime(2021, 5, 9)),
            make_transaction(id=3, category="jewelery", date_of_sale=datetime(2022, 5, 3)),
            make_transaction(id=4, category="jewelery", date_of_sale=datetime(2022, 6, 3)),
        ])
        await db_session.commit()

        result = await compute_category_counts(db_session, "May")

        assert {item.category: item.count for item in result} == {
            "electronics": 2,
            "jewelery": 1,
        }

    async def test_empty_month(self, db_session, sample_transactions):
        assert await compute_category_counts(db_session, "June") == []
