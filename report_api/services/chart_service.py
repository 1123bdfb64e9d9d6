"""Chart service module.

Provides the price-range histogram (bar chart) and the category breakdown
(pie chart) for a month.
"""
from typing import Optional

from sqlalchemy import select, func, case
from sqlalchemy.ext.asyncio import AsyncSession

from report_api.database.database import store_call
from report_api.models.transaction import Transaction
from report_api.schemas.statistics import PriceRangeItem, CategoryCountItem
from report_api.services.months import month_filter

# =============================================================================
# PRICE BUCKETS
# =============================================================================
# Each bucket matches min <= price < max; None means no upper bound.
# Lower bounds start one above the previous upper bound, so prices in
# [100, 101), [200, 201) ... [900, 901) fall into no bucket.

PRICE_RANGES: list[tuple[int, Optional[int]]] = [
    (0, 100),
    (101, 200),
    (201, 300),
    (301, 400),
    (401, 500),
    (501, 600),
    (601, 700),
    (701, 800),
    (801, 900),
    (901, None),
]


def _range_label(low: int, high: Optional[int]) -> str:
    return f"{low}-{'above' if high is None else high}"


def _bucket_condition(low: int, high: Optional[int]):
    condition = Transaction.price >= low
    if high is not None:
        condition = condition & (Transaction.price < high)
    return condition


async def compute_price_ranges(db: AsyncSession, month: Optional[str]) -> list[PriceRangeItem]:
    """
    Count the month's transactions per price bucket.

    Always returns all ten buckets in ascending order, using a single
    conditional-count query.
    """
    columns = [
        func.coalesce(
            func.sum(case((_bucket_condition(low, high), 1), else_=0)), 0
        ).label(f"bucket_{index}")
        for index, (low, high) in enumerate(PRICE_RANGES)
    ]
    query = select(*columns).where(month_filter(month))

    result = await store_call(db.execute(query), "Price range aggregation")
    row = result.one()

    return [
        PriceRangeItem(range=_range_label(low, high), count=int(row[index]))
        for index, (low, high) in enumerate(PRICE_RANGES)
    ]


async def compute_category_counts(db: AsyncSession, month: Optional[str]) -> list[CategoryCountItem]:
    """Count the month's transactions per distinct category."""
    query = (
        select(Transaction.category, func.count().label("count"))
        .where(month_filter(month))
        .group_by(Transaction.category)
    )

    result = await store_call(db.execute(query), "Category aggregation")
    return [
        CategoryCountItem(category=category, count=count)
        for category, count in result.all()
    ]
