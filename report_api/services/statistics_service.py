"""Statistics service module.

Computes the monthly sales totals shown above the dashboard charts.
"""
from typing import Optional

from sqlalchemy import select, func, case
from sqlalchemy.ext.asyncio import AsyncSession

from report_api.database.database import store_call
from report_api.models.transaction import Transaction
from report_api.schemas.statistics import StatisticsResponse
from report_api.services.months import month_filter


async def compute_statistics(db: AsyncSession, month: Optional[str]) -> StatisticsResponse:
    """
    Compute sales statistics for a month.

    - totalSale: sum of price over all transactions, sold or not
    - soldItems: transactions with sold = true
    - notSoldItems: transactions with sold = false
    """
    query = select(
        func.coalesce(func.sum(Transaction.price), 0).label("total_sale"),
        func.coalesce(func.sum(case((Transaction.sold.is_(True), 1), else_=0)), 0).label("sold_items"),
        func.coalesce(func.sum(case((Transaction.sold.is_(False), 1), else_=0)), 0).label("not_sold_items"),
    ).where(month_filter(month))

    result = await store_call(db.execute(query), "Statistics aggregation")
    row = result.one()

    return StatisticsResponse(
        total_sale=float(row.total_sale),
        sold_items=int(row.sold_items),
        not_sold_items=int(row.not_sold_items),
    )
