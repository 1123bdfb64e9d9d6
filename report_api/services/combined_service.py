"""Combined dashboard data service module.

Runs the statistics, bar chart and pie chart computations concurrently and
merges them into one payload.
"""
import asyncio
import logging
from typing import Optional

from report_api.database.database import RecordStore
from report_api.schemas.statistics import CombinedDataResponse
from report_api.services.chart_service import compute_category_counts, compute_price_ranges
from report_api.services.statistics_service import compute_statistics

logger = logging.getLogger(__name__)


async def _with_session(store: RecordStore, compute, month: Optional[str]):
    # AsyncSession is not safe for concurrent use, so each sub-call gets its own
    async with store.session() as session:
        return await compute(session, month)


async def compute_combined_data(store: RecordStore, month: Optional[str]) -> CombinedDataResponse:
    """
    Compute statistics, price ranges and category counts for a month.

    The three sub-computations run concurrently. If any of them fails the
    others are cancelled and the error propagates; no partial payload is
    returned.
    """
    tasks = [
        asyncio.ensure_future(_with_session(store, compute, month))
        for compute in (compute_statistics, compute_price_ranges, compute_category_counts)
    ]
    try:
        statistics, bar_chart, pie_chart = await asyncio.gather(*tasks)
    except Exception:
        logger.exception("Combined data computation failed for month=%r", month)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    return CombinedDataResponse(
        statistics=statistics,
        bar_chart=bar_chart,
        pie_chart=pie_chart,
    )
