"""Statistics endpoint module.

Provides endpoints for monthly statistics, the price-range bar chart, the
category pie chart and the combined dashboard payload.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from report_api.database.database import RecordStore, get_db, get_store
from report_api.schemas.statistics import (
    StatisticsResponse,
    PriceRangeItem,
    CategoryCountItem,
    CombinedDataResponse,
)
from report_api.services.statistics_service import compute_statistics
from report_api.services.chart_service import compute_price_ranges, compute_category_counts
from report_api.services.combined_service import compute_combined_data

router = APIRouter(prefix="/api", tags=["statistics"])

MONTH_DESCRIPTION = "Month name, e.g. March"


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    db: AsyncSession = Depends(get_db),
) -> StatisticsResponse:
    """
    Get sales statistics for a month.

    - **totalSale**: Sum of prices of all transactions
    - **soldItems**: Number of sold items
    - **notSoldItems**: Number of items not sold
    """
    return await compute_statistics(db=db, month=month)


@router.get("/bar-chart", response_model=list[PriceRangeItem])
async def get_bar_chart(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    db: AsyncSession = Depends(get_db),
) -> list[PriceRangeItem]:
    """Get the number of items per price range for a month."""
    return await compute_price_ranges(db=db, month=month)


@router.get("/pie-chart", response_model=list[CategoryCountItem])
async def get_pie_chart(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    db: AsyncSession = Depends(get_db),
) -> list[CategoryCountItem]:
    """Get the number of items per category for a month."""
    return await compute_category_counts(db=db, month=month)


@router.get("/combined-data", response_model=CombinedDataResponse)
async def get_combined_data(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    store: RecordStore = Depends(get_store),
) -> CombinedDataResponse:
    """
    Get statistics, bar chart and pie chart for a month in one response.

    Fails as a whole if any part fails.
    """
    return await compute_combined_data(store=store, month=month)
