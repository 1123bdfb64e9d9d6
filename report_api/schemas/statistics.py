"""Statistics and chart schemas module.

Defines response schemas for the monthly statistics, price-range bar chart,
category pie chart and the combined payload.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Statistics Component ---

class StatisticsResponse(BaseModel):
    """Monthly sales totals."""

    total_sale: float = Field(
        ...,
        alias="totalSale",
        description="Sum of prices over every transaction in the month",
    )
    sold_items: int = Field(
        ...,
        alias="soldItems",
        description="Number of sold transactions in the month",
    )
    not_sold_items: int = Field(
        ...,
        alias="notSoldItems",
        description="Number of unsold transactions in the month",
    )

    model_config = ConfigDict(populate_by_name=True)


# --- Bar Chart Component ---

class PriceRangeItem(BaseModel):
    """Transaction count for one price bucket."""

    range: str = Field(..., description="Bucket label, e.g. '101-200' or '901-above'")
    count: int = Field(..., description="Number of transactions in the bucket")


# --- Pie Chart Component ---

class CategoryCountItem(BaseModel):
    """Transaction count for one category."""

    category: Optional[str] = Field(None, description="Category label")
    count: int = Field(..., description="Number of transactions in the category")


# --- Combined Payload ---

class CombinedDataResponse(BaseModel):
    """Statistics, bar chart and pie chart for one month."""

    statistics: StatisticsResponse
    bar_chart: list[PriceRangeItem] = Field(..., alias="barChart")
    pie_chart: list[CategoryCountItem] = Field(..., alias="pieChart")

    model_config = ConfigDict(populate_by_name=True)
