"""Transaction schemas module."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class TransactionBase(BaseModel):
    """Base transaction schema with the record fields.

    Every field is optional; the store keeps whatever the seed source supplies.
    """

    id: Optional[int] = Field(None, description="External record identifier")
    title: Optional[str] = Field(None, description="Product title")
    price: Optional[float] = Field(None, description="Sale price")
    description: Optional[str] = Field(None, description="Product description")
    category: Optional[str] = Field(None, description="Free-form category label")
    sold: Optional[bool] = Field(None, description="Whether the item was sold")
    date_of_sale: Optional[datetime] = Field(
        None, alias="dateOfSale", description="Sale timestamp"
    )
    image: Optional[str] = Field(None, description="Product image URL")

    model_config = ConfigDict(populate_by_name=True)


class TransactionSeed(TransactionBase):
    """Schema for one object of the seed payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TransactionResponse(TransactionBase):
    """Schema for transaction response."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_serializer("date_of_sale", when_used="json")
    def serialize_date_of_sale(self, value: Optional[datetime]) -> Optional[str]:
        """Sale dates are stored as naive UTC; emit them with a Z suffix."""
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
        return value.isoformat().replace("+00:00", "Z")


class TransactionListResponse(BaseModel):
    """Schema for a month-scoped, searched page of transactions."""

    transactions: list[TransactionResponse] = Field(
        default_factory=list, description="Transactions on the requested page"
    )
    total: int = Field(..., description="Total number of matching transactions")
    page: int = Field(..., description="Requested page number")
    total_pages: int = Field(..., alias="totalPages", description="Total number of pages")

    model_config = ConfigDict(populate_by_name=True)


class InitializeDatabaseResponse(BaseModel):
    """Schema for the bulk reload response."""

    message: str = Field(..., description="Operation result message")
    count: int = Field(..., description="Number of transactions loaded")
