"""Transaction model module."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import String, Integer, Boolean, DateTime, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from report_api.database.database import Base

PRICE_PRECISION = 10
PRICE_SCALE = 2


class Transaction(Base):
    """Product transaction record loaded from the seed source."""

    __tablename__ = "transactions"

    # Surrogate key; the external ``id`` is not guaranteed unique
    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    title: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(128), nullable=True, index=True)
    sold: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    date_of_sale: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, index=True)
    image: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
