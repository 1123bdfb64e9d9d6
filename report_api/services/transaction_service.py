"""Transaction listing service module.

Builds the month-scoped search filter and returns one page of matching
transactions with the total match count.
"""
import math
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Optional

from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from report_api.database.database import store_call
from report_api.models.transaction import PRICE_PRECISION, PRICE_SCALE, Transaction
from report_api.schemas.transaction import TransactionListResponse, TransactionResponse
from report_api.services.months import month_filter

_PRICE_LIMIT = Decimal(10) ** (PRICE_PRECISION - PRICE_SCALE)
_PRICE_STEP = Decimal(10) ** -PRICE_SCALE


def _parse_price(search: str) -> Optional[Decimal]:
    """Return ``search`` as a number when it could equal a stored price, else None.

    Values the price column cannot hold (too large, or more decimal places
    than its scale) match nothing and are not sent to the store.
    """
    try:
        value = Decimal(search.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    if abs(value) >= _PRICE_LIMIT:
        return None
    if value != value.quantize(_PRICE_STEP, rounding=ROUND_DOWN):
        return None
    return value


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_transaction_filter(month: Optional[str], search: str = "") -> ColumnElement[bool]:
    """
    Build the filter for the transaction listing.

    The month filter always applies. A non-empty search additionally requires
    a case-insensitive substring match on title or description, or an exact
    price match when the search text is numeric.
    """
    criteria = month_filter(month)
    if not search:
        return criteria

    search_pattern = f"%{_escape_like(search)}%"
    conditions = [
        Transaction.title.ilike(search_pattern, escape="\\"),
        Transaction.description.ilike(search_pattern, escape="\\"),
    ]
    price = _parse_price(search)
    if price is not None:
        conditions.append(Transaction.price == price)

    return criteria & or_(*conditions)


async def list_transactions(
    db: AsyncSession,
    month: Optional[str],
    search: str = "",
    page: int = 1,
    per_page: int = 10,
) -> TransactionListResponse:
    """
    List one page of transactions for a month.

    Args:
        db: Database session
        month: Month name (e.g. "March"); unknown months match nothing
        search: Optional free-text search
        page: 1-based page number
        per_page: Page size

    Returns:
        TransactionListResponse with the page, total count and page count
    """
    criteria = build_transaction_filter(month, search)
    skip = (page - 1) * per_page

    query = (
        select(Transaction)
        .where(criteria)
        .order_by(Transaction.pk)
        .offset(skip)
        .limit(per_page)
    )
    result = await store_call(db.execute(query), "Transaction listing")
    items = result.scalars().all()

    count_query = select(func.count()).select_from(Transaction).where(criteria)
    count_result = await store_call(db.execute(count_query), "Transaction count")
    total = count_result.scalar() or 0

    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(item) for item in items],
        total=total,
        page=page,
        total_pages=math.ceil(total / per_page),
    )
