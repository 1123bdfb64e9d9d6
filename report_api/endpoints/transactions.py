"""Transaction endpoints module.

Provides the bulk reload from the seed source and the month-scoped,
searchable transaction listing.
"""
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from report_api.database.database import get_db
from report_api.schemas.transaction import (
    InitializeDatabaseResponse,
    TransactionListResponse,
)
from report_api.services.seed_service import initialize_database
from report_api.services.transaction_service import list_transactions
from report_api.settings import settings

router = APIRouter(prefix="/api", tags=["transactions"])


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency for the shared outbound HTTP client."""
    return request.app.state.http_client


@router.get("/initialize-database", response_model=InitializeDatabaseResponse)
async def initialize(
    db: AsyncSession = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> InitializeDatabaseResponse:
    """
    Replace all transactions with the seed data.

    Destructive: existing transactions are discarded before the insert.
    """
    count = await initialize_database(db, client=client)
    return InitializeDatabaseResponse(
        message="Database initialized successfully",
        count=count,
    )


@router.get("/transactions", response_model=TransactionListResponse)
async def get_transactions(
    month: Optional[str] = Query(None, description="Month name, e.g. March"),
    search: str = Query("", description="Matches title, description or exact price"),
    page: int = Query(1, ge=1, description="Page number"),
    per_page: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        alias="perPage",
        ge=1,
        le=1000,
        description="Items per page",
    ),
    db: AsyncSession = Depends(get_db),
) -> TransactionListResponse:
    """
    List transactions sold in a month with search and pagination.

    Returns:
    - **transactions**: The requested page
    - **total**: Number of matching transactions
    - **page**: Requested page number
    - **totalPages**: ceil(total / perPage)
    """
    return await list_transactions(
        db=db,
        month=month,
        search=search,
        page=page,
        per_page=per_page,
    )
