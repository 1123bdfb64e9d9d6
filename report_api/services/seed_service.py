"""Seed data loader module.

Replaces the entire transaction table with the JSON array published by the
seed data source.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

import httpx
from pydantic import ValidationError
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from report_api.database.database import store_call
from report_api.exceptions.api_exception import SeedDataError, SeedFetchError
from report_api.models.transaction import Transaction
from report_api.schemas.transaction import TransactionSeed
from report_api.settings import settings

logger = logging.getLogger(__name__)


def _to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize offset-aware timestamps to naive UTC for month bucketing."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _to_decimal(value: Optional[float]) -> Optional[Decimal]:
    return None if value is None else Decimal(str(value))


def parse_seed_payload(payload: Any) -> list[TransactionSeed]:
    """
    Validate the seed payload.

    Args:
        payload: Decoded JSON document

    Returns:
        One TransactionSeed per array element

    Raises:
        SeedDataError: If the payload is not an array of transaction objects
    """
    if not isinstance(payload, list):
        raise SeedDataError(
            f"Seed data must be a JSON array, got {type(payload).__name__}"
        )

    records = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise SeedDataError(f"Seed item {index} is not an object")
        try:
            records.append(TransactionSeed.model_validate(item))
        except ValidationError as exc:
            raise SeedDataError(f"Seed item {index} is invalid: {exc}") from exc
    return records


async def fetch_seed_data(
    source_url: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> Any:
    """Download and decode the seed JSON document."""
    limit = timeout if timeout is not None else settings.SEED_TIMEOUT_SECONDS
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=limit) as own_client:
                response = await own_client.get(source_url)
        else:
            response = await client.get(source_url, timeout=limit)
        response.raise_for_status()
        return response.json()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("Fetching seed data from %s failed: %s", source_url, exc)
        raise SeedFetchError(f"Failed to fetch seed data: {exc}") from exc
    except ValueError as exc:
        logger.error("Seed data from %s is not valid JSON: %s", source_url, exc)
        raise SeedFetchError(f"Seed data is not valid JSON: {exc}") from exc


async def initialize_database(
    db: AsyncSession,
    source_url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> int:
    """
    Replace all stored transactions with the seed data.

    Existing rows are deleted and the fetched records inserted in one
    transaction; on a store failure the transaction is rolled back.

    Args:
        db: Database session
        source_url: Seed document URL (defaults to settings.SEED_DATA_URL)
        client: Optional httpx client to fetch with
        timeout: Fetch timeout in seconds

    Returns:
        Number of transactions loaded
    """
    url = source_url or settings.SEED_DATA_URL
    logger.info("Fetching seed data from %s", url)
    payload = await fetch_seed_data(url, client=client, timeout=timeout)
    records = parse_seed_payload(payload)
    logger.info("Fetched %d seed transaction(s)", len(records))

    db_transactions = [
        Transaction(
            id=record.id,
            title=record.title,
            price=_to_decimal(record.price),
            description=record.description,
            category=record.category,
            sold=record.sold,
            date_of_sale=_to_utc_naive(record.date_of_sale),
            image=record.image,
        )
        for record in records
    ]

    try:
        await store_call(db.execute(delete(Transaction)), "Clearing transactions")
        db.add_all(db_transactions)
        await store_call(db.commit(), "Inserting transactions")
    except Exception:
        await db.rollback()
        raise

    logger.info("Database initialized with %d transaction(s)", len(db_transactions))
    return len(db_transactions)
