#!/usr/bin/env python
"""
Database Initialization Script

Replaces all transactions in the record store with the seed data, without
going through the HTTP API.

Usage:
    python initialize_database.py
    python initialize_database.py --database-url sqlite+aiosqlite:///transactions.db
    python initialize_database.py --source-url https://example.com/transactions.json
    python initialize_database.py --timeout 60
"""
import argparse
import asyncio
import sys

from report_api.database.database import RecordStore
from report_api.exceptions.api_exception import APIException
from report_api.services.seed_service import initialize_database
from report_api.settings import settings


async def run(database_url: str, source_url: str, timeout: float) -> int:
    """
    Create the schema if needed and load the seed data.

    Args:
        database_url: SQLAlchemy async database URL
        source_url: Seed JSON document URL
        timeout: Fetch timeout in seconds

    Returns:
        Number of transactions loaded
    """
    store = RecordStore(database_url)
    try:
        await store.create_schema()
        async with store.session() as session:
            return await initialize_database(session, source_url=source_url, timeout=timeout)
    finally:
        await store.dispose()


def main():
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Load seed transactions into the record store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --database-url sqlite+aiosqlite:///transactions.db
  %(prog)s --source-url https://example.com/transactions.json --timeout 60
        """
    )

    parser.add_argument(
        "--database-url",
        type=str,
        default=settings.DATABASE_URL,
        help="Database URL (default: DATABASE_URL setting)"
    )

    parser.add_argument(
        "--source-url",
        type=str,
        default=settings.SEED_DATA_URL,
        help="Seed data URL (default: SEED_DATA_URL setting)"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.SEED_TIMEOUT_SECONDS,
        help="Fetch timeout in seconds (default: SEED_TIMEOUT_SECONDS setting)"
    )

    args = parser.parse_args()

    print(f"Loading transactions from {args.source_url}")
    try:
        count = asyncio.run(run(args.database_url, args.source_url, args.timeout))
    except APIException as e:
        print(f"Error: {e.detail}", file=sys.stderr)
        sys.exit(1)

    print(f"Database initialized with {count} transaction(s)")


if __name__ == "__main__":
    main()
