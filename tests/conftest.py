"""Pytest fixtures for a file-backed async SQLite record store."""
from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio

from report_api.database.database import RecordStore
from report_api.models.transaction import Transaction


@pytest_asyncio.fixture
async def record_store(tmp_path):
    """Create a SQLite record store in a temporary file.

    A file is used instead of :memory: so that concurrent sessions see the
    same data.
    """
    store = RecordStore(f"sqlite+aiosqlite:///{tmp_path / 'transactions.db'}")
    await store.create_schema()
    yield store
    await store.dispose()


@pytest_asyncio.fixture
async def db_session(record_store):
    """Open a session on the test record store."""
    async with record_store.session() as session:
        yield session


@pytest.fixture
def make_transaction():
    """Build Transaction rows with sensible defaults."""
    def _make(**overrides) -> Transaction:
        values = {
            "id": 1,
            "title": "Generic Product",
            "price": Decimal("10.00"),
            "description": "A generic product",
            "category": "misc",
            "sold": True,
            "date_of_sale": datetime(2022, 3, 1, 12, 0),
            "image": "https://example.com/product.jpg",
        }
        values.update(overrides)
        return Transaction(**values)
    return _make


@pytest_asyncio.fixture
async def sample_transactions(db_session, make_transaction):
    """Create sample transactions.

    March holds three records from different years priced 50, 150 and 999.
    April includes a price of exactly 100, which falls into no price range.
    """
    transactions = [
        # March, any year
        make_transaction(
            id=1,
            title="Fjallraven Backpack",
            description="Your perfect pack for everyday use and walks in the forest",
            price=Decimal("50.00"),
            category="men's clothing",
            sold=True,
            date_of_sale=datetime(2022, 3, 10, 9, 30),
        ),
        make_transaction(
            id=2,
            title="Solid Gold Petite Micropave",
            description="Classic created wedding engagement solitaire ring",
            price=Decimal("150.00"),
            category="jewelery",
            sold=False,
            date_of_sale=datetime(2021, 3, 27, 18, 5),
        ),
        make_transaction(
            id=3,
            title="Samsung 49-Inch Monitor",
            description="Super ultrawide gaming monitor",
            price=Decimal("999.00"),
            category="electronics",
            sold=True,
            date_of_sale=datetime(2023, 3, 2, 7, 45),
        ),
        # April
        make_transaction(
            id=4,
            title="Mens Cotton Jacket",
            description="Great outerwear jacket for spring",
            price=Decimal("100.00"),
            category="men's clothing",
            sold=False,
            date_of_sale=datetime(2022, 4, 15, 10, 0),
        ),
        make_transaction(
            id=5,
            title="WD 2TB Elements Portable Drive",
            description="USB 3.0 and USB 2.0 compatibility",
            price=Decimal("64.00"),
            category="electronics",
            sold=True,
            date_of_sale=datetime(2022, 4, 20, 16, 20),
        ),
        # November
        make_transaction(
            id=6,
            title="Rain Jacket Women Windbreaker",
            description="Lightweight striped climbing raincoat",
            price=Decimal("39.99"),
            category="women's clothing",
            sold=False,
            date_of_sale=datetime(2021, 11, 5, 8, 0),
        ),
    ]
    db_session.add_all(transactions)
    await db_session.commit()
    return transactions
