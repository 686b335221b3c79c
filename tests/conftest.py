"""Shared fixtures: a fresh in-memory store and an HTTP client per test."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from product_api.database import Database
from product_api.main import create_app
from product_api.models import Product


@pytest.fixture
async def database():
    # StaticPool keeps a single connection so the :memory: database survives
    # across sessions.
    db = Database("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)

    # SQLite's LIKE ignores ASCII case by default; PostgreSQL's does not.
    @event.listens_for(db.engine.sync_engine, "connect")
    def _case_sensitive_like(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.close()

    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture
async def client(database):
    app = create_app(database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def add_products(database):
    """Insert ``count`` rows named ``Product <i>`` priced ``(i + 1) * 10``."""

    async def _add(count: int = 1):
        async with database.session() as session:
            session.add_all(
                Product(name=f"Product {i}", price=(i + 1) * 10) for i in range(max(count, 1))
            )
            await session.commit()

    return _add
