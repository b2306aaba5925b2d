"""Service test fixtures — async DB + FastAPI test clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - get_db dependency overridden to use the test DB session
    - `client` sends valid Basic credentials; `anonymous_client` sends none

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - httpx ASGITransport does not run the lifespan, so db_manager stays unset
      unless a test patches it
"""

import base64
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from warehouse_api.db.base import Base
from warehouse_api.infrastructure.database import enable_sqlite_foreign_keys, get_db
from warehouse_api.main import app
from warehouse_api.models import Category, Product

USERNAME = "warehouse"
PASSWORD = "s3cret"


def basic_header(username: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def make_basic_header():
    return basic_header


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def db_calls(test_session_factory):
    """Override get_db with a recording wrapper; returns the call log."""
    calls: list[str] = []

    async def override_get_db():
        calls.append("get_db")
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield calls
    app.dependency_overrides.clear()


@pytest.fixture
async def client(db_calls):
    """FastAPI test client with valid credentials and the test DB."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=basic_header(USERNAME, PASSWORD),
    ) as c:
        yield c


@pytest.fixture
async def anonymous_client(db_calls):
    """FastAPI test client that sends no Authorization header."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_category(test_db):
    """Insert a category directly into the test DB."""
    category = Category(name="Soft Drinks", description="Carbonated")
    test_db.add(category)
    await test_db.commit()
    await test_db.refresh(category)
    return category


@pytest.fixture
async def seed_product(test_db, seed_category):
    """Insert a product in seed_category directly into the test DB."""
    product = Product(
        name="Cola", category_id=seed_category.id, brand="Fizz",
        volume=Decimal("0.50"), price=Decimal("1.20"),
        production_date=date(2026, 1, 10), expiration_date=date(2026, 12, 31),
        quantity=10,
    )
    test_db.add(product)
    await test_db.commit()
    await test_db.refresh(product)
    return product
