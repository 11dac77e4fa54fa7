"""Root conftest: shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - All sessions of one test share a single connection (StaticPool)
"""

import os

# Keep tests off any real database configured in the environment
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from products_api.db.base import Base  # noqa: E402
from products_api.models.product import Product  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
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
def make_product(test_session_factory):
    """Insert a product row directly, bypassing the API. Returns its ProductRecord."""
    async def _make(name="Monitor Curvo", price=300.0, availability=True):
        async with test_session_factory() as db:
            product = Product(name=name, price=price, availability=availability)
            db.add(product)
            await db.commit()
            await db.refresh(product)
            return product.to_record()
    return _make
