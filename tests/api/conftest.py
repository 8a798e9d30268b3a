"""Route test fixtures — async SQLite DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with FK enforcement on
    - get_db dependency overridden to use the test DB session
    - db_manager points at the test engine so the readiness probe sees it
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import storefront.infrastructure.database as db_module
from storefront.config import get_settings
from storefront.db.base import Base
from storefront.infrastructure.database import (
    DatabaseSessionManager, create_engine, get_db,
)
from storefront.main import app
from storefront.models import Product, Store, User


@pytest.fixture
async def test_engine():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def production_mode(monkeypatch):
    """Run a test with ENV=production (raw error detail hidden)."""
    monkeypatch.setenv("ENV", "production")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def seed_user(test_db):
    user = User(name="Ana", email="ana@example.com", password="secret")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_store(test_db, seed_user):
    store = Store(name="Corner Shop", user_id=seed_user.id)
    test_db.add(store)
    await test_db.commit()
    await test_db.refresh(store)
    return store


@pytest.fixture
async def seed_product(test_db, seed_store):
    product = Product(name="Coffee", price=12.5, store_id=seed_store.id)
    test_db.add(product)
    await test_db.commit()
    await test_db.refresh(product)
    return product
