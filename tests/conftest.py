"""
Shared pytest fixtures for catalog tests.

The application is configured against an in-memory SQLite database and with
caching disabled before any catalog module is imported.
"""

import fnmatch
import os
from datetime import datetime, timezone
from typing import Dict, Optional

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = ""
os.environ["LOG_JSON"] = "false"

from fastapi.testclient import TestClient  # noqa: E402

from catalog.data.database.connection import Base, SessionLocal, engine  # noqa: E402
from catalog.data.database.category_model import Category  # noqa: E402
from catalog.data.database.product_model import Product  # noqa: E402
from catalog.utils.cache import NullCache, RedisCache  # noqa: E402


class FakeRedis:
    """Minimal in-process stand-in for the redis-py client methods the cache uses."""

    def __init__(self):
        self.store: Dict[str, bytes] = {}
        self.ttls: Dict[str, Optional[int]] = {}

    def ping(self):
        return True

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, ex=None):
        self.store[key] = value
        self.ttls[key] = ex
        return True

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if key in self.store:
                del self.store[key]
                self.ttls.pop(key, None)
                removed += 1
        return removed

    def scan_iter(self, match="*"):
        return [key for key in list(self.store) if fnmatch.fnmatchcase(key, match)]

    def close(self):
        pass


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def redis_cache(fake_redis):
    return RedisCache(fake_redis)


@pytest.fixture
def db_session():
    """Fresh schema per test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_category(db_session):
    def _make(name="Tools", description="Hand tools"):
        category = Category(name=name, description=description)
        db_session.add(category)
        db_session.commit()
        db_session.refresh(category)
        return category
    return _make


@pytest.fixture
def make_product(db_session):
    def _make(category, name="Hammer", price=10, stock_quantity=5, is_active=True, description=None):
        product = Product(
            name=name,
            description=description or f"{name} description",
            price=price,
            stock_quantity=stock_quantity,
            is_active=is_active,
            category_id=category.id,
        )
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product
    return _make


@pytest.fixture
def detached_product():
    """Build an unsaved product that still validates as a response."""
    def _make(product_id=1, name="Hammer", price=10, stock_quantity=5, category_id=1):
        now = datetime.now(timezone.utc)
        return Product(
            id=product_id,
            name=name,
            description=f"{name} description",
            price=price,
            stock_quantity=stock_quantity,
            is_active=True,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
    return _make


@pytest.fixture
def client(db_session):
    """Test client over a clean database with caching disabled."""
    from catalog.main import app

    app.state.cache = NullCache()
    with TestClient(app) as test_client:
        yield test_client
    app.state.cache = NullCache()


@pytest.fixture
def cached_client(client, redis_cache):
    """Test client whose cache is backed by FakeRedis."""
    client.app.state.cache = redis_cache
    return client
