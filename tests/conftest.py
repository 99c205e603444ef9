"""
Pytest fixtures for the shopkeeper test suite.

Provides:
- An in-memory SQLite database, schema created and dropped per test
- A SQLAlchemy session and a FastAPI TestClient sharing that database
- Shop and product factories
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from shopkeeper.core.rate_limiter import limiter
from shopkeeper.database import Base, SessionLocal, engine
from shopkeeper.main import app
from shopkeeper.models.product import Product
from shopkeeper.models.shop import Shop


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    limiter.reset()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_shop(db):
    def _make(name="Sharma General Store", upi_id="sharmastore@ybl", **fields):
        shop = Shop(
            name=name,
            owner_name=fields.pop("owner_name", "Ravi Sharma"),
            phone=fields.pop("phone", "9876543210"),
            upi_id=upi_id,
            **fields,
        )
        db.add(shop)
        db.commit()
        db.refresh(shop)
        return shop

    return _make


@pytest.fixture
def shop(make_shop):
    return make_shop()


@pytest.fixture
def headers(shop):
    return {"X-Shop-Id": str(shop.id)}


@pytest.fixture
def make_product(db, shop):
    def _make(name, price="10.00", stock="0", min_stock="0", shop_id=None, **fields):
        product = Product(
            name=name,
            price=Decimal(price),
            stock=Decimal(stock),
            min_stock=Decimal(min_stock),
            shop_id=shop_id or shop.id,
            **fields,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make
