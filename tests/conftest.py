import os
from decimal import Decimal
from pathlib import Path

# przed importem pakietu - settings czyta env przy imporcie
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["HISTORY_BACKEND"] = "memory"
os.environ["PRODUCT_SERVICE_URL"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import essence_orders.data.models  # noqa: F401
from essence_orders.api import create_app
from essence_orders.data.database import Base, get_db
from essence_orders.data.models import AddressModel, CustomerModel, ProductModel
from essence_orders.domain.ports import ProductInfo
from essence_orders.repos.cart_repo import CartRepo
from essence_orders.repos.customer_repo import CustomerRepo
from essence_orders.repos.order_repo import OrderRepo
from essence_orders.services.cart_service import CartService
from essence_orders.services.cart_store import CartStore
from essence_orders.services.history_store import MemoryHistoryStore, get_history_store
from essence_orders.services.order_service import OrderService
from essence_orders.services.stock_service import StockChecker


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))
        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/services/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/api/" in test_path:
            item.add_marker(pytest.mark.api)


class FakeProducts:
    """In-memory ProductLookup."""

    def __init__(self, products=None):
        self.products = {p.id: p for p in (products or [])}

    def add(self, product_id, name, price, stock):
        self.products[product_id] = ProductInfo(
            id=product_id, name=name, price=Decimal(str(price)), stock=stock
        )

    def set_stock(self, product_id, stock):
        self.products[product_id] = self.products[product_id].model_copy(update={"stock": stock})

    def get_product(self, product_id):
        return self.products.get(product_id)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def products():
    fake = FakeProducts()
    fake.add("P1", "Noir Absolu Extrait 50ml", "10.00", 10)
    fake.add("P2", "Fleur de Sel Eau de Toilette 100ml", "15.00", 5)
    fake.add("P3", "Ambre Royal Elixir 75ml", "210.50", 1)
    return fake


@pytest.fixture()
def histories():
    return MemoryHistoryStore(ttl=3600)


@pytest.fixture()
def customers(db):
    """Two customers, each with one saved address."""
    alice = CustomerModel(id=1, name="Alice", email="alice@example.com")
    alice.addresses.append(AddressModel(province="San Jose", canton="Escazu", district="San Rafael"))
    bob = CustomerModel(id=2, name="Bob", email="bob@example.com")
    bob.addresses.append(AddressModel(province="Heredia", canton="Belen", district="La Ribera"))
    db.add_all([alice, bob])
    db.commit()
    return {
        "alice": alice.id,
        "alice_address": alice.addresses[0].id,
        "bob": bob.id,
        "bob_address": bob.addresses[0].id,
    }


@pytest.fixture()
def cart_service(db, products, histories):
    return CartService(
        store=CartStore(CartRepo(db), products),
        products=products,
        histories=histories,
    )


@pytest.fixture()
def order_service(db, products):
    return OrderService(
        repo=OrderRepo(db),
        cart_store=CartStore(CartRepo(db), products),
        addresses=CustomerRepo(db),
        stock=StockChecker(products),
    )


@pytest.fixture()
def catalog(db):
    """Products in the local products table, used by the HTTP layer."""
    db.add_all(
        [
            ProductModel(id="P1", name="Noir Absolu Extrait 50ml", price=Decimal("10.00"), stock=10),
            ProductModel(id="P2", name="Fleur de Sel Eau de Toilette 100ml", price=Decimal("15.00"), stock=5),
        ]
    )
    db.commit()


@pytest.fixture()
def client(session_factory, histories):
    app = create_app()

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_history_store] = lambda: histories
    return TestClient(app)
