"""
Pytest fixtures for the Gents by Elegante backend.

The web app and the auth-helpers function share one in-memory SQLite
database; the web app reaches the function through its TestClient, so
login and user creation run the real hashing round-trip.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ELEGANTE_API_URL"] = "http://testserver"
os.environ["ELEGANTE_ANON_KEY"] = "test-anon-key"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from database import Base, engine, SessionLocal
from main import app
from functions.auth_helpers import app as auth_app
from models.product import Product
from models.setting import seed_default_settings
from models.users import Role, User
import utils.auth_service as auth_service_module
from utils.auth_service import AuthServiceClient
from utils.hashing import get_password_hash

ANON_KEY = "test-anon-key"

PASSWORDS = {
    Role.SUPER_ADMIN: "root-pass",
    Role.ADMIN: "admin-pass",
    Role.SALES_STAFF: "staff-pass",
}
USERNAMES = {
    Role.SUPER_ADMIN: "owner",
    Role.ADMIN: "manager",
    Role.SALES_STAFF: "clerk",
}


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate schema (and triggers) for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_default_settings(session)
    finally:
        session.close()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_client():
    """Direct client of the auth-helpers function."""
    return TestClient(auth_app)


@pytest.fixture
def auth_service(auth_client):
    return AuthServiceClient(api_url="http://testserver", anon_key=ANON_KEY, http=auth_client)


@pytest.fixture
def client(auth_service, monkeypatch):
    """Web app client; entering it runs startup (default admin bootstrap)."""
    monkeypatch.setattr(auth_service_module, "auth_service", auth_service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def users(db):
    created = {}
    for role in Role:
        user = User(username=USERNAMES[role], password=get_password_hash(PASSWORDS[role]), role=role)
        db.add(user)
        created[role] = user
    db.commit()
    for user in created.values():
        db.refresh(user)
    return created


def login_as(client, role):
    resp = client.post("/login", json={"username": USERNAMES[role], "password": PASSWORDS[role]})
    assert resp.status_code == 200, resp.text
    return resp.json()["user"]


@pytest.fixture
def as_super_admin(client, users):
    login_as(client, Role.SUPER_ADMIN)
    return client


@pytest.fixture
def as_admin(client, users):
    login_as(client, Role.ADMIN)
    return client


@pytest.fixture
def as_sales_staff(client, users):
    login_as(client, Role.SALES_STAFF)
    return client


def add_product(client, name="Linen Shirt", sku="LS-01", buy_price=60, sell_price=100, stock=0):
    """Create a product through the API and optionally deliver stock for it."""
    resp = client.post("/products", json={
        "name": name, "sku": sku, "buy_price": buy_price, "sell_price": sell_price,
    })
    assert resp.status_code == 201, resp.text
    product = resp.json()
    if stock:
        resp = client.post("/stock", json={"product_id": product["id"], "quantity": stock})
        assert resp.status_code == 201, resp.text
    return product


def product_quantity(product_id):
    session = SessionLocal()
    try:
        return session.get(Product, product_id).quantity
    finally:
        session.close()
