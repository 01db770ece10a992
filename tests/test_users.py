"""
Users page: listing and creation through the auth service.
"""

from models.users import User
from utils.hashing import verify_password


def test_list_hides_passwords(as_super_admin):
    page = as_super_admin.get("/users").json()
    # owner, manager, clerk and the bootstrap admin
    assert page["total"] == 4
    assert all("password" not in u for u in page["items"])


def test_create_user_via_auth_service(as_super_admin, db):
    resp = as_super_admin.post("/users", json={"username": "akinyi", "password": "till-123", "role": "sales_staff"})
    assert resp.status_code == 201
    assert resp.json()["role"] == "sales_staff"

    stored = db.query(User).filter(User.username == "akinyi").one()
    assert verify_password("till-123", stored.password)

    # the new account can log in straight away
    login = as_super_admin.post("/login", json={"username": "akinyi", "password": "till-123"})
    assert login.status_code == 200


def test_duplicate_username(as_super_admin):
    resp = as_super_admin.post("/users", json={"username": "clerk", "password": "whatever", "role": "admin"})
    assert resp.status_code == 400
    assert "already exists" in resp.json()["detail"]


def test_short_password_rejected(as_super_admin):
    resp = as_super_admin.post("/users", json={"username": "x", "password": "123", "role": "admin"})
    assert resp.status_code == 422


def test_overlong_password_reported_cleanly(as_super_admin):
    resp = as_super_admin.post("/users", json={"username": "kamau", "password": "é" * 40, "role": "admin"})
    assert resp.status_code == 400
    assert "72 bytes" in resp.json()["detail"]
