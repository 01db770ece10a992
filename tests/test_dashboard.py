"""
Dashboard figures for the three roles.
"""

from datetime import date, timedelta

import pytest

from conftest import add_product


@pytest.fixture
def shop(as_admin):
    """Two products with 10 units each and a few sales."""
    shirt = add_product(as_admin, name="Linen Shirt", sku="LS-01", buy_price=60, sell_price=100, stock=10)
    tie = add_product(as_admin, name="Silk Tie", sku="ST-01", buy_price=30, sell_price=50, stock=10)
    today = date.today()

    for payload in (
        {"product_id": shirt["id"], "quantity": 3, "price": 100},
        {"product_id": tie["id"], "quantity": 2, "price": 50},
        # Outside both the current month and the last week
        {"product_id": tie["id"], "quantity": 1, "price": 45, "date": (today - timedelta(days=40)).isoformat()},
    ):
        resp = as_admin.post("/sales", json=payload)
        assert resp.status_code == 201, resp.text
    return as_admin


def test_admin_figures(shop):
    stats = shop.get("/").json()

    assert stats["total_products"] == 2
    # 7 shirts at 60 + 7 ties at 30
    assert stats["total_stock_value"] == 7 * 60 + 7 * 30
    assert stats["monthly_revenue"] == 400
    assert stats["monthly_cost"] == 3 * 60 + 2 * 30
    assert stats["monthly_profit"] == 400 - 240
    assert stats["todays_sales"] == 5
    assert stats["week_sales"] == 5
    assert stats["currency"] == "KES"
    assert "total_users" not in stats


def test_super_admin_sees_user_count(shop, users):
    shop.post("/login", json={"username": "owner", "password": "root-pass"})
    stats = shop.get("/").json()
    # three fixture users plus the bootstrap admin
    assert stats["total_users"] == 4


def test_sales_staff_sees_no_financials(shop, users):
    shop.post("/login", json={"username": "clerk", "password": "staff-pass"})
    stats = shop.get("/").json()
    assert stats == {"todays_sales": 5, "week_sales": 5, "total_products": 2}


def test_empty_shop(as_admin):
    stats = as_admin.get("/").json()
    assert stats["total_products"] == 0
    assert stats["total_stock_value"] == 0
    assert stats["monthly_revenue"] == 0
    assert stats["monthly_profit"] == 0
    assert stats["todays_sales"] == 0


def test_week_window_starts_seven_days_back(as_admin):
    belt = add_product(as_admin, name="Leather Belt", sku="LB-01", buy_price=600, sell_price=1200, stock=10)
    today = date.today()
    for days_back, quantity in ((7, 1), (8, 2)):
        resp = as_admin.post("/sales", json={
            "product_id": belt["id"],
            "quantity": quantity,
            "date": (today - timedelta(days=days_back)).isoformat(),
        })
        assert resp.status_code == 201, resp.text

    stats = as_admin.get("/").json()
    assert stats["week_sales"] == 1
    assert stats["todays_sales"] == 0
