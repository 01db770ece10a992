"""
Stock entries: the database trigger raises product quantity.
"""

from datetime import date

from conftest import add_product, product_quantity


def test_entry_increments_quantity(as_admin):
    product = add_product(as_admin)
    for qty in (5, 7):
        resp = as_admin.post("/stock", json={"product_id": product["id"], "quantity": qty})
        assert resp.status_code == 201
    assert product_quantity(product["id"]) == 12


def test_entry_defaults_to_today(as_admin):
    product = add_product(as_admin)
    entry = as_admin.post("/stock", json={"product_id": product["id"], "quantity": 3}).json()
    assert entry["date"] == date.today().isoformat()
    assert entry["product_name"] == "Linen Shirt"
    assert entry["product_sku"] == "LS-01"


def test_entry_with_explicit_date(as_admin):
    product = add_product(as_admin)
    entry = as_admin.post("/stock", json={"product_id": product["id"], "quantity": 3, "date": "2025-07-01"}).json()
    assert entry["date"] == "2025-07-01"


def test_quantity_must_be_positive(as_admin):
    product = add_product(as_admin)
    resp = as_admin.post("/stock", json={"product_id": product["id"], "quantity": 0})
    assert resp.status_code == 422
    assert product_quantity(product["id"]) == 0


def test_unknown_product(as_admin):
    resp = as_admin.post("/stock", json={"product_id": 999, "quantity": 3})
    assert resp.status_code == 404


def test_page_summary(as_admin):
    shirt = add_product(as_admin, name="Linen Shirt", sku="LS-01", stock=5)
    add_product(as_admin, name="Silk Tie", sku="ST-01", stock=8)
    as_admin.post("/stock", json={"product_id": shirt["id"], "quantity": 2})

    page = as_admin.get("/stock").json()
    assert page["summary"] == {"total_products": 2, "total_entries": 3, "total_quantity": 15}
    # newest first
    assert page["entries"][0]["quantity"] == 2
    assert [p["name"] for p in page["products"]] == ["Linen Shirt", "Silk Tie"]
