"""
Demo data seeder keeps quantities consistent through the triggers.
"""

from sqlalchemy import func

from models.product import Product
from models.sale import Sale
from models.stock import StockEntry
from populate_db import populate


def test_quantities_match_movements(db, users):
    counts = populate(db, products=6, days=90, seed=42)
    assert counts["products"] == 6
    assert counts["stock_entries"] >= 6

    db.expire_all()
    for product in db.query(Product).all():
        added = db.query(func.coalesce(func.sum(StockEntry.quantity), 0)).filter(StockEntry.product_id == product.id).scalar()
        sold = db.query(func.coalesce(func.sum(Sale.quantity), 0)).filter(Sale.product_id == product.id).scalar()
        assert product.quantity == added - sold
        assert product.quantity >= 0
