import os
import random
import sys
from datetime import date, timedelta

from sqlalchemy.orm import Session

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from database import SessionLocal, init_db
from models.product import Product
from models.sale import Sale
from models.stock import StockEntry
from models.users import Role, User

# Configuration
PRODUCT_LINES = [
    ("Slim Fit Suit", 12000, 18500),
    ("Linen Shirt", 1500, 2800),
    ("Oxford Shirt", 1800, 3200),
    ("Chino Trousers", 2000, 3500),
    ("Wool Blazer", 7000, 11000),
    ("Leather Belt", 600, 1200),
    ("Silk Tie", 500, 1100),
    ("Derby Shoes", 4500, 7500),
    ("Cashmere Scarf", 2500, 4200),
    ("Pocket Square", 200, 450),
]
SIZES = ["S", "M", "L", "XL"]
DAYS_BACK = 180
# End Configuration


def _create_products(db: Session, limit: int) -> list:
    products = [
        Product(
            name=f"{name} {size}",
            sku=f"GBE-{line_no + 1:02d}-{size}",
            buy_price=buy,
            sell_price=sell,
        )
        for line_no, (name, buy, sell) in enumerate(PRODUCT_LINES)
        for size in SIZES
    ][:limit]
    db.add_all(products)
    db.commit()
    return products


def populate(db: Session, products: int = 20, days: int = DAYS_BACK, seed: int = None) -> dict:
    """Fill an empty database with deliveries and sales over the last `days`.

    Everything goes through inserts, so quantities are maintained by the
    database triggers; a sale never takes more than is on hand.
    """
    rng = random.Random(seed)

    seller = db.query(User).filter(User.role == Role.SALES_STAFF).first() or db.query(User).first()
    seller_id = seller.id if seller else None

    items = _create_products(db, products)

    start = date.today() - timedelta(days=days)
    entries = sales = 0
    for product in items:
        # Opening delivery, then a restock every few weeks
        delivery_days = sorted({0} | {rng.randint(1, days) for _ in range(days // 30)})
        for offset in delivery_days:
            db.add(StockEntry(product_id=product.id, quantity=rng.randint(10, 40), date=start + timedelta(days=offset)))
            entries += 1
        db.commit()

        for offset in sorted(rng.randint(1, days) for _ in range(rng.randint(5, 25))):
            db.refresh(product)
            if product.quantity <= 0:
                break
            qty = rng.randint(1, min(3, product.quantity))
            # Occasional discount off the list price
            price = product.sell_price if rng.random() > 0.2 else round(product.sell_price * 0.9, 2)
            db.add(Sale(
                product_id=product.id,
                quantity=qty,
                price=price,
                date=start + timedelta(days=offset),
                recorded_by_user_id=seller_id,
            ))
            db.commit()
            sales += 1

    return {"products": len(items), "stock_entries": entries, "sales": sales}


if __name__ == "__main__":
    init_db()
    session = SessionLocal()
    try:
        if session.query(Product).count():
            print("Database already contains products, nothing to do.")
        else:
            counts = populate(session)
            print(f"Inserted {counts['products']} products, {counts['stock_entries']} stock entries, {counts['sales']} sales.")
    finally:
        session.close()
