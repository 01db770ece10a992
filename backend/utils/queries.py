# utils/queries.py
# Read helpers shared by the page routers.
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from models.product import Product
from models.sale import Sale
from models.stock import StockEntry
from models.users import User


def list_products(db: Session, in_stock_only: bool = False) -> List[Product]:
    query = db.query(Product)
    if in_stock_only:
        query = query.filter(Product.quantity > 0)
    return query.order_by(Product.name.asc()).all()


def sales_between(db: Session, date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[Sale]:
    """Sales in [date_from, date_to] (either bound optional) with their product loaded."""
    query = db.query(Sale).join(Product, Sale.product_id == Product.id).options(joinedload(Sale.product))
    if date_from is not None:
        query = query.filter(Sale.date >= date_from)
    if date_to is not None:
        query = query.filter(Sale.date <= date_to)
    return query.all()


def recent_sales(db: Session) -> List[Sale]:
    return (
        db.query(Sale)
        .options(joinedload(Sale.product), joinedload(Sale.user))
        .order_by(Sale.created_at.desc(), Sale.id.desc())
        .all()
    )


def recent_stock_entries(db: Session) -> List[StockEntry]:
    return (
        db.query(StockEntry)
        .options(joinedload(StockEntry.product))
        .order_by(StockEntry.created_at.desc(), StockEntry.id.desc())
        .all()
    )


def count_users(db: Session) -> int:
    return db.query(User).count()
