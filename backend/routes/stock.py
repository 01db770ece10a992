# backend/routes/stock.py
import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from models.stock import StockEntry
from schemas.user import SessionUser
import schemas.stock as stock_schemas
from utils import metrics
from utils.access import Page, require_page
from utils.queries import list_products, recent_stock_entries

router = APIRouter(tags=["Stock"])
logger = logging.getLogger(__name__)


def _entry_out(entry: StockEntry) -> dict:
    return {
        "id": entry.id,
        "product_id": entry.product_id,
        "quantity": entry.quantity,
        "date": entry.date,
        "created_at": entry.created_at,
        "product_name": entry.product.name if entry.product else "Unknown",
        "product_sku": entry.product.sku if entry.product else "-",
    }


@router.get("", response_model=stock_schemas.StockPage)
def stock_page(
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.STOCK_ENTRIES)),
):
    products, entries = [], []
    try:
        products = list_products(db)
        entries = recent_stock_entries(db)
    except SQLAlchemyError:
        logger.exception("Error fetching stock entries")

    return {
        "products": products,
        "entries": [_entry_out(e) for e in entries],
        "summary": metrics.stock_summary(products, entries),
    }


# Adding stock is always allowed; the database trigger raises the quantity
@router.post("", response_model=stock_schemas.StockEntryResponse, status_code=201)
def add_stock(
    payload: stock_schemas.StockEntryCreate,
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.STOCK_ENTRIES)),
):
    product = db.get(Product, payload.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    entry = StockEntry(
        product_id=product.id,
        quantity=payload.quantity,
        date=payload.date or date.today(),
    )
    db.add(entry)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding stock entry")
        raise HTTPException(status_code=400, detail="Could not add stock entry")

    db.refresh(entry)
    logger.info(f"Stock entry {entry.id}: +{entry.quantity} for product {product.sku}")
    return _entry_out(entry)
