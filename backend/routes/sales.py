# backend/routes/sales.py
import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from models.sale import Sale
from models.setting import get_setting
from schemas.user import SessionUser
import schemas.sale as sale_schemas
from utils import metrics
from utils.access import Page, require_page
from utils.queries import list_products, recent_sales

router = APIRouter(prefix="/sales", tags=["Sales"])
logger = logging.getLogger(__name__)


def _sale_out(sale: Sale) -> dict:
    return {
        "id": sale.id,
        "product_id": sale.product_id,
        "quantity": sale.quantity,
        "price": sale.price,
        "date": sale.date,
        "created_at": sale.created_at,
        "product_name": sale.product.name if sale.product else "Unknown",
        "product_sku": sale.product.sku if sale.product else "-",
        "recorded_by": sale.user.username if sale.user else None,
    }


@router.get("", response_model=sale_schemas.SalesPage)
def sales_page(
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.SALES)),
):
    products, sales, currency = [], [], None
    try:
        products = list_products(db, in_stock_only=True)
        sales = recent_sales(db)
        currency = get_setting(db, "currency")
    except SQLAlchemyError:
        logger.exception("Error fetching sales")

    return {
        "products": products,
        "sales": [_sale_out(s) for s in sales],
        "summary": metrics.sales_summary(sales),
        "currency": currency or "",
    }


# Price the form fills in when a product is picked
@router.get("/price", response_model=sale_schemas.PriceSuggestion)
def suggest_price(
    product_id: int = Query(...),
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.SALES)),
):
    product = db.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"product_id": product.id, "price": product.sell_price}


@router.post("", response_model=sale_schemas.SaleResponse, status_code=201)
def record_sale(
    payload: sale_schemas.SaleCreate,
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.SALES)),
):
    # Only in-stock products can be selected
    product = (
        db.query(Product)
        .filter(Product.id == payload.product_id, Product.quantity > 0)
        .first()
    )
    if not product:
        raise HTTPException(status_code=400, detail="Please select a product")

    # Advisory check against the quantity just read; nothing reserves the
    # stock between this check and the insert below.
    if payload.quantity > product.quantity:
        raise HTTPException(status_code=400, detail=f"Insufficient stock. Available: {product.quantity}")

    sale = Sale(
        product_id=product.id,
        quantity=payload.quantity,
        price=product.sell_price if payload.price is None else payload.price,
        date=payload.date or date.today(),
        recorded_by_user_id=current_user.id,
    )
    db.add(sale)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error recording sale")
        raise HTTPException(status_code=400, detail="Could not record sale")

    db.refresh(sale)
    return _sale_out(sale)
