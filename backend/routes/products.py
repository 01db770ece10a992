# backend/routes/products.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from models.setting import get_setting
from schemas.user import SessionUser
import schemas.product as product_schemas
from utils import metrics
from utils.access import Page, require_page
from utils.queries import list_products

router = APIRouter(prefix="/products", tags=["Products"])
logger = logging.getLogger(__name__)


@router.get("", response_model=product_schemas.ProductsPage)
def products_page(
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.PRODUCTS)),
):
    products, currency = [], None
    try:
        products = list_products(db)
        currency = get_setting(db, "currency")
    except SQLAlchemyError:
        logger.exception("Error fetching products")

    return {
        "items": products,
        "summary": {
            "total_products": len(products),
            "total_stock_value": metrics.stock_value(products),
        },
        "currency": currency or "",
    }


# New products start with zero quantity; stock arrives through stock entries
@router.post("", response_model=product_schemas.ProductOut, status_code=201)
def create_product(
    payload: product_schemas.ProductCreate,
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.PRODUCTS)),
):
    product = Product(
        name=payload.name,
        sku=payload.sku,
        buy_price=payload.buy_price,
        sell_price=payload.sell_price,
    )
    db.add(product)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Product SKU already exists: {payload.sku}")
        raise HTTPException(status_code=400, detail="SKU already exists")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding product")
        raise HTTPException(status_code=400, detail="Could not add product")

    db.refresh(product)
    return product
