# backend/routes/analytics.py
import logging
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.setting import get_setting
from schemas.reports import AnalyticsResponse
from schemas.user import SessionUser
from utils.access import Page, require_page
from utils.analytics import sales_frame, monthly_series, top_products, series_totals
from utils.queries import sales_between

router = APIRouter(prefix="/analytics", tags=["Analytics"])
logger = logging.getLogger(__name__)

MONTHS = 6
TOP_PRODUCTS = 5


@router.get("", response_model=AnalyticsResponse)
def analytics_page(
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.ANALYTICS)),
):
    sales, currency = [], None
    try:
        sales = sales_between(db)
        currency = get_setting(db, "currency")
    except SQLAlchemyError:
        logger.exception("Error fetching analytics data")

    frame = sales_frame(sales)
    monthly = monthly_series(frame, date.today(), MONTHS)

    return {
        "monthly": monthly,
        # Ranked over every recorded sale, not only the charted months
        "top_products": top_products(frame, TOP_PRODUCTS),
        "stats": series_totals(monthly),
        "currency": currency or "",
    }
