# backend/routes/dashboard.py
import logging
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.setting import get_setting
from models.users import Role
from schemas.reports import DashboardStats
from schemas.user import SessionUser
from utils import metrics
from utils.access import Page, require_page
from utils.queries import list_products, sales_between, count_users

router = APIRouter(tags=["Dashboard"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=DashboardStats, response_model_exclude_none=True)
def dashboard(
    db: Session = Depends(get_db),
    current_user: SessionUser = Depends(require_page(Page.DASHBOARD)),
):
    today = date.today()
    month_start, month_end = metrics.month_bounds(today)

    products, month_sales, todays, week = [], [], [], []
    total_users = 0
    currency = None
    try:
        products = list_products(db)
        month_sales = sales_between(db, month_start, month_end)
        todays = sales_between(db, today, today)
        # Lower bound only, as the week figure has always been computed
        week = sales_between(db, metrics.week_start(today))
        if current_user.role == Role.SUPER_ADMIN:
            total_users = count_users(db)
        currency = get_setting(db, "currency")
    except SQLAlchemyError:
        logger.exception("Error fetching dashboard stats")

    # Unit counts, not revenue
    stats = {
        "todays_sales": metrics.total_quantity(todays),
        "week_sales": metrics.total_quantity(week),
        "total_products": len(products),
    }
    if current_user.role == Role.SALES_STAFF:
        return DashboardStats(**stats)

    stats.update(metrics.monthly_figures(month_sales))
    stats["total_stock_value"] = metrics.stock_value(products)
    stats["currency"] = currency
    if current_user.role == Role.SUPER_ADMIN:
        stats["total_users"] = total_users
    return DashboardStats(**stats)
