# utils/metrics.py
# Aggregates shown on the dashboard, products, stock and sales pages.
# Rows only need the attributes used here, so ORM objects and plain
# namespaces both work.
import calendar
from datetime import date, timedelta
from typing import Iterable, Tuple

WEEK_DAYS = 7


def stock_value(products: Iterable) -> float:
    return sum(p.buy_price * p.quantity for p in products)


def total_quantity(rows: Iterable) -> int:
    return sum(r.quantity for r in rows)


def revenue(sales: Iterable) -> float:
    return sum(s.price * s.quantity for s in sales)


def cost(sales: Iterable) -> float:
    # Uses the product's current buy price, not the price at sale time
    return sum(s.product.buy_price * s.quantity for s in sales)


def month_bounds(day: date) -> Tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def shift_month(day: date, months: int) -> date:
    """First day of the month `months` away from `day` (negative goes back)."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def week_start(today: date) -> date:
    return today - timedelta(days=WEEK_DAYS)


def profit_margin(total_revenue: float, total_profit: float) -> float:
    if total_revenue > 0:
        return total_profit / total_revenue * 100
    return 0.0


def monthly_figures(sales: Iterable) -> dict:
    sales = list(sales)
    month_revenue = revenue(sales)
    month_cost = cost(sales)
    return {
        "monthly_revenue": month_revenue,
        "monthly_cost": month_cost,
        "monthly_profit": month_revenue - month_cost,
    }


def sales_summary(sales: Iterable) -> dict:
    sales = list(sales)
    return {
        "total_revenue": revenue(sales),
        "total_items": total_quantity(sales),
        "total_transactions": len(sales),
    }


def stock_summary(products: Iterable, entries: Iterable) -> dict:
    products = list(products)
    return {
        "total_products": len(products),
        "total_entries": len(list(entries)),
        "total_quantity": total_quantity(products),
    }
