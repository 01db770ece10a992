# utils/analytics.py
from datetime import date
from typing import Iterable, List

import pandas as pd

from utils.metrics import month_bounds, shift_month, profit_margin

COLUMNS = ["date", "quantity", "price", "buy_price", "name", "sku"]


def sales_frame(sales: Iterable) -> pd.DataFrame:
    """One row per sale with its product's current buy price, name and SKU."""
    rows = [
        {
            "date": s.date,
            "quantity": s.quantity,
            "price": s.price,
            "buy_price": s.product.buy_price,
            "name": s.product.name,
            "sku": s.product.sku,
        }
        for s in sales
    ]
    frame = pd.DataFrame(rows, columns=COLUMNS)
    frame["revenue"] = frame["price"] * frame["quantity"]
    frame["cost"] = frame["buy_price"] * frame["quantity"]
    return frame


def monthly_series(frame: pd.DataFrame, today: date, months: int = 6) -> List[dict]:
    """Trailing calendar months, oldest first, ending with the current one."""
    series = []
    for offset in range(months - 1, -1, -1):
        month_start, month_end = month_bounds(shift_month(today, -offset))
        in_month = frame[(frame["date"] >= month_start) & (frame["date"] <= month_end)]
        month_revenue = float(in_month["revenue"].sum())
        month_cost = float(in_month["cost"].sum())
        series.append({
            "month": month_start.strftime("%b %Y"),
            "revenue": month_revenue,
            "cost": month_cost,
            "profit": month_revenue - month_cost,
            "sales": int(len(in_month)),
        })
    return series


def top_products(frame: pd.DataFrame, limit: int = 5) -> List[dict]:
    # Grouped by (name, sku): products sharing both are reported together
    if frame.empty:
        return []
    grouped = (
        frame.groupby(["name", "sku"], as_index=False)
        .agg(total_sold=("quantity", "sum"), revenue=("revenue", "sum"))
        .sort_values("revenue", ascending=False, kind="stable")
        .head(limit)
    )
    return [
        {
            "name": row.name,
            "sku": row.sku,
            "total_sold": int(row.total_sold),
            "revenue": float(row.revenue),
        }
        for row in grouped.itertuples(index=False)
    ]


def series_totals(series: List[dict]) -> dict:
    total_revenue = sum(m["revenue"] for m in series)
    total_cost = sum(m["cost"] for m in series)
    total_profit = total_revenue - total_cost
    return {
        "total_revenue": total_revenue,
        "total_profit": total_profit,
        "total_sales": sum(m["sales"] for m in series),
        "profit_margin": profit_margin(total_revenue, total_profit),
    }
