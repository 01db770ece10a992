# schemas/reports.py
from typing import List, Optional
from pydantic import BaseModel

# Dashboard figures; financial fields stay empty for sales staff
class DashboardStats(BaseModel):
    todays_sales: int
    week_sales: int
    total_products: int
    total_stock_value: Optional[float] = None
    monthly_revenue: Optional[float] = None
    monthly_cost: Optional[float] = None
    monthly_profit: Optional[float] = None
    total_users: Optional[int] = None
    currency: Optional[str] = None

# Schemas for the analytics page
class MonthlyPoint(BaseModel):
    month: str
    revenue: float
    cost: float
    profit: float
    sales: int

class TopProduct(BaseModel):
    name: str
    sku: str
    total_sold: int
    revenue: float

class AnalyticsTotals(BaseModel):
    total_revenue: float
    total_profit: float
    total_sales: int
    profit_margin: float

class AnalyticsResponse(BaseModel):
    monthly: List[MonthlyPoint]
    top_products: List[TopProduct]
    stats: AnalyticsTotals
    currency: str
