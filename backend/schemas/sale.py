# backend/schemas/sale.py
from pydantic import BaseModel, Field, ConfigDict
import datetime as dt
from typing import List, Optional


# Product as offered in the sale form (in stock only)
class SaleProduct(BaseModel):
    id: int
    name: str
    sku: str
    sell_price: float
    quantity: int

    model_config = ConfigDict(from_attributes=True)

# Schema for recording a sale; price falls back to the product's sell price
class SaleCreate(BaseModel):
    product_id: int
    quantity: int = Field(ge=1)
    price: Optional[float] = Field(default=None, ge=0)
    date: Optional[dt.date] = None

# Sale joined with product and recording user
class SaleResponse(BaseModel):
    id: int
    product_id: int
    quantity: int
    price: float
    date: dt.date
    created_at: Optional[dt.datetime] = None
    product_name: str
    product_sku: str
    recorded_by: Optional[str] = None

class SalesSummary(BaseModel):
    total_revenue: float
    total_items: int
    total_transactions: int

class SalesPage(BaseModel):
    products: List[SaleProduct]
    sales: List[SaleResponse]
    summary: SalesSummary
    currency: str

class PriceSuggestion(BaseModel):
    product_id: int
    price: float
