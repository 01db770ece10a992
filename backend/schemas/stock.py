# backend/schemas/stock.py
from pydantic import BaseModel, Field, ConfigDict
import datetime as dt
from typing import List, Optional


# Product as listed in the stock form selector
class StockProduct(BaseModel):
    id: int
    name: str
    sku: str
    quantity: int

    model_config = ConfigDict(from_attributes=True)

# Schema for adding stock to a product
class StockEntryCreate(BaseModel):
    product_id: int
    quantity: int = Field(ge=1)
    date: Optional[dt.date] = None

# Stock entry joined with its product's name and SKU
class StockEntryResponse(BaseModel):
    id: int
    product_id: int
    quantity: int
    date: dt.date
    created_at: Optional[dt.datetime] = None
    product_name: str
    product_sku: str

class StockSummary(BaseModel):
    total_products: int
    total_entries: int
    total_quantity: int

class StockPage(BaseModel):
    products: List[StockProduct]
    entries: List[StockEntryResponse]
    summary: StockSummary
