# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import List, Optional


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Schema for creating a new product; quantity is not accepted,
# it only changes through stock entries and sales
class ProductCreate(BaseModel):
    # Stripped before the length check, so blank names are rejected
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    sku: str = Field(min_length=1)
    buy_price: float = Field(ge=0)
    sell_price: float = Field(ge=0)


class ProductOut(ORMBase):
    id: int
    name: str
    sku: str
    buy_price: float
    sell_price: float
    quantity: int
    created_at: Optional[datetime] = None


class ProductSummary(BaseModel):
    total_products: int
    total_stock_value: float


class ProductsPage(BaseModel):
    items: List[ProductOut]
    summary: ProductSummary
    currency: str
