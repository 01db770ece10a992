# backend/models/product.py
from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint, func
from database import Base

# Model Product
# Catalogue entry with purchase and selling price.
# `quantity` is maintained by the stock_entries / sales triggers,
# application code only reads it.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    sku = Column(String, unique=True, nullable=False, index=True)

    buy_price = Column(Float, CheckConstraint("buy_price >= 0"), nullable=False, default=0)
    sell_price = Column(Float, CheckConstraint("sell_price >= 0"), nullable=False, default=0)

    quantity = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
