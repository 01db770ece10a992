# backend/models/stock.py
from sqlalchemy import Column, Integer, ForeignKey, Date, DateTime, func
from sqlalchemy.orm import relationship
from database import Base
from models.triggers import attach, STOCK_ENTRY_TRIGGER

# A delivery of goods; inserting one raises the product quantity
class StockEntry(Base):
    __tablename__ = "stock_entries"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    # Quantity added by the delivery
    quantity = Column(Integer, nullable=False)
    date = Column(Date, nullable=False, server_default=func.current_date())

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    product = relationship("Product")


attach(StockEntry.__table__, STOCK_ENTRY_TRIGGER)
