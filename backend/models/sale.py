# backend/models/sale.py
from sqlalchemy import Column, Integer, Float, ForeignKey, Date, DateTime, func
from sqlalchemy.orm import relationship
from database import Base
from models.triggers import attach, SALE_TRIGGER

# A recorded sale; inserting one lowers the product quantity
class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    # Unit price at the time of sale, may differ from the product's sell_price
    price = Column(Float, nullable=False)
    date = Column(Date, nullable=False, server_default=func.current_date(), index=True)

    recorded_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    product = relationship("Product")
    user = relationship("User")


attach(Sale.__table__, SALE_TRIGGER)
