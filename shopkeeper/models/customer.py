# shopkeeper/models/customer.py

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.sql import func

from shopkeeper.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address = Column(String, nullable=True)
    landmark = Column(String, nullable=True)
    whatsapp_number = Column(String, nullable=True)

    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False, index=True)

    credit_limit = Column(Numeric(10, 2), nullable=False, default=0)
    outstanding_amount = Column(Numeric(10, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_customers_shop_phone", "shop_id", "phone"),
    )
