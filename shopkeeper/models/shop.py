# shopkeeper/models/shop.py

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from shopkeeper.database import Base


class Shop(Base):
    __tablename__ = "shops"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    name_hindi = Column(String, nullable=True)
    owner_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)

    upi_id = Column(String, nullable=True)
    address = Column(String, nullable=True)
    gst_number = Column(String, nullable=True)
    language = Column(String, nullable=False, default="en")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
