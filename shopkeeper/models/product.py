# shopkeeper/models/product.py

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shopkeeper.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    name_hindi = Column(String, nullable=True)

    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    price = Column(Numeric(10, 2), nullable=False)

    # Weight and volume goods are sold in fractions; stock may go negative
    stock = Column(Numeric(10, 3), nullable=False, default=0)
    min_stock = Column(Numeric(10, 3), nullable=False, default=0)
    unit = Column(String, nullable=False, default="pcs")

    barcode = Column(String, nullable=True)
    is_packaged = Column(Boolean, nullable=False, default=True)
    description = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    category = relationship("Category")

    @hybrid_property
    def is_low_stock(self):
        return self.stock <= self.min_stock

    __table_args__ = (
        UniqueConstraint("shop_id", "name", name="uq_shop_product_name"),
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        CheckConstraint("min_stock >= 0", name="ck_product_min_stock_non_negative"),
    )
