# shopkeeper/models/order.py

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shopkeeper.database import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    # Client generated, deliberately not unique
    order_number = Column(String, nullable=False)

    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)

    status = Column(String, nullable=False, default="pending")
    payment_status = Column(String, nullable=False, default="pending")
    payment_method = Column(String, nullable=True)
    upi_app = Column(String, nullable=True)

    total_amount = Column(Numeric(10, 2), nullable=False)
    paid_amount = Column(Numeric(10, 2), nullable=False, default=0)
    discount_amount = Column(Numeric(10, 2), nullable=False, default=0)
    gst_amount = Column(Numeric(10, 2), nullable=False, default=0)

    delivery_address = Column(String, nullable=True)
    delivery_landmark = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    is_offline_order = Column(Boolean, nullable=False, default=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    __table_args__ = (
        Index("ix_orders_shop_created", "shop_id", "created_at"),
        CheckConstraint(
            "status IN ('pending', 'completed', 'cancelled')",
            name="ck_order_status_valid",
        ),
        CheckConstraint(
            "payment_status IN ('pending', 'paid', 'partial')",
            name="ck_order_payment_status_valid",
        ),
    )
