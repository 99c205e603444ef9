# shopkeeper/models/stock_movement.py

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.sql import func

from shopkeeper.database import Base


class StockMovement(Base):
    """Append-only audit row for every change to a product's stock."""

    __tablename__ = "stock_movements"

    id = Column(Integer, primary_key=True, index=True)

    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=True, index=True)

    type = Column(String, nullable=False)

    # Signed delta, negative for outflow
    quantity = Column(Numeric(10, 3), nullable=False)
    reason = Column(String, nullable=True)
    notes = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "type IN ('in', 'out', 'adjustment')",
            name="ck_stock_movement_type_valid",
        ),
        CheckConstraint(
            "reason IS NULL OR reason IN ('sale', 'purchase', 'return', 'damage', 'adjustment')",
            name="ck_stock_movement_reason_valid",
        ),
    )
