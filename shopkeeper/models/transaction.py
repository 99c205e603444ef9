# shopkeeper/models/transaction.py

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
from sqlalchemy.sql import func

from shopkeeper.database import Base


class Transaction(Base):
    """Financial ledger entry. Rows are appended, never edited."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)

    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)

    type = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    payment_method = Column(String, nullable=False)

    upi_app = Column(String, nullable=True)
    upi_transaction_id = Column(String, nullable=True)
    description = Column(String, nullable=True)
    is_offline_transaction = Column(Boolean, nullable=False, default=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        Index("ix_transactions_shop_type_created", "shop_id", "type", "created_at"),
        CheckConstraint(
            "type IN ('sale', 'purchase', 'credit_payment', 'expense')",
            name="ck_transaction_type_valid",
        ),
    )
