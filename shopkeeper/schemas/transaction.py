from decimal import Decimal
from typing import Literal
from pydantic import BaseModel, Field
from datetime import datetime


class TransactionCreate(BaseModel):
    type: Literal["sale", "purchase", "credit_payment", "expense"]
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    payment_method: str = Field(..., min_length=1)
    order_id: int | None = None
    customer_id: int | None = None
    upi_app: str | None = None
    upi_transaction_id: str | None = None
    description: str | None = None
    is_offline_transaction: bool = False


class TransactionResponse(BaseModel):
    id: int
    type: str
    amount: Decimal
    payment_method: str
    order_id: int | None
    customer_id: int | None
    upi_app: str | None
    upi_transaction_id: str | None
    description: str | None
    is_offline_transaction: bool
    created_at: datetime

    class Config:
        from_attributes = True
