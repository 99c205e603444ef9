from decimal import Decimal
from pydantic import BaseModel, Field
from datetime import datetime


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: str | None = None
    landmark: str | None = None
    whatsapp_number: str | None = None
    credit_limit: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    outstanding_amount: Decimal = Field(Decimal("0"), max_digits=10, decimal_places=2)


class CustomerUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    phone: str | None = Field(None, min_length=1)
    address: str | None = None
    landmark: str | None = None
    whatsapp_number: str | None = None
    credit_limit: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    outstanding_amount: Decimal | None = Field(None, max_digits=10, decimal_places=2)


class CustomerResponse(BaseModel):
    id: int
    name: str
    phone: str
    address: str | None
    landmark: str | None
    whatsapp_number: str | None
    credit_limit: Decimal
    outstanding_amount: Decimal
    created_at: datetime

    class Config:
        from_attributes = True
