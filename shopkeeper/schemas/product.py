from decimal import Decimal
from typing import Literal
from pydantic import BaseModel, Field, field_validator
from datetime import datetime


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)
    name_hindi: str | None = None
    category_id: int | None = None

    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Unit selling price",
    )

    stock: Decimal = Field(Decimal("0"), max_digits=10, decimal_places=3)
    min_stock: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=3)
    unit: str = "pcs"

    barcode: str | None = None
    is_packaged: bool = True
    description: str | None = None


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    name_hindi: str | None = None
    category_id: int | None = None
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    min_stock: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=3)
    unit: str | None = None
    barcode: str | None = None
    is_packaged: bool | None = None
    description: str | None = None


class ProductResponse(BaseModel):
    id: int
    name: str
    name_hindi: str | None
    category_id: int | None
    price: Decimal
    stock: Decimal
    min_stock: Decimal
    unit: str
    barcode: str | None
    is_packaged: bool
    description: str | None
    is_low_stock: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StockAdjustment(BaseModel):
    # Signed delta: positive adds stock, negative removes it
    quantity: Decimal = Field(..., max_digits=10, decimal_places=3)
    reason: Literal["purchase", "return", "damage", "adjustment"] = "adjustment"
    notes: str | None = None

    @field_validator("quantity")
    @classmethod
    def quantity_not_zero(cls, value: Decimal) -> Decimal:
        if value == 0:
            raise ValueError("Stock adjustment quantity cannot be zero")
        return value


class StockMovementResponse(BaseModel):
    id: int
    product_id: int
    order_id: int | None
    type: str
    quantity: Decimal
    reason: str | None
    notes: str | None
    created_at: datetime

    class Config:
        from_attributes = True
