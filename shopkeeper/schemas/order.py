# schemas/order.py

from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import List, Literal

from shopkeeper.schemas.product import ProductResponse


OrderStatus = Literal["pending", "completed", "cancelled"]
PaymentStatus = Literal["pending", "paid", "partial"]
PaymentMethod = Literal["cash", "upi", "card", "credit"]


class OrderCreate(BaseModel):
    order_number: str = Field(..., min_length=1)
    customer_id: int | None = None

    status: OrderStatus = "pending"
    payment_status: PaymentStatus = "pending"
    payment_method: PaymentMethod | None = None
    upi_app: str | None = None

    # Totals are taken as given, not recomputed from the items
    total_amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    paid_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    discount_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    gst_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)

    delivery_address: str | None = None
    delivery_landmark: str | None = None
    notes: str | None = None
    is_offline_order: bool = False


class OrderItemCreate(BaseModel):
    product_id: int
    quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=3)
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    total_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    gst_rate: Decimal = Field(Decimal("0"), ge=0, le=100, max_digits=5, decimal_places=2)


class PlaceOrderRequest(BaseModel):
    order: OrderCreate
    items: List[OrderItemCreate] = Field(..., min_length=1)


class OrderUpdate(BaseModel):
    status: OrderStatus | None = None
    payment_status: PaymentStatus | None = None
    payment_method: PaymentMethod | None = None
    upi_app: str | None = None
    paid_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    delivery_address: str | None = None
    delivery_landmark: str | None = None
    notes: str | None = None


class OrderResponse(BaseModel):
    id: int
    order_number: str
    customer_id: int | None
    status: str
    payment_status: str
    payment_method: str | None
    upi_app: str | None
    total_amount: Decimal
    paid_amount: Decimal
    discount_amount: Decimal
    gst_amount: Decimal
    delivery_address: str | None
    delivery_landmark: str | None
    notes: str | None
    is_offline_order: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class OrderItemResponse(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: Decimal
    unit_price: Decimal
    total_price: Decimal
    gst_rate: Decimal
    product: ProductResponse

    class Config:
        from_attributes = True


class OrderWithItemsResponse(BaseModel):
    order: OrderResponse
    items: List[OrderItemResponse]
