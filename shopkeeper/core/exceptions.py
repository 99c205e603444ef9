"""
Typed errors raised by the shopkeeper services.

Routers catch these by type and translate them to HTTP responses. Request
validation errors are not part of this hierarchy: pydantic rejects malformed
input before any service is called.

    ShopkeeperError
    +-- StorageError             STORAGE_ERROR
        +-- CustomerNotFoundError    CUSTOMER_NOT_FOUND
        +-- InsufficientStockError   INSUFFICIENT_STOCK
"""

from decimal import Decimal


class ShopkeeperError(Exception):
    code: str = "SHOPKEEPER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StorageError(ShopkeeperError):
    """A write sequence failed and was rolled back as a whole."""

    code = "STORAGE_ERROR"


class InsufficientStockError(StorageError):
    """A guarded stock decrement would have taken stock below zero."""

    code = "INSUFFICIENT_STOCK"

    def __init__(self, product_id: int, requested: Decimal):
        self.product_id = product_id
        self.requested = requested
        super().__init__(f"Insufficient stock for product {product_id}")


class CustomerNotFoundError(StorageError):
    """The order names a customer that does not belong to the shop."""

    code = "CUSTOMER_NOT_FOUND"

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} not found")
