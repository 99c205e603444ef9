# Import every model so Base.metadata knows the full schema

from shopkeeper.models.shop import Shop
from shopkeeper.models.category import Category
from shopkeeper.models.product import Product
from shopkeeper.models.customer import Customer
from shopkeeper.models.order import Order
from shopkeeper.models.order_item import OrderItem
from shopkeeper.models.stock_movement import StockMovement
from shopkeeper.models.transaction import Transaction

__all__ = [
    "Shop",
    "Category",
    "Product",
    "Customer",
    "Order",
    "OrderItem",
    "StockMovement",
    "Transaction",
]
