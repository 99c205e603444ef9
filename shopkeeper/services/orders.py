# =========================================================
# ORDER PLACEMENT
#
# One atomic unit of work per order:
# - order header insert
# - per item, in caller order: item insert, relative stock
#   decrement, "sale" stock movement
# - "sale" ledger entry when the order is already paid
#
# Either every row is committed or none is.
# Totals are stored as supplied and order numbers are not
# deduplicated: a resubmitted payload is a new order.
# =========================================================

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shopkeeper.core.config import settings
from shopkeeper.core.exceptions import CustomerNotFoundError, StorageError
from shopkeeper.models.customer import Customer
from shopkeeper.models.order import Order
from shopkeeper.models.order_item import OrderItem
from shopkeeper.models.stock_movement import StockMovement
from shopkeeper.models.transaction import Transaction
from shopkeeper.schemas.order import OrderCreate, OrderItemCreate
from shopkeeper.services.stock import apply_stock_delta

logger = logging.getLogger("shopkeeper")


def _sale_ledger_entry(order: Order) -> Transaction:
    return Transaction(
        shop_id=order.shop_id,
        order_id=order.id,
        customer_id=order.customer_id,
        type="sale",
        amount=order.total_amount,
        payment_method=order.payment_method or "cash",
        upi_app=order.upi_app,
        description=f"Sale for order {order.order_number}",
        is_offline_transaction=order.is_offline_order,
    )


def _check_customer(db: Session, shop_id: int, customer_id: int):
    customer = (
        db.query(Customer.id)
        .filter(
            Customer.id == customer_id,
            Customer.shop_id == shop_id,
        )
        .first()
    )

    if customer is None:
        raise CustomerNotFoundError(customer_id)


def place_order(
    db: Session,
    shop_id: int,
    order_data: OrderCreate,
    items: Sequence[OrderItemCreate],
    allow_negative_stock: bool | None = None,
) -> Order:
    if not items:
        raise ValueError("Order must contain items")

    if allow_negative_stock is None:
        allow_negative_stock = settings.ALLOW_NEGATIVE_STOCK

    try:
        if order_data.customer_id is not None:
            _check_customer(db, shop_id, order_data.customer_id)

        order = Order(shop_id=shop_id, **order_data.model_dump())
        db.add(order)
        db.flush()

        for item in items:
            db.add(OrderItem(order_id=order.id, **item.model_dump()))
            db.flush()

            apply_stock_delta(
                db,
                shop_id,
                item.product_id,
                -item.quantity,
                allow_negative_stock,
            )

            db.add(
                StockMovement(
                    shop_id=shop_id,
                    product_id=item.product_id,
                    order_id=order.id,
                    type="out",
                    quantity=-item.quantity,
                    reason="sale",
                )
            )

        if order.payment_status == "paid":
            db.add(_sale_ledger_entry(order))

        db.commit()

    except StorageError as exc:
        db.rollback()
        logger.error(f"Order {order_data.order_number} rolled back: {exc.message}")
        raise

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Order {order_data.order_number} rolled back: {exc}")
        raise StorageError("Unable to place order") from exc

    db.refresh(order)

    logger.info(
        f"Order {order.id} ({order.order_number}) placed for shop {shop_id} "
        f"with {len(items)} item(s)"
    )

    return order
