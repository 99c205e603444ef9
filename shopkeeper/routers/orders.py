# =========================================================
# ORDERS ROUTER
#
# - POST creates an order, its items, the stock decrements,
#   the stock movements and (when paid) the sale ledger
#   entry in one transaction
# - Validation errors and customers of another shop never
#   reach the database (400)
# - Any failure while writing rolls everything back (500)
# =========================================================

from fastapi import APIRouter, Depends, HTTPException, Query, status, Request
from sqlalchemy.orm import Session, joinedload

from shopkeeper.database import get_db
from shopkeeper.core.config import settings
from shopkeeper.core.exceptions import (
    CustomerNotFoundError,
    InsufficientStockError,
    StorageError,
)
from shopkeeper.core.rate_limiter import limiter
from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.models.order import Order
from shopkeeper.models.order_item import OrderItem
from shopkeeper.schemas.order import (
    OrderResponse,
    OrderUpdate,
    OrderWithItemsResponse,
    PlaceOrderRequest,
)
from shopkeeper.services.orders import place_order

router = APIRouter(prefix="/orders", tags=["Orders"])


# =========================================================
# CREATE ORDER
# =========================================================
@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.ORDER_RATE_LIMIT)
def create_order(
    request: Request,
    payload: PlaceOrderRequest,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    try:
        return place_order(db, current_shop.id, payload.order, payload.items)

    except CustomerNotFoundError as e:
        raise HTTPException(status_code=400, detail=e.message)

    except InsufficientStockError as e:
        raise HTTPException(status_code=409, detail=e.message)

    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to create order")


# =========================================================
# LIST ORDERS
# =========================================================
@router.get("", response_model=list[OrderResponse])
def list_orders(
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
    limit: int = Query(50, ge=1, le=500),
):
    return (
        db.query(Order)
        .filter(Order.shop_id == current_shop.id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .limit(limit)
        .all()
    )


def _get_order(db: Session, shop_id: int, order_id: int) -> Order:
    order = (
        db.query(Order)
        .options(joinedload(Order.items).joinedload(OrderItem.product))
        .filter(
            Order.id == order_id,
            Order.shop_id == shop_id,
        )
        .first()
    )

    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found",
        )

    return order


# =========================================================
# GET SINGLE ORDER WITH ITEMS
# =========================================================
@router.get("/{order_id}", response_model=OrderWithItemsResponse)
def get_order(
    order_id: int,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    order = _get_order(db, current_shop.id, order_id)

    return {"order": order, "items": order.items}


# =========================================================
# UPDATE ORDER HEADER (status / payment only)
# =========================================================
@router.put("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: int,
    order_data: OrderUpdate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    order = _get_order(db, current_shop.id, order_id)

    for field, value in order_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(order, field, value)

    db.commit()
    db.refresh(order)

    return order
