# shopkeeper/services/stock.py

from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shopkeeper.core.config import settings
from shopkeeper.core.exceptions import InsufficientStockError, StorageError
from shopkeeper.models.product import Product
from shopkeeper.models.stock_movement import StockMovement
from shopkeeper.schemas.product import StockAdjustment


def apply_stock_delta(
    db: Session,
    shop_id: int,
    product_id: int,
    delta: Decimal,
    allow_negative_stock: bool,
):
    """
    Shift a product's stock by ``delta`` with a single relative UPDATE.

    The update is ``stock = stock + delta`` evaluated by the database, so
    concurrent writers serialize without losing updates. When negative stock
    is not allowed, outflows carry a ``stock + delta >= 0`` guard and a
    refused update raises InsufficientStockError. The caller owns the
    surrounding transaction.
    """
    query = db.query(Product).filter(
        Product.id == product_id,
        Product.shop_id == shop_id,
    )

    if not allow_negative_stock and delta < 0:
        query = query.filter(Product.stock + delta >= 0)

    updated = query.update(
        {Product.stock: Product.stock + delta},
        synchronize_session=False,
    )

    if updated:
        return

    exists = (
        db.query(Product.id)
        .filter(Product.id == product_id, Product.shop_id == shop_id)
        .first()
    )

    if exists is None:
        raise StorageError(f"Product {product_id} not found")

    raise InsufficientStockError(product_id, -delta)


def adjust_stock(
    db: Session,
    shop_id: int,
    product_id: int,
    adjustment: StockAdjustment,
    allow_negative_stock: bool | None = None,
) -> Product:
    if allow_negative_stock is None:
        allow_negative_stock = settings.ALLOW_NEGATIVE_STOCK

    try:
        apply_stock_delta(
            db,
            shop_id,
            product_id,
            adjustment.quantity,
            allow_negative_stock,
        )

        db.add(
            StockMovement(
                shop_id=shop_id,
                product_id=product_id,
                type="in" if adjustment.quantity > 0 else "out",
                quantity=adjustment.quantity,
                reason=adjustment.reason,
                notes=adjustment.notes or "Manual stock adjustment",
            )
        )

        db.commit()

    except StorageError:
        db.rollback()
        raise

    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageError("Unable to adjust stock") from exc

    return db.query(Product).filter(Product.id == product_id).one()
