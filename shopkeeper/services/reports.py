# shopkeeper/services/reports.py

from datetime import date, datetime, time, timezone
from decimal import Decimal

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from shopkeeper.models.product import Product
from shopkeeper.models.transaction import Transaction

TWO_PLACES = Decimal("0.01")

# Last millisecond of the day, both ends of the window are inclusive
END_OF_DAY = time(23, 59, 59, 999000)


def _money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(TWO_PLACES)


def low_stock_products(db: Session, shop_id: int) -> list[Product]:
    return (
        db.query(Product)
        .filter(
            Product.shop_id == shop_id,
            Product.is_low_stock,
        )
        .order_by(Product.name)
        .all()
    )


def daily_sales(db: Session, shop_id: int, day: date) -> dict:
    start_dt = datetime.combine(day, time.min)
    end_dt = datetime.combine(day, END_OF_DAY)

    total, upi_total, count = (
        db.query(
            func.coalesce(func.sum(Transaction.amount), 0),
            func.coalesce(
                func.sum(
                    case(
                        (Transaction.payment_method == "upi", Transaction.amount),
                        else_=0,
                    )
                ),
                0,
            ),
            func.count(Transaction.id),
        )
        .filter(
            Transaction.shop_id == shop_id,
            Transaction.type == "sale",
            Transaction.created_at.between(start_dt, end_dt),
        )
        .one()
    )

    return {
        "day": day,
        "total": _money(total),
        "upi_total": _money(upi_total),
        "count": count or 0,
    }


def dashboard_stats(db: Session, shop_id: int) -> dict:
    today = datetime.now(timezone.utc).date()
    sales = daily_sales(db, shop_id, today)

    low_stock_count = (
        db.query(func.count(Product.id))
        .filter(
            Product.shop_id == shop_id,
            Product.is_low_stock,
        )
        .scalar()
    )

    return {
        "today_sales": sales["total"],
        "orders_count": sales["count"],
        "low_stock_count": low_stock_count or 0,
        "upi_collection": sales["upi_total"],
    }
