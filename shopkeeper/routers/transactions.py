# shopkeeper/routers/transactions.py

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from shopkeeper.database import get_db
from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.models.customer import Customer
from shopkeeper.models.order import Order
from shopkeeper.models.transaction import Transaction
from shopkeeper.schemas.transaction import TransactionCreate, TransactionResponse

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=list[TransactionResponse])
def list_transactions(
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
    limit: int = Query(50, ge=1, le=500),
):
    return (
        db.query(Transaction)
        .filter(Transaction.shop_id == current_shop.id)
        .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        .limit(limit)
        .all()
    )


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction_data: TransactionCreate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    if transaction_data.order_id is not None:
        order = (
            db.query(Order)
            .filter(
                Order.id == transaction_data.order_id,
                Order.shop_id == current_shop.id,
            )
            .first()
        )
        if not order:
            raise HTTPException(status_code=400, detail="Order not found")

    if transaction_data.customer_id is not None:
        customer = (
            db.query(Customer)
            .filter(
                Customer.id == transaction_data.customer_id,
                Customer.shop_id == current_shop.id,
            )
            .first()
        )
        if not customer:
            raise HTTPException(status_code=400, detail="Customer not found")

    transaction = Transaction(
        **transaction_data.model_dump(),
        shop_id=current_shop.id,
    )

    db.add(transaction)
    db.commit()
    db.refresh(transaction)

    return transaction
