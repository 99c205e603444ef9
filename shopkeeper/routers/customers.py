# shopkeeper/routers/customers.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopkeeper.database import get_db
from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.models.customer import Customer
from shopkeeper.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
)

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
)


def _get_customer(db: Session, shop_id: int, customer_id: int) -> Customer:
    customer = (
        db.query(Customer)
        .filter(
            Customer.id == customer_id,
            Customer.shop_id == shop_id,
        )
        .first()
    )

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found",
        )

    return customer


@router.get("", response_model=list[CustomerResponse])
def list_customers(
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    return (
        db.query(Customer)
        .filter(Customer.shop_id == current_shop.id)
        .order_by(Customer.name)
        .all()
    )


@router.get("/phone/{phone}", response_model=CustomerResponse)
def get_customer_by_phone(
    phone: str,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    customer = (
        db.query(Customer)
        .filter(
            Customer.phone == phone,
            Customer.shop_id == current_shop.id,
        )
        .first()
    )

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found",
        )

    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    return _get_customer(db, current_shop.id, customer_id)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    customer = Customer(
        **customer_data.model_dump(),
        shop_id=current_shop.id,
    )

    db.add(customer)
    db.commit()
    db.refresh(customer)

    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    customer = _get_customer(db, current_shop.id, customer_id)

    for field, value in customer_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(customer, field, value)

    db.commit()
    db.refresh(customer)

    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    customer = _get_customer(db, current_shop.id, customer_id)

    try:
        db.delete(customer)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Customer has orders and cannot be deleted",
        )

    return None
