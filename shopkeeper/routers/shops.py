# shopkeeper/routers/shops.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shopkeeper.database import get_db
from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.core.upi import validate_upi_id
from shopkeeper.models.shop import Shop
from shopkeeper.schemas.shop import ShopCreate, ShopUpdate, ShopResponse

router = APIRouter(
    prefix="/shops",
    tags=["Shops"],
)


def _check_upi_id(upi_id: str | None):
    if upi_id is not None and not validate_upi_id(upi_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid UPI ID",
        )


@router.post("", response_model=ShopResponse, status_code=status.HTTP_201_CREATED)
def create_shop(
    shop_data: ShopCreate,
    db: Session = Depends(get_db),
):
    _check_upi_id(shop_data.upi_id)

    shop = Shop(**shop_data.model_dump())

    db.add(shop)
    db.commit()
    db.refresh(shop)

    return shop


@router.get("/me", response_model=ShopResponse)
def get_shop(current_shop: Shop = Depends(get_current_shop)):
    return current_shop


@router.put("/me", response_model=ShopResponse)
def update_shop(
    shop_data: ShopUpdate,
    db: Session = Depends(get_db),
    current_shop: Shop = Depends(get_current_shop),
):
    _check_upi_id(shop_data.upi_id)

    for field, value in shop_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(current_shop, field, value)

    db.commit()
    db.refresh(current_shop)

    return current_shop
