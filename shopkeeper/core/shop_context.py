# shopkeeper/core/shop_context.py

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from shopkeeper.core.config import settings
from shopkeeper.database import get_db
from shopkeeper.models.shop import Shop


def get_current_shop(
    x_shop_id: int | None = Header(None),
    db: Session = Depends(get_db),
) -> Shop:
    # Every request runs on behalf of one shop, named by the caller
    shop_id = x_shop_id if x_shop_id is not None else settings.DEFAULT_SHOP_ID

    if shop_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Shop-Id header is required",
        )

    shop = db.query(Shop).filter(Shop.id == shop_id).first()

    if shop is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Shop not found",
        )

    return shop
