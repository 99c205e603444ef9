# shopkeeper/routers/categories.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shopkeeper.database import get_db
from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.models.category import Category
from shopkeeper.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
)

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
)


def _get_category(db: Session, shop_id: int, category_id: int) -> Category:
    category = (
        db.query(Category)
        .filter(
            Category.id == category_id,
            Category.shop_id == shop_id,
        )
        .first()
    )

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )

    return category


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    return (
        db.query(Category)
        .filter(Category.shop_id == current_shop.id)
        .order_by(Category.name)
        .all()
    )


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    category = Category(
        **category_data.model_dump(),
        shop_id=current_shop.id,
    )

    db.add(category)
    db.commit()
    db.refresh(category)

    return category


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    category = _get_category(db, current_shop.id, category_id)

    if category_data.name is not None:
        category.name = category_data.name

    if category_data.name_hindi is not None:
        category.name_hindi = category_data.name_hindi

    db.commit()
    db.refresh(category)

    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    category = _get_category(db, current_shop.id, category_id)

    db.delete(category)
    db.commit()

    return None
