# shopkeeper/routers/products.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopkeeper.database import get_db
from shopkeeper.core.exceptions import InsufficientStockError, StorageError
from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.models.category import Category
from shopkeeper.models.product import Product
from shopkeeper.models.stock_movement import StockMovement
from shopkeeper.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    StockAdjustment,
    StockMovementResponse,
)
from shopkeeper.services.reports import low_stock_products
from shopkeeper.services.stock import adjust_stock

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


def _get_product(db: Session, shop_id: int, product_id: int) -> Product:
    product = (
        db.query(Product)
        .filter(
            Product.id == product_id,
            Product.shop_id == shop_id,
        )
        .first()
    )

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return product


def _check_category(db: Session, shop_id: int, category_id: int | None):
    if category_id is None:
        return

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
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category not found",
        )


def _commit_product(db: Session):
    # Concurrent writers can both pass the duplicate-name lookup
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product with this name already exists",
        )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    # Prevent duplicate product names per shop
    existing_product = (
        db.query(Product)
        .filter(
            Product.name == product_data.name,
            Product.shop_id == current_shop.id,
        )
        .first()
    )
    if existing_product:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product with this name already exists",
        )

    _check_category(db, current_shop.id, product_data.category_id)

    product = Product(
        **product_data.model_dump(),
        shop_id=current_shop.id,
    )

    db.add(product)
    _commit_product(db)
    db.refresh(product)

    return product


@router.get("", response_model=list[ProductResponse])
def list_products(
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    products = (
        db.query(Product)
        .filter(Product.shop_id == current_shop.id)
        .order_by(Product.id.desc())
        .all()
    )

    return products


@router.get("/low-stock", response_model=list[ProductResponse])
def list_low_stock_products(
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    return low_stock_products(db, current_shop.id)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    return _get_product(db, current_shop.id, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    product = _get_product(db, current_shop.id, product_id)

    changes = product_data.model_dump(exclude_unset=True)

    if changes.get("name") and changes["name"] != product.name:
        duplicate = (
            db.query(Product)
            .filter(
                Product.name == changes["name"],
                Product.shop_id == current_shop.id,
            )
            .first()
        )
        if duplicate:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Product with this name already exists",
            )

    if "category_id" in changes:
        _check_category(db, current_shop.id, changes["category_id"])
        product.category_id = changes.pop("category_id")

    # Stock only moves through orders and stock adjustments
    for field, value in changes.items():
        if value is not None:
            setattr(product, field, value)

    _commit_product(db)
    db.refresh(product)

    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    product = _get_product(db, current_shop.id, product_id)

    try:
        db.delete(product)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product has sales or stock history and cannot be deleted",
        )

    return None


# =========================================================
# STOCK
# =========================================================
@router.put("/{product_id}/stock", response_model=ProductResponse)
def update_product_stock(
    product_id: int,
    adjustment: StockAdjustment,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    _get_product(db, current_shop.id, product_id)

    try:
        return adjust_stock(db, current_shop.id, product_id, adjustment)

    except InsufficientStockError as e:
        raise HTTPException(status_code=409, detail=e.message)

    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to update product stock")


@router.get("/{product_id}/movements", response_model=list[StockMovementResponse])
def list_stock_movements(
    product_id: int,
    db: Session = Depends(get_db),
    current_shop=Depends(get_current_shop),
):
    _get_product(db, current_shop.id, product_id)

    return (
        db.query(StockMovement)
        .filter(
            StockMovement.product_id == product_id,
            StockMovement.shop_id == current_shop.id,
        )
        .order_by(StockMovement.created_at.desc(), StockMovement.id.desc())
        .all()
    )
