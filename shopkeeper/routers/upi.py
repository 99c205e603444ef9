# shopkeeper/routers/upi.py

from fastapi import APIRouter, Depends, HTTPException

from shopkeeper.core.shop_context import get_current_shop
from shopkeeper.core.upi import (
    app_deep_link,
    build_upi_url,
    generate_transaction_reference,
    qr_image_url,
    upi_app_name,
)
from shopkeeper.models.shop import Shop
from shopkeeper.schemas.upi import UPIQRRequest, UPIQRResponse

router = APIRouter(prefix="/upi", tags=["UPI"])


@router.post("/generate-qr", response_model=UPIQRResponse)
def generate_qr(
    qr_request: UPIQRRequest,
    current_shop: Shop = Depends(get_current_shop),
):
    if not current_shop.upi_id:
        raise HTTPException(status_code=400, detail="UPI ID not configured")

    transaction_ref = generate_transaction_reference()

    upi_url = build_upi_url(
        payee_address=current_shop.upi_id,
        payee_name=current_shop.name,
        amount=qr_request.amount,
        note=qr_request.description or "Payment",
        transaction_ref=transaction_ref,
    )

    return {
        "upi_url": upi_url,
        "qr_data": upi_url,
        "qr_image_url": qr_image_url(upi_url),
        "shop_name": current_shop.name,
        "shop_name_hindi": current_shop.name_hindi,
        "upi_id": current_shop.upi_id,
        "upi_app_name": upi_app_name(current_shop.upi_id),
        "amount": qr_request.amount,
        "description": qr_request.description,
        "transaction_ref": transaction_ref,
        "app_link": app_deep_link(upi_url, qr_request.app),
    }
