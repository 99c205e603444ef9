from decimal import Decimal
from pydantic import BaseModel, Field


class UPIQRRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    description: str | None = None
    app: str | None = None


class UPIQRResponse(BaseModel):
    upi_url: str
    qr_data: str
    qr_image_url: str | None
    shop_name: str
    shop_name_hindi: str | None
    upi_id: str
    upi_app_name: str
    amount: Decimal
    description: str | None
    transaction_ref: str
    app_link: str
