from pydantic import BaseModel, Field
from datetime import datetime


class ShopCreate(BaseModel):
    name: str = Field(..., min_length=1)
    name_hindi: str | None = None
    owner_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    upi_id: str | None = None
    address: str | None = None
    gst_number: str | None = None
    language: str = "en"


class ShopUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    name_hindi: str | None = None
    owner_name: str | None = Field(None, min_length=1)
    phone: str | None = Field(None, min_length=1)
    upi_id: str | None = None
    address: str | None = None
    gst_number: str | None = None
    language: str | None = None


class ShopResponse(BaseModel):
    id: int
    name: str
    name_hindi: str | None
    owner_name: str
    phone: str
    upi_id: str | None
    address: str | None
    gst_number: str | None
    language: str
    created_at: datetime

    class Config:
        from_attributes = True
