from pydantic import BaseModel, Field
from datetime import datetime


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    name_hindi: str | None = None


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    name_hindi: str | None = None


class CategoryResponse(BaseModel):
    id: int
    name: str
    name_hindi: str | None
    created_at: datetime

    class Config:
        from_attributes = True
