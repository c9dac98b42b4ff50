# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict
from datetime import datetime


class SignupIn(BaseModel):
    """Schema dla rejestracji."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=254)
    password: str = Field(..., min_length=1)


class LoginIn(BaseModel):
    """Schema dla logowania."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenOut(BaseModel):
    success: bool = True
    token: str


class ProductIn(BaseModel):
    """Schema dla dodawania produktu do katalogu."""

    name: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1, description="URL zwrocony przez /upload")
    category: str = Field(..., min_length=1)
    new_price: float = Field(..., ge=0)
    old_price: float = Field(..., ge=0)


class RemoveProductIn(BaseModel):
    id: str = Field(..., min_length=1, description="Identyfikator rekordu (_id), nie numer katalogowy")


class ProductNameOut(BaseModel):
    success: bool = True
    name: str


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    record_id: str = Field(..., serialization_alias="_id")
    id: int
    name: str
    image: str
    category: str
    new_price: float
    old_price: float
    available: bool
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class CartItemIn(BaseModel):
    """Schema dla dodawania/usuwania produktu z koszyka."""

    itemId: int = Field(..., gt=0, description="Numer katalogowy produktu (musi byc > 0)")


class CartOut(BaseModel):
    success: bool = True
    cartData: Dict[str, int]


class UploadOut(BaseModel):
    success: int = 1
    image_url: str
