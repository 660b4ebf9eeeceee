# shop/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, PlainSerializer
from typing import Annotated, List
from decimal import Decimal

# w pamieci Decimal, w JSON jako number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CredentialsIn(BaseModel):
    """Schema dla signup i login."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class MessageOut(BaseModel):
    message: str


class TokenOut(BaseModel):
    token: str


class DetailOut(BaseModel):
    detail: str


class ProtectedOut(BaseModel):
    message: str
    user: dict


class ProductOut(BaseModel):
    id: int
    name: str
    price: Money

    model_config = ConfigDict(from_attributes=True)


class CartAddIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productID", gt=0, description="ID produktu")
    quantity: int = Field(..., gt=0, description="Ilosc (musi byc > 0)")


class CartLineOut(BaseModel):
    product_id: int
    product_name: str
    unit_price: Money
    quantity: int
    tax: Money
    total_price: Money


class CartOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cart_details: List[CartLineOut] = Field(..., alias="cartDetails")
    total_amount: Money
