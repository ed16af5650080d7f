# app/domain/schemas.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.domain.enums import JewelryCategory, OrderStatus


def _strip_or_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value.strip()


# catalog

class JewelryItemCreate(BaseModel):
    """Payload for adding a piece to the catalog."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    materials: str = Field(..., min_length=1, max_length=500, description="Comma separated list")
    category: JewelryCategory
    price: int = Field(..., gt=0, description="Price in cents")
    image_url: Optional[str] = Field(None, max_length=1000)
    stock_quantity: int = Field(..., ge=0)
    is_featured: bool = False


class JewelryItemUpdate(BaseModel):
    """Partial update; fields left out are not touched."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    materials: Optional[str] = Field(None, min_length=1, max_length=500)
    category: Optional[JewelryCategory] = None
    price: Optional[int] = Field(None, gt=0)
    image_url: Optional[str] = Field(None, max_length=1000)
    stock_quantity: Optional[int] = Field(None, ge=0)
    is_featured: Optional[bool] = None

    @field_validator("name", "description", "materials", "category", "price", "stock_quantity", "is_featured")
    @classmethod
    def not_null(cls, value):
        #omit the field to keep it, only image_url can be cleared
        if value is None:
            raise ValueError("must not be null")
        return value


class JewelryItemOut(BaseModel):
    id: int
    name: str
    description: str
    materials: str
    category: JewelryCategory
    price: int
    image_url: Optional[str] = None
    stock_quantity: int
    is_featured: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# cart

class CartItemIn(BaseModel):
    """Add a catalog item to a guest cart."""

    session_id: str = Field(..., min_length=1, max_length=255)
    jewelry_item_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)

    @field_validator("session_id")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return _not_blank(value)


class CartItemUpdate(BaseModel):
    quantity: int = Field(..., gt=0)


class CartItemOut(BaseModel):
    id: int
    session_id: str
    quantity: int
    jewelry_item: JewelryItemOut
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    session_id: str
    items: List[CartItemOut]
    total_amount: int = Field(..., description="Current catalog prices, in cents")


# orders

class OrderCreate(BaseModel):
    """Checkout form. billing_address=None means 'same as shipping'."""

    session_id: str = Field(..., min_length=1, max_length=255)
    customer_name: str = Field(..., min_length=1, max_length=200)
    customer_email: EmailStr
    customer_phone: Optional[str] = Field(None, max_length=50)
    shipping_address: str = Field(..., min_length=1)
    billing_address: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("session_id", "customer_name", "shipping_address")
    @classmethod
    def not_blank(cls, value: str) -> str:
        return _not_blank(value)

    @field_validator("customer_phone", "billing_address", "notes")
    @classmethod
    def blank_to_none(cls, value):
        return _strip_or_none(value)


class OrderItemOut(BaseModel):
    id: int
    quantity: int
    price_at_time: int
    jewelry_item_id: Optional[int] = None
    jewelry_item: Optional[JewelryItemOut] = None

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: int
    session_id: str
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    shipping_address: str
    billing_address: Optional[str] = None
    total_amount: int
    status: OrderStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemOut]

    model_config = ConfigDict(from_attributes=True)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderRejectionOut(BaseModel):
    reason: str
    message: str


# admin

class AdminLoginIn(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenOut(BaseModel):
    token: str
    token_type: str = "bearer"


class TokenIn(BaseModel):
    token: str


class AdminUserOut(BaseModel):
    """Admin principal as exposed over HTTP (no password hash)."""

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
