from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from playarena.schemas.common import APIModel


class ProductCreate(APIModel):
    name: str
    description: Optional[str] = None
    category: str
    subcategory: Optional[str] = None
    price: float = Field(ge=0)
    discount_price: Optional[float] = Field(default=None, ge=0)
    images: Optional[list[str]] = None
    brand: Optional[str] = None
    specifications: Optional[dict[str, Any]] = None
    in_stock: bool = True
    stock_quantity: int = Field(default=0, ge=0)


class ProductUpdate(APIModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    discount_price: Optional[float] = Field(default=None, ge=0)
    images: Optional[list[str]] = None
    brand: Optional[str] = None
    specifications: Optional[dict[str, Any]] = None
    in_stock: Optional[bool] = None
    stock_quantity: Optional[int] = Field(default=None, ge=0)


class ProductResponse(ProductCreate):
    id: str
    rating: float = 0.0
    total_reviews: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CartItemCreate(APIModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class CartItemUpdate(APIModel):
    quantity: int = Field(ge=1)


class CartItemResponse(APIModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    created_at: Optional[datetime] = None
