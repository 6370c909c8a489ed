# ecomm_service/schemas.py

from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductBase(BaseModel):
    # No range checks: negative prices and empty colors are stored as sent
    name: str = Field(..., description="Display name of the product.")
    price: float = Field(..., description="Unit price.")
    color: str = Field(..., description="Product color.")


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    id: Optional[int] = Field(
        None,
        description="Identity to save under. A missing id inserts a new product.",
    )


class OrderDetailBase(BaseModel):
    product_id: int = Field(..., description="ID of the ordered product.")
    quantity: int = Field(..., description="Number of units on this line.")
    discount: float = Field(
        0.0, description="Discount applied to the line; unit is not interpreted."
    )


class OrderDetailCreate(OrderDetailBase):
    pass


class OrderDetailResponse(OrderDetailBase):
    order_details_id: int
    order_id: int

    model_config = ConfigDict(from_attributes=True)


class ProductResponse(ProductBase):
    id: int
    order_details: List[OrderDetailResponse] = []

    model_config = ConfigDict(from_attributes=True)


class OrderCreate(BaseModel):
    ship_addr: Optional[str] = Field(None, description="Shipping address.")
    details: List[OrderDetailCreate] = Field(
        default_factory=list, description="Line items of the order."
    )


class OrderResponse(BaseModel):
    order_id: int
    ship_addr: Optional[str] = None
    order_date: datetime  # Always stamped by the server
    order_details: List[OrderDetailResponse] = []

    model_config = ConfigDict(from_attributes=True)

    @field_validator("order_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Backends without timezone storage (SQLite) return naive UTC values
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
