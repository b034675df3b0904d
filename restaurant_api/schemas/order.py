"""
Pydantic schemas for Order operations
"""

from pydantic import BaseModel, Field, validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone

# Largest value a 64-bit INTEGER column can hold
MAX_QUANTITY = 2**63 - 1

class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class OrderCreate(CamelModel):
    """Schema for placing a new order

    Every field is optional here so that a missing field reaches the service
    and is reported as "All fields are required" instead of a type error.
    """
    customer_name: Optional[str] = Field(None, description="Customer's name")
    mobile_number: Optional[str] = Field(None, description="Contact mobile number")
    food_item: Optional[str] = Field(None, description="Ordered food item")
    quantity: Optional[int] = Field(None, le=MAX_QUANTITY, description="Number of items, at least 1")
    address: Optional[str] = Field(None, description="Delivery address")

    @validator('customer_name', 'mobile_number', 'food_item', 'address', pre=True)
    def normalize_text(cls, v):
        if v is None:
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @validator('quantity', pre=True)
    def normalize_quantity(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
        return v

class OrderStatusUpdate(CamelModel):
    """Schema for updating an order; only the status is applied"""
    status: Optional[str] = Field(None, description="New order status")

    @validator('status', pre=True)
    def normalize_status(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

class OrderResponse(CamelModel):
    """Schema for order responses"""
    id: str = Field(..., alias="_id")
    customer_name: str
    mobile_number: str
    food_item: str
    quantity: int
    address: str
    order_date: datetime
    status: str
    total_amount: float
    created_at: datetime
    updated_at: Optional[datetime]

    @validator('order_date', 'created_at', 'updated_at')
    def assume_utc(cls, v):
        # SQLite hands timestamps back without their offset; they are written as UTC
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class OrderCreatedResponse(CamelModel):
    """Envelope returned after placing an order"""
    success: bool = True
    message: str
    order_id: str
    order: OrderResponse

class OrderDetailResponse(CamelModel):
    """Envelope wrapping a single order"""
    success: bool = True
    message: Optional[str] = None
    order: OrderResponse

class OrderListResponse(CamelModel):
    """Envelope wrapping every order, newest first"""
    success: bool = True
    count: int
    orders: list[OrderResponse]

class MessageResponse(CamelModel):
    success: bool = True
    message: str
