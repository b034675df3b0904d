"""
Order model for database operations
"""

from sqlalchemy import Column, BigInteger, String, DateTime, Float, Text
from datetime import datetime, timezone
import enum
import uuid

from restaurant_api.database import Base

class OrderStatus(str, enum.Enum):
    """Lifecycle stages of an order"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]

DEFAULT_TOTAL_AMOUNT = 20.0

def _generate_id() -> str:
    return uuid.uuid4().hex

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Order(Base):
    """Order entity model"""
    __tablename__ = "orders"

    id = Column(String(32), primary_key=True, index=True, default=_generate_id)
    customer_name = Column(Text, nullable=False)
    mobile_number = Column(Text, nullable=False)
    food_item = Column(Text, nullable=False)
    quantity = Column(BigInteger, nullable=False)
    address = Column(Text, nullable=False)
    order_date = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    status = Column(String(20), default=OrderStatus.PENDING.value, nullable=False)
    total_amount = Column(Float, default=DEFAULT_TOTAL_AMOUNT, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    def __repr__(self):
        return f"<Order(id='{self.id}', customer_name='{self.customer_name}', status='{self.status}')>"
