"""
Order service for the Restaurant Order API
Handles all order-related business logic
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import logging
import uuid

from restaurant_api.models.order import Order, OrderStatus
from restaurant_api.schemas.order import OrderCreate
from restaurant_api.utils.error_handler import ValidationError, NotFoundError, InternalError

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "Order not found"

class OrderService:
    """Service for order management operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order_in: OrderCreate) -> Order:
        """Place a new order with default status and amount"""
        required = [
            order_in.customer_name,
            order_in.mobile_number,
            order_in.food_item,
            order_in.quantity,
            order_in.address,
        ]
        if not all(required):
            raise ValidationError("All fields are required")
        if order_in.quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        try:
            db_order = Order(
                customer_name=order_in.customer_name,
                mobile_number=order_in.mobile_number,
                food_item=order_in.food_item,
                quantity=order_in.quantity,
                address=order_in.address
            )
            self.db.add(db_order)
            self.db.commit()
            self.db.refresh(db_order)
        except SQLAlchemyError as e:
            self._fail("Failed to place order", e)

        logger.info(f"Created order with ID: {db_order.id}")
        return db_order

    def list_orders(self, status: Optional[str] = None) -> list[Order]:
        """Return orders, most recently created first"""
        if status:
            self._check_status(status)

        try:
            query = self.db.query(Order)
            if status:
                query = query.filter(Order.status == status)
            return query.order_by(Order.created_at.desc()).all()
        except SQLAlchemyError as e:
            self._fail("Failed to fetch orders", e)

    def get_order(self, order_id: str) -> Order:
        """Fetch a single order or raise NotFoundError"""
        return self._find(order_id, "Failed to fetch order")

    def update_order_status(self, order_id: str, status: Optional[str]) -> Order:
        """Change the status of an order; nothing else is touched"""
        self._check_status(status)
        db_order = self._find(order_id, "Failed to update order")

        try:
            db_order.status = status
            self.db.commit()
            self.db.refresh(db_order)
        except SQLAlchemyError as e:
            self._fail("Failed to update order", e)

        logger.info(f"Updated order {order_id} status to {status}")
        return db_order

    def delete_order(self, order_id: str) -> None:
        """Permanently remove an order"""
        db_order = self._find(order_id, "Failed to delete order")

        try:
            self.db.delete(db_order)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("Failed to delete order", e)

        logger.info(f"Deleted order with ID: {order_id}")

    def _find(self, order_id: str, failure_message: str) -> Order:
        key = self._parse_id(order_id)
        try:
            db_order = self.db.get(Order, key)
        except SQLAlchemyError as e:
            self._fail(failure_message, e)

        if db_order is None:
            raise NotFoundError(ORDER_NOT_FOUND)
        return db_order

    @staticmethod
    def _parse_id(order_id: str) -> str:
        # Ids are stored as 32-char hex; dashed UUIDs are accepted too
        try:
            return uuid.UUID(str(order_id)).hex
        except ValueError:
            raise NotFoundError(ORDER_NOT_FOUND)

    @staticmethod
    def _check_status(status: Optional[str]) -> None:
        if not status:
            raise ValidationError("Status is required")
        if status not in OrderStatus.values():
            raise ValidationError(
                f"Invalid status '{status}'",
                f"Status must be one of: {', '.join(OrderStatus.values())}"
            )

    def _fail(self, message: str, error: SQLAlchemyError):
        self.db.rollback()
        logger.error(f"{message}: {error}")
        raise InternalError(message, str(error)) from error
