"""
Order management endpoints
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import Optional
import logging

from restaurant_api.database import get_db
from restaurant_api.schemas.order import (
    OrderCreate, OrderStatusUpdate, OrderResponse,
    OrderCreatedResponse, OrderDetailResponse, OrderListResponse, MessageResponse
)
from restaurant_api.services.order_service import OrderService
from restaurant_api.utils.limiter import limiter

logger = logging.getLogger(__name__)

router = APIRouter()

def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)

@router.post("", response_model=OrderCreatedResponse, status_code=201)
@router.post("/", response_model=OrderCreatedResponse, status_code=201, include_in_schema=False)
@limiter.limit("20/minute")
async def create_order(
    request: Request,
    order: Optional[OrderCreate] = None,
    service: OrderService = Depends(get_order_service)
):
    """Place a new order"""
    # An absent body is reported the same way as absent fields
    db_order = service.create_order(order if order is not None else OrderCreate())
    return OrderCreatedResponse(
        message="Order placed successfully!",
        order_id=db_order.id,
        order=OrderResponse.model_validate(db_order)
    )

@router.get("", response_model=OrderListResponse)
@router.get("/", response_model=OrderListResponse, include_in_schema=False)
@limiter.limit("30/minute")
async def list_orders(
    request: Request,
    status: Optional[str] = Query(None, description="Filter by status"),
    service: OrderService = Depends(get_order_service)
):
    """List orders, newest first"""
    orders = service.list_orders(status=status)
    return OrderListResponse(
        count=len(orders),
        orders=[OrderResponse.model_validate(o) for o in orders]
    )

@router.get("/{order_id}", response_model=OrderDetailResponse, response_model_exclude_none=True)
@limiter.limit("30/minute")
async def get_order(
    request: Request,
    order_id: str,
    service: OrderService = Depends(get_order_service)
):
    """Get a specific order by ID"""
    db_order = service.get_order(order_id)
    return OrderDetailResponse(order=OrderResponse.model_validate(db_order))

@router.put("/{order_id}", response_model=OrderDetailResponse)
@limiter.limit("20/minute")
async def update_order_status(
    request: Request,
    order_id: str,
    order_update: OrderStatusUpdate,
    service: OrderService = Depends(get_order_service)
):
    """Update the status of an order; other fields in the body are ignored"""
    db_order = service.update_order_status(order_id, order_update.status)
    return OrderDetailResponse(
        message="Order updated successfully",
        order=OrderResponse.model_validate(db_order)
    )

@router.delete("/{order_id}", response_model=MessageResponse)
@limiter.limit("20/minute")
async def delete_order(
    request: Request,
    order_id: str,
    service: OrderService = Depends(get_order_service)
):
    """Delete an order"""
    service.delete_order(order_id)
    return MessageResponse(message="Order deleted successfully")
