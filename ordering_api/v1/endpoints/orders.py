"""Order endpoints for REST API."""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ordering.application.dtos.order_dto import (
    CreateOrderRequest,
    OrderDetailDTO,
    OrderSummaryDTO,
)
from ordering.application.services.order_service import OrderApplicationService

from ordering_api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderSummaryDTO])
async def list_orders(
    order_status: Optional[str] = Query(
        default=None,
        alias="status",
        description="Only return orders whose status name matches exactly",
    ),
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderSummaryDTO]:
    """List orders, newest first, optionally filtered by status name.

    Args:
        order_status: Optional status name filter
        service: OrderApplicationService instance

    Returns:
        List of OrderSummaryDTO instances
    """
    return await service.list_orders(order_status)


@router.get("/{order_id}", response_model=OrderDetailDTO)
async def get_order(
    order_id: UUID,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDetailDTO:
    """Get order by ID.

    Raises:
        HTTPException: If order not found
    """
    order = await service.get_order(order_id)
    if not order:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Order {order_id} not found")
    return order


@router.post("", response_model=OrderDetailDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDetailDTO:
    """Create a new order.

    Args:
        request: CreateOrderRequest DTO
        service: OrderApplicationService instance

    Returns:
        OrderDetailDTO with created order details
    """
    order = await service.create_order(request)
    logger.info(f"Order {order.id} created with {order.item_count} item(s)")
    return order


@router.patch("/{order_id}/status/{status_id}", response_model=bool)
async def update_order_status(
    order_id: UUID,
    status_id: UUID,
    service: OrderApplicationService = Depends(get_order_service),
) -> bool:
    """Move an order to another status.

    Raises:
        HTTPException: If order not found
    """
    updated = await service.update_order_status(order_id, status_id)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Order {order_id} not found")
    return updated
