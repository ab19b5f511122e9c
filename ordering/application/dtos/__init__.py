"""Application DTOs."""

from .order_dto import (
    CreateOrderRequest,
    OrderDetailDTO,
    OrderItemDTO,
    OrderItemToCreate,
    OrderSummaryDTO,
)

__all__ = [
    "CreateOrderRequest",
    "OrderDetailDTO",
    "OrderItemDTO",
    "OrderItemToCreate",
    "OrderSummaryDTO",
]
