"""Application layer - services and DTOs."""

from .dtos import (
    CreateOrderRequest,
    OrderDetailDTO,
    OrderItemDTO,
    OrderItemToCreate,
    OrderSummaryDTO,
)
from .services import OrderApplicationService

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "OrderDetailDTO",
    "OrderItemDTO",
    "OrderItemToCreate",
    "OrderSummaryDTO",
    # Services
    "OrderApplicationService",
]
