"""Domain layer - pure domain models and interfaces."""

from .entities import (
    NewOrderItem,
    Order,
    OrderDetail,
    OrderItem,
    OrderItemView,
    OrderSummary,
    Product,
    Service,
    Status,
)
from .exceptions import (
    ForeignKeyNotFoundError,
    InvalidProfitPeriodError,
    OrderingError,
    StoreUnavailableError,
)
from .repositories import CatalogLookup, OrderRepository

__all__ = [
    "CatalogLookup",
    "ForeignKeyNotFoundError",
    "InvalidProfitPeriodError",
    "NewOrderItem",
    "Order",
    "OrderDetail",
    "OrderItem",
    "OrderItemView",
    "OrderRepository",
    "OrderSummary",
    "OrderingError",
    "Product",
    "Service",
    "Status",
    "StoreUnavailableError",
]
