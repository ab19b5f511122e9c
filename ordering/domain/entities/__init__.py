"""Domain entities and read views."""

from .catalog import Product, Service, Status
from .order import NewOrderItem, Order, OrderItem, utc_now
from .views import OrderDetail, OrderItemView, OrderSummary

__all__ = [
    "NewOrderItem",
    "Order",
    "OrderDetail",
    "OrderItem",
    "OrderItemView",
    "OrderSummary",
    "Product",
    "Service",
    "Status",
    "utc_now",
]
