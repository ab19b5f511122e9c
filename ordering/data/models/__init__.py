"""Database models."""

from .base import Base, BinaryGUID
from .catalog_model import ProductModel, ServiceModel, StatusModel
from .order_model import OrderItemModel, OrderModel

__all__ = [
    "Base",
    "BinaryGUID",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
    "ServiceModel",
    "StatusModel",
]
