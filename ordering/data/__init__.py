"""Data layer - infrastructure persistence and mapping."""

from .mappers import CatalogMapper, OrderItemMapper, OrderMapper
from .models import (
    Base,
    BinaryGUID,
    OrderItemModel,
    OrderModel,
    ProductModel,
    ServiceModel,
    StatusModel,
)
from .repositories import SqlAlchemyCatalogRepository, SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "BinaryGUID",
    "CatalogMapper",
    "create_uow",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "ProductModel",
    "ServiceModel",
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyOrderRepository",
    "StatusModel",
    "UnitOfWork",
]
