"""Repository implementations."""

from .catalog_repository_impl import SqlAlchemyCatalogRepository
from .order_repository_impl import SqlAlchemyOrderRepository

__all__ = ["SqlAlchemyCatalogRepository", "SqlAlchemyOrderRepository"]
