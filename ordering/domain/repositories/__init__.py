"""Repository interfaces."""

from .catalog_lookup import CatalogLookup
from .order_repository import DEFAULT_PROFIT_STATUS, OrderRepository

__all__ = ["CatalogLookup", "DEFAULT_PROFIT_STATUS", "OrderRepository"]
