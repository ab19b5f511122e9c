"""Read-only lookup interface for catalog reference data."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Set
from uuid import UUID

from ..entities.catalog import Product, Service, Status


class CatalogLookup(ABC):
    """Existence and attribute queries against statuses, products and services.

    Missing records are reported as absence, never as an exception.
    """

    @abstractmethod
    async def status_exists(self, status_id: UUID) -> bool:
        """Check whether a status exists.

        Args:
            status_id: Status identifier

        Returns:
            True if the status exists, False otherwise
        """
        pass

    @abstractmethod
    async def existing_product_ids(self, product_ids: Iterable[UUID]) -> Set[UUID]:
        """Return the subset of product ids that exist."""
        pass

    @abstractmethod
    async def existing_service_ids(self, service_ids: Iterable[UUID]) -> Set[UUID]:
        """Return the subset of service ids that exist."""
        pass

    @abstractmethod
    async def resolve_product(self, product_id: UUID) -> Optional[Product]:
        pass

    @abstractmethod
    async def resolve_service(self, service_id: UUID) -> Optional[Service]:
        pass

    @abstractmethod
    async def resolve_products(self, product_ids: Iterable[UUID]) -> Dict[UUID, Product]:
        """Resolve many products at once.

        Args:
            product_ids: Product identifiers

        Returns:
            Mapping of id to Product for the ids that exist
        """
        pass

    @abstractmethod
    async def resolve_services(self, service_ids: Iterable[UUID]) -> Dict[UUID, Service]:
        pass

    @abstractmethod
    async def resolve_statuses(self, status_ids: Iterable[UUID]) -> Dict[UUID, Status]:
        pass

    @abstractmethod
    async def find_status_ids_by_name(self, name: str) -> Set[UUID]:
        """Ids of statuses whose name equals `name` exactly (case-sensitive)."""
        pass
