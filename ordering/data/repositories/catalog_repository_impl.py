"""SQLAlchemy implementation of CatalogLookup."""

import logging
from typing import Dict, Iterable, List, Optional, Set
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering.domain.entities.catalog import Product, Service, Status
from ordering.domain.repositories.catalog_lookup import CatalogLookup

from ..mappers import CatalogMapper
from ..models.catalog_model import ProductModel, ServiceModel, StatusModel

logger = logging.getLogger(__name__)


def _distinct(ids: Iterable[UUID]) -> List[UUID]:
    return list(dict.fromkeys(ids))


class SqlAlchemyCatalogRepository(CatalogLookup):
    """Read-only catalog queries over the reference tables."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def status_exists(self, status_id: UUID) -> bool:
        result = await self._session.execute(
            select(StatusModel.id).where(StatusModel.id == status_id)
        )
        return result.scalar_one_or_none() is not None

    async def existing_product_ids(self, product_ids: Iterable[UUID]) -> Set[UUID]:
        ids = _distinct(product_ids)
        if not ids:
            return set()

        result = await self._session.execute(
            select(ProductModel.id).where(ProductModel.id.in_(ids))
        )
        return set(result.scalars().all())

    async def existing_service_ids(self, service_ids: Iterable[UUID]) -> Set[UUID]:
        ids = _distinct(service_ids)
        if not ids:
            return set()

        result = await self._session.execute(
            select(ServiceModel.id).where(ServiceModel.id.in_(ids))
        )
        return set(result.scalars().all())

    async def resolve_product(self, product_id: UUID) -> Optional[Product]:
        model = await self._session.get(ProductModel, product_id)
        return CatalogMapper.product_to_domain(model) if model else None

    async def resolve_service(self, service_id: UUID) -> Optional[Service]:
        model = await self._session.get(ServiceModel, service_id)
        return CatalogMapper.service_to_domain(model) if model else None

    async def resolve_products(self, product_ids: Iterable[UUID]) -> Dict[UUID, Product]:
        ids = _distinct(product_ids)
        if not ids:
            return {}

        result = await self._session.execute(
            select(ProductModel).where(ProductModel.id.in_(ids))
        )
        products = [CatalogMapper.product_to_domain(m) for m in result.scalars().all()]
        return {product.id: product for product in products}

    async def resolve_services(self, service_ids: Iterable[UUID]) -> Dict[UUID, Service]:
        ids = _distinct(service_ids)
        if not ids:
            return {}

        result = await self._session.execute(
            select(ServiceModel).where(ServiceModel.id.in_(ids))
        )
        services = [CatalogMapper.service_to_domain(m) for m in result.scalars().all()]
        return {service.id: service for service in services}

    async def resolve_statuses(self, status_ids: Iterable[UUID]) -> Dict[UUID, Status]:
        ids = _distinct(status_ids)
        if not ids:
            return {}

        result = await self._session.execute(
            select(StatusModel).where(StatusModel.id.in_(ids))
        )
        statuses = [CatalogMapper.status_to_domain(m) for m in result.scalars().all()]
        return {status.id: status for status in statuses}

    async def find_status_ids_by_name(self, name: str) -> Set[UUID]:
        result = await self._session.execute(
            select(StatusModel.id).where(StatusModel.name == name)
        )
        ids = set(result.scalars().all())
        logger.debug(f"Status name {name!r} resolved to {len(ids)} id(s)")
        return ids
