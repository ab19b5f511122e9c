"""SQLAlchemy implementation of OrderRepository."""

import logging
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering.domain.entities.order import NewOrderItem, Order
from ordering.domain.entities.views import OrderDetail, OrderSummary
from ordering.domain.exceptions import ForeignKeyNotFoundError, InvalidProfitPeriodError
from ordering.domain.repositories.catalog_lookup import CatalogLookup
from ordering.domain.repositories.order_repository import DEFAULT_PROFIT_STATUS, OrderRepository

from ..mappers import OrderMapper
from ..models.order_model import OrderItemModel, OrderModel

logger = logging.getLogger(__name__)


def _month_bounds(year: int, month: int):
    """Half-open [start, end) datetime range covering one calendar month."""
    if not 1 <= month <= 12:
        raise InvalidProfitPeriodError(f"Month must be between 1 and 12, got: {month}")
    if not 1 <= year <= 9999:
        raise InvalidProfitPeriodError(f"Year must be between 1 and 9999, got: {year}")

    start = datetime(year, month, 1)
    if month == 12:
        # datetime(10000, 1, 1) is not representable
        end = datetime(year + 1, 1, 1) if year < 9999 else datetime.max
    else:
        end = datetime(year, month + 1, 1)
    return start, end


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    All reference data is validated and resolved through the catalog
    lookup. Writes are flushed but never committed here; the unit of
    work owns the transaction.
    """

    def __init__(self, session: AsyncSession, catalog: CatalogLookup) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
            catalog: Catalog lookup sharing the same session
        """
        self._session = session
        self._catalog = catalog

    # =========================================================================
    # WRITE PATH
    # =========================================================================

    async def create_order(
        self,
        reseller_id: UUID,
        customer_id: UUID,
        status_id: UUID,
        items: Sequence[NewOrderItem],
    ) -> OrderDetail:
        logger.info(f"Creating order for reseller {reseller_id} with {len(items)} item(s)")

        await self._validate_status(status_id)
        await self._validate_items(items)

        order = Order.create(
            reseller_id=reseller_id,
            customer_id=customer_id,
            status_id=status_id,
            items=items,
        )

        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()  # Propagate to DB without committing

        logger.info(f"✅ Created order: {order.id}")

        detail = await self.get_order_by_id(order.id)
        if detail is None:
            raise RuntimeError(f"Order {order.id} not visible after flush")
        return detail

    async def update_order_status(self, order_id: UUID, status_id: UUID) -> bool:
        logger.info(f"Updating status of order {order_id} to {status_id}")

        await self._validate_status(status_id)

        model = await self._session.get(OrderModel, order_id)
        if model is None:
            logger.info(f"Order not found for status update: {order_id}")
            return False

        model.status_id = status_id
        await self._session.flush()

        logger.info(f"✅ Updated status of order {order_id}")
        return True

    async def _validate_status(self, status_id: UUID) -> None:
        if not await self._catalog.status_exists(status_id):
            logger.warning(f"Status not found: {status_id}")
            raise ForeignKeyNotFoundError(
                f"Status with id {status_id} does not exist",
                field="statusId",
                values=[status_id],
            )

    async def _validate_items(self, items: Sequence[NewOrderItem]) -> None:
        product_ids = list(dict.fromkeys(item.product_id for item in items))
        existing = await self._catalog.existing_product_ids(product_ids)
        missing_products = [pid for pid in product_ids if pid not in existing]
        if missing_products:
            logger.warning(f"Products not found: {missing_products}")
            raise ForeignKeyNotFoundError(
                f"Product(s) not found: {','.join(str(pid) for pid in missing_products)}",
                field="items",
                values=missing_products,
            )

        service_ids = list(dict.fromkeys(item.service_id for item in items))
        existing = await self._catalog.existing_service_ids(service_ids)
        missing_services = [sid for sid in service_ids if sid not in existing]
        if missing_services:
            logger.warning(f"Services not found: {missing_services}")
            raise ForeignKeyNotFoundError(
                f"Service(s) not found: {','.join(str(sid) for sid in missing_services)}",
                field="items",
                values=missing_services,
            )

    # =========================================================================
    # READ PATH
    # =========================================================================

    async def list_orders(self, status: Optional[str] = None) -> List[OrderSummary]:
        logger.info(f"Listing orders (status={status!r})")

        query = select(OrderModel)

        if status:
            status_ids = await self._catalog.find_status_ids_by_name(status)
            if not status_ids:
                logger.info(f"No status named {status!r}")
                return []
            query = query.where(OrderModel.status_id.in_(list(status_ids)))

        result = await self._session.execute(
            query.order_by(OrderModel.created_date.desc(), OrderModel.id)
        )
        order_models = result.scalars().all()

        details = await self._build_details(order_models)
        summaries = [detail.summary() for detail in details]

        logger.info(f"✅ Found {len(summaries)} orders")
        return summaries

    async def get_order_by_id(self, order_id: UUID) -> Optional[OrderDetail]:
        logger.info(f"Getting order: {order_id}")

        result = await self._session.execute(
            select(OrderModel).where(OrderModel.id == order_id)
        )
        model = result.scalar_one_or_none()

        if not model:
            logger.info(f"Order not found: {order_id}")
            return None

        details = await self._build_details([model])
        return details[0]

    async def get_monthly_profit(
        self,
        year: int,
        month: int,
        status: str = DEFAULT_PROFIT_STATUS,
    ) -> Decimal:
        start, end = _month_bounds(year, month)
        logger.info(f"Computing profit for {year}-{month:02d} (status={status!r})")

        profit = Decimal("0")

        status_ids = await self._catalog.find_status_ids_by_name(status)
        if not status_ids:
            return profit

        result = await self._session.execute(
            select(OrderItemModel.product_id, OrderItemModel.quantity)
            .join(OrderModel, OrderModel.id == OrderItemModel.order_id)
            .where(
                OrderModel.status_id.in_(list(status_ids)),
                OrderModel.created_date >= start,
                OrderModel.created_date < end,
            )
        )
        rows = result.all()
        if not rows:
            return profit

        products = await self._catalog.resolve_products(row.product_id for row in rows)
        for row in rows:
            product = products.get(row.product_id)
            if product is not None:
                profit += product.unit_margin * row.quantity

        logger.info(f"✅ Profit for {year}-{month:02d}: {profit} over {len(rows)} item(s)")
        return profit

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    async def _load_items(self, order_ids: List[UUID]) -> Dict[UUID, List[OrderItemModel]]:
        """Fetch item rows for many orders, grouped by order id in line order."""
        grouped: Dict[UUID, List[OrderItemModel]] = defaultdict(list)
        if not order_ids:
            return grouped

        result = await self._session.execute(
            select(OrderItemModel)
            .where(OrderItemModel.order_id.in_(order_ids))
            .order_by(OrderItemModel.line_number)
        )
        for item in result.scalars().all():
            grouped[item.order_id].append(item)
        return grouped

    async def _build_details(self, order_models: Sequence[OrderModel]) -> List[OrderDetail]:
        """Resolve items and catalog data explicitly, then assemble views."""
        if not order_models:
            return []

        items_by_order = await self._load_items([m.id for m in order_models])
        all_items = [item for items in items_by_order.values() for item in items]

        statuses = await self._catalog.resolve_statuses(m.status_id for m in order_models)
        products = await self._catalog.resolve_products(i.product_id for i in all_items)
        services = await self._catalog.resolve_services(i.service_id for i in all_items)

        return [
            OrderMapper.to_detail(
                model,
                items_by_order.get(model.id, []),
                statuses,
                products,
                services,
            )
            for model in order_models
        ]
