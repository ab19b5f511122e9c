"""Application service for Order operations."""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import async_sessionmaker

from ordering.application.dtos.order_dto import (
    CreateOrderRequest,
    OrderDetailDTO,
    OrderSummaryDTO,
)
from ordering.data.uow import create_uow
from ordering.domain.repositories.order_repository import DEFAULT_PROFIT_STATUS


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Open one Unit of Work per operation
    - Commit writes once the repository has validated and flushed them
    - Transform domain views into DTOs

    Business rules live in the order repository.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def list_orders(self, status: Optional[str] = None) -> List[OrderSummaryDTO]:
        """List orders, newest first.

        Args:
            status: Optional exact status name filter

        Returns:
            List of OrderSummaryDTO instances
        """
        async with create_uow(self._session_factory) as uow:
            orders = await uow.orders.list_orders(status)
            return [OrderSummaryDTO.from_view(order) for order in orders]

    async def get_order(self, order_id: UUID) -> Optional[OrderDetailDTO]:
        """Get order by ID.

        Args:
            order_id: Order identifier

        Returns:
            OrderDetailDTO if found, None otherwise
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.get_order_by_id(order_id)
            if not order:
                return None
            return OrderDetailDTO.from_view(order)

    async def create_order(self, request: CreateOrderRequest) -> OrderDetailDTO:
        """Create a new order.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDetailDTO with created order details

        Raises:
            ForeignKeyNotFoundError: If a referenced status, product or service is missing
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.create_order(
                reseller_id=request.reseller_id,
                customer_id=request.customer_id,
                status_id=request.status_id,
                items=[item.to_domain() for item in request.items],
            )
            await uow.commit()
            return OrderDetailDTO.from_view(order)

    async def update_order_status(self, order_id: UUID, status_id: UUID) -> bool:
        """Change an order's status.

        Args:
            order_id: Order identifier
            status_id: New status identifier

        Returns:
            True if updated, False if the order does not exist

        Raises:
            ForeignKeyNotFoundError: If the status does not exist
        """
        async with create_uow(self._session_factory) as uow:
            updated = await uow.orders.update_order_status(order_id, status_id)
            if updated:
                await uow.commit()
            return updated

    async def get_monthly_profit(
        self,
        year: int,
        month: int,
        status: str = DEFAULT_PROFIT_STATUS,
    ) -> Decimal:
        """Profit of orders with the given status created in a calendar month."""
        async with create_uow(self._session_factory) as uow:
            return await uow.orders.get_monthly_profit(year, month, status)
