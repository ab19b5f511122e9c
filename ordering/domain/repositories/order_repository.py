"""Repository interface for the Order aggregate."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Sequence
from uuid import UUID

from ..entities.order import NewOrderItem
from ..entities.views import OrderDetail, OrderSummary

DEFAULT_PROFIT_STATUS = "Completed"


class OrderRepository(ABC):
    """Abstract store for orders and their items."""

    @abstractmethod
    async def create_order(
        self,
        reseller_id: UUID,
        customer_id: UUID,
        status_id: UUID,
        items: Sequence[NewOrderItem],
    ) -> OrderDetail:
        """Validate references and persist a new order with its items.

        Args:
            reseller_id: Reseller identifier
            customer_id: Customer identifier
            status_id: Initial status identifier
            items: Requested line items

        Returns:
            OrderDetail of the created order

        Raises:
            ForeignKeyNotFoundError: If the status, a product or a service
                does not exist. Nothing is written in that case.
        """
        pass

    @abstractmethod
    async def update_order_status(self, order_id: UUID, status_id: UUID) -> bool:
        """Set the status of an existing order.

        Args:
            order_id: Order identifier
            status_id: New status identifier

        Returns:
            True if the order was updated, False if it does not exist

        Raises:
            ForeignKeyNotFoundError: If the status does not exist
        """
        pass

    @abstractmethod
    async def list_orders(self, status: Optional[str] = None) -> List[OrderSummary]:
        """List orders, newest first, optionally filtered by status name."""
        pass

    @abstractmethod
    async def get_order_by_id(self, order_id: UUID) -> Optional[OrderDetail]:
        """Retrieve a single order.

        Args:
            order_id: Order identifier

        Returns:
            OrderDetail if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_monthly_profit(
        self,
        year: int,
        month: int,
        status: str = DEFAULT_PROFIT_STATUS,
    ) -> Decimal:
        """Sum of (unit price - unit cost) x quantity over a calendar month.

        Args:
            year: Calendar year
            month: Calendar month (1-12)
            status: Status name the orders must currently have

        Returns:
            Profit amount, Decimal("0") when nothing matches
        """
        pass
