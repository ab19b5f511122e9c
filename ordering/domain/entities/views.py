"""
Read-side projections of an order.

Views are computed from current catalog state every time they are built;
they are never persisted.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple
from uuid import UUID

ZERO = Decimal("0")


@dataclass(frozen=True)
class OrderItemView:
    """Order item enriched with product and service data."""
    id: UUID
    order_id: UUID
    service_id: UUID
    service_name: Optional[str]
    product_id: UUID
    product_name: Optional[str]
    quantity: int
    unit_cost: Decimal = ZERO
    unit_price: Decimal = ZERO

    @property
    def total_cost(self) -> Decimal:
        return self.unit_cost * self.quantity

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def profit(self) -> Decimal:
        return self.total_price - self.total_cost


@dataclass(frozen=True)
class OrderSummary:
    """Order header with aggregated totals, without per-item breakdown."""
    id: UUID
    reseller_id: UUID
    customer_id: UUID
    status_id: UUID
    status_name: Optional[str]
    created_date: datetime
    item_count: int
    total_cost: Decimal
    total_price: Decimal


@dataclass(frozen=True)
class OrderDetail:
    """Order header plus every item view."""
    id: UUID
    reseller_id: UUID
    customer_id: UUID
    status_id: UUID
    status_name: Optional[str]
    created_date: datetime
    items: Tuple[OrderItemView, ...] = field(default_factory=tuple)

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_cost(self) -> Decimal:
        return sum((item.total_cost for item in self.items), ZERO)

    @property
    def total_price(self) -> Decimal:
        return sum((item.total_price for item in self.items), ZERO)

    def summary(self) -> OrderSummary:
        """Drop the item breakdown, keeping the computed totals."""
        return OrderSummary(
            id=self.id,
            reseller_id=self.reseller_id,
            customer_id=self.customer_id,
            status_id=self.status_id,
            status_name=self.status_name,
            created_date=self.created_date,
            item_count=self.item_count,
            total_cost=self.total_cost,
            total_price=self.total_price,
        )
