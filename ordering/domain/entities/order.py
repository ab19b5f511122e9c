"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Sequence
from uuid import UUID, uuid4

# order_items.quantity is a 32-bit INTEGER column
MAX_QUANTITY = 2_147_483_647


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class NewOrderItem:
    """Requested line item, before it is assigned an identity."""
    service_id: UUID
    product_id: UUID
    quantity: int

    def __post_init__(self):
        # bool is an int subclass; reject it explicitly
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Quantity must be an integer, got: {self.quantity!r}")
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got: {self.quantity}")
        if self.quantity > MAX_QUANTITY:
            raise ValueError(f"Quantity must not exceed {MAX_QUANTITY}, got: {self.quantity}")


@dataclass(frozen=True)
class OrderItem:
    """Individual line item within an order."""
    id: UUID
    order_id: UUID
    service_id: UUID
    product_id: UUID
    quantity: int
    line_number: int = 0


@dataclass
class Order:
    """
    Order aggregate root.

    Only `status_id` changes after creation; items are owned by the order
    and are written together with it.
    """
    id: UUID
    reseller_id: UUID
    customer_id: UUID
    status_id: UUID
    created_date: datetime
    items: List[OrderItem] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        reseller_id: UUID,
        customer_id: UUID,
        status_id: UUID,
        items: Sequence[NewOrderItem],
    ) -> "Order":
        """
        Build a new order with fresh identifiers and a UTC creation stamp.

        Args:
            reseller_id: Reseller placing the order
            customer_id: Customer the order is for
            status_id: Initial status
            items: Requested line items, in order

        Returns:
            New Order aggregate (not yet persisted)
        """
        order_id = uuid4()
        return cls(
            id=order_id,
            reseller_id=reseller_id,
            customer_id=customer_id,
            status_id=status_id,
            created_date=utc_now(),
            items=[
                OrderItem(
                    id=uuid4(),
                    order_id=order_id,
                    service_id=item.service_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    line_number=position,
                )
                for position, item in enumerate(items)
            ],
        )
