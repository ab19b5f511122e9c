"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ordering.domain.entities.order import MAX_QUANTITY, NewOrderItem
from ordering.domain.entities.views import OrderDetail, OrderItemView, OrderSummary

# camelCase on the wire, snake_case in Python
_DTO_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class OrderItemToCreate(BaseModel):
    """Requested line item."""

    service_id: UUID = Field(..., description="Service the product belongs to")
    product_id: UUID = Field(..., description="Product ordered")
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY, description="Quantity ordered")

    model_config = _DTO_CONFIG

    def to_domain(self) -> NewOrderItem:
        return NewOrderItem(
            service_id=self.service_id,
            product_id=self.product_id,
            quantity=self.quantity,
        )


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    reseller_id: UUID = Field(..., description="Reseller placing the order")
    customer_id: UUID = Field(..., description="Customer the order is for")
    status_id: UUID = Field(..., description="Initial status")
    items: List[OrderItemToCreate] = Field(default_factory=list, description="Order items")

    model_config = _DTO_CONFIG


class OrderItemDTO(BaseModel):
    """DTO for an order item with current catalog pricing."""

    id: UUID
    order_id: UUID
    service_id: UUID
    service_name: Optional[str] = None
    product_id: UUID
    product_name: Optional[str] = None
    quantity: int
    unit_cost: Decimal
    unit_price: Decimal
    total_cost: Decimal
    total_price: Decimal

    model_config = _DTO_CONFIG

    @classmethod
    def from_view(cls, view: OrderItemView) -> "OrderItemDTO":
        return cls(
            id=view.id,
            order_id=view.order_id,
            service_id=view.service_id,
            service_name=view.service_name,
            product_id=view.product_id,
            product_name=view.product_name,
            quantity=view.quantity,
            unit_cost=view.unit_cost,
            unit_price=view.unit_price,
            total_cost=view.total_cost,
            total_price=view.total_price,
        )


class OrderSummaryDTO(BaseModel):
    """Response DTO for order listings."""

    id: UUID
    reseller_id: UUID
    customer_id: UUID
    status_id: UUID
    status_name: Optional[str] = None
    item_count: int = Field(..., ge=0)
    total_cost: Decimal
    total_price: Decimal
    created_date: datetime

    model_config = _DTO_CONFIG

    @classmethod
    def from_view(cls, view: OrderSummary) -> "OrderSummaryDTO":
        return cls(
            id=view.id,
            reseller_id=view.reseller_id,
            customer_id=view.customer_id,
            status_id=view.status_id,
            status_name=view.status_name,
            item_count=view.item_count,
            total_cost=view.total_cost,
            total_price=view.total_price,
            created_date=view.created_date,
        )


class OrderDetailDTO(BaseModel):
    """Response DTO for order details."""

    id: UUID
    reseller_id: UUID
    customer_id: UUID
    status_id: UUID
    status_name: Optional[str] = None
    created_date: datetime
    item_count: int = Field(..., ge=0)
    total_cost: Decimal
    total_price: Decimal
    items: List[OrderItemDTO] = Field(default_factory=list)

    model_config = _DTO_CONFIG

    @classmethod
    def from_view(cls, view: OrderDetail) -> "OrderDetailDTO":
        return cls(
            id=view.id,
            reseller_id=view.reseller_id,
            customer_id=view.customer_id,
            status_id=view.status_id,
            status_name=view.status_name,
            created_date=view.created_date,
            item_count=view.item_count,
            total_cost=view.total_cost,
            total_price=view.total_price,
            items=[OrderItemDTO.from_view(item) for item in view.items],
        )

