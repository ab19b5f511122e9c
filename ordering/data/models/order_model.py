"""SQLAlchemy ORM models for the Order aggregate."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from ordering.domain.entities.order import utc_now

from .base import Base, BinaryGUID


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(BinaryGUID(), primary_key=True, default=uuid.uuid4)
    reseller_id = Column(BinaryGUID(), nullable=False)
    customer_id = Column(BinaryGUID(), nullable=False)

    # Validated against order_statuses at write time, no DB constraint
    status_id = Column(BinaryGUID(), nullable=False, index=True)

    created_date = Column(DateTime, nullable=False, default=utc_now)

    # Items are loaded explicitly by the repository, never lazily
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )

    __table_args__ = (
        Index("ix_orders_created_date", "created_date"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, status_id={self.status_id}, created={self.created_date})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(BinaryGUID(), primary_key=True, default=uuid.uuid4)
    order_id = Column(
        BinaryGUID(),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    service_id = Column(BinaryGUID(), nullable=False)
    product_id = Column(BinaryGUID(), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)

    # Position within the order
    line_number = Column(Integer, nullable=False, default=0)

    order = relationship("OrderModel", back_populates="items", lazy="raise")

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"
