"""SQLAlchemy ORM models for catalog reference data.

These tables are populated by the catalog owner; the order core only reads them.
"""

import uuid

from sqlalchemy import Column, Numeric, String

from .base import Base, BinaryGUID


class StatusModel(Base):
    """SQLAlchemy ORM model for order_statuses table."""

    __tablename__ = "order_statuses"

    id = Column(BinaryGUID(), primary_key=True, default=uuid.uuid4)
    name = Column(String(20), nullable=False, unique=True)

    def __repr__(self):
        return f"<StatusModel(id={self.id}, name={self.name})>"


class ServiceModel(Base):
    """SQLAlchemy ORM model for order_services table."""

    __tablename__ = "order_services"

    id = Column(BinaryGUID(), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<ServiceModel(id={self.id}, name={self.name})>"


class ProductModel(Base):
    """SQLAlchemy ORM model for order_products table."""

    __tablename__ = "order_products"

    id = Column(BinaryGUID(), primary_key=True, default=uuid.uuid4)
    service_id = Column(BinaryGUID(), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    unit_cost = Column(Numeric(15, 2), nullable=False)
    unit_price = Column(Numeric(15, 2), nullable=False)

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, cost={self.unit_cost}, price={self.unit_price})>"
