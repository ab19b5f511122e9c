"""
Catalog reference records.

Statuses, products and services are owned by an external catalog process.
The order core only reads them.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class Status:
    """Order status label (e.g. "Created", "Completed")."""
    id: UUID
    name: str


@dataclass(frozen=True)
class Service:
    id: UUID
    name: str


@dataclass(frozen=True)
class Product:
    """Sellable product with current cost and price."""
    id: UUID
    name: str
    unit_cost: Decimal
    unit_price: Decimal
    service_id: UUID

    def __post_init__(self):
        # Normalize to Decimal, never float
        if not isinstance(self.unit_cost, Decimal):
            object.__setattr__(self, "unit_cost", Decimal(str(self.unit_cost)))
        if not isinstance(self.unit_price, Decimal):
            object.__setattr__(self, "unit_price", Decimal(str(self.unit_price)))

    @property
    def unit_margin(self) -> Decimal:
        return self.unit_price - self.unit_cost
