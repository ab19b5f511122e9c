"""
Development reference data.

Statuses, two services and their products with fixed identifiers, so local
environments and tests can place orders without a catalog service.
"""
import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ordering.data.models import ProductModel, ServiceModel, StatusModel

logger = logging.getLogger(__name__)

STATUS_CREATED_ID = UUID("6a6e1f3e-8b3f-4a58-9d7e-1c0f0b6f0001")
STATUS_IN_PROGRESS_ID = UUID("6a6e1f3e-8b3f-4a58-9d7e-1c0f0b6f0002")
STATUS_FAILED_ID = UUID("6a6e1f3e-8b3f-4a58-9d7e-1c0f0b6f0003")
STATUS_COMPLETED_ID = UUID("6a6e1f3e-8b3f-4a58-9d7e-1c0f0b6f0004")

SERVICE_EMAIL_ID = UUID("0d7f5c2a-3e41-4c8b-a1f2-5b9e6d7c0001")
SERVICE_HOSTING_ID = UUID("0d7f5c2a-3e41-4c8b-a1f2-5b9e6d7c0002")
PRODUCT_MAILBOX_ID = UUID("9c1b2e4d-7f60-4a3b-8e5d-2f1a0c9b0001")
PRODUCT_VPS_ID = UUID("9c1b2e4d-7f60-4a3b-8e5d-2f1a0c9b0002")

STATUSES = {
    STATUS_CREATED_ID: "Created",
    STATUS_IN_PROGRESS_ID: "In Progress",
    STATUS_FAILED_ID: "Failed",
    STATUS_COMPLETED_ID: "Completed",
}


async def seed_reference_data(session: AsyncSession) -> None:
    """
    Insert the development statuses, services and products.

    Rows that already exist are left untouched. Commits the session.

    Args:
        session: SQLAlchemy async session
    """
    for status_id, name in STATUSES.items():
        if await session.get(StatusModel, status_id) is None:
            session.add(StatusModel(id=status_id, name=name))

    if await session.get(ServiceModel, SERVICE_EMAIL_ID) is None:
        session.add(ServiceModel(id=SERVICE_EMAIL_ID, name="Email"))
    if await session.get(ServiceModel, SERVICE_HOSTING_ID) is None:
        session.add(ServiceModel(id=SERVICE_HOSTING_ID, name="Hosting"))

    if await session.get(ProductModel, PRODUCT_MAILBOX_ID) is None:
        session.add(
            ProductModel(
                id=PRODUCT_MAILBOX_ID,
                service_id=SERVICE_EMAIL_ID,
                name="100GB Mailbox",
                unit_cost=Decimal("0.8"),
                unit_price=Decimal("0.9"),
            )
        )

    if await session.get(ProductModel, PRODUCT_VPS_ID) is None:
        session.add(
            ProductModel(
                id=PRODUCT_VPS_ID,
                service_id=SERVICE_HOSTING_ID,
                name="Small VPS",
                unit_cost=Decimal("4.00"),
                unit_price=Decimal("5.50"),
            )
        )

    await session.commit()
    logger.info("✅ Reference data seeded")
