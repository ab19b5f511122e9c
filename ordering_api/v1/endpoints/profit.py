"""Profit report endpoints."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from ordering.application.services.order_service import OrderApplicationService
from ordering.settings import AppSettings

from ordering_api.deps import get_order_service, get_settings

router = APIRouter(prefix="/profit", tags=["profit"])


@router.get("/monthly/{year}/{month}", response_model=Decimal)
async def get_monthly_profit(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    month: int = Path(..., ge=1, le=12, description="Calendar month"),
    order_status: Optional[str] = Query(
        default=None,
        alias="status",
        description="Status name of the orders to include (default: Completed)",
    ),
    service: OrderApplicationService = Depends(get_order_service),
    settings: AppSettings = Depends(get_settings),
) -> Decimal:
    """Profit, (unit price - unit cost) x quantity, of a month's orders.

    Returns:
        Single decimal amount, serialized as a JSON string to keep it exact
    """
    status_name = order_status or settings.default_profit_status
    return await service.get_monthly_profit(year, month, status_name)
