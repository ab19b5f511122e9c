"""Integration tests for the monthly profit endpoint."""

import uuid
from decimal import Decimal

from fastapi.testclient import TestClient

from ordering.domain.entities.order import utc_now
from ordering.infrastructure.database.seed import (
    PRODUCT_MAILBOX_ID,
    SERVICE_EMAIL_ID,
    STATUS_COMPLETED_ID,
    STATUS_CREATED_ID,
)


def _place_order(client: TestClient, status_id, quantity: int) -> dict:
    payload = {
        "resellerId": str(uuid.uuid4()),
        "customerId": str(uuid.uuid4()),
        "statusId": str(status_id),
        "items": [
            {"serviceId": str(SERVICE_EMAIL_ID), "productId": str(PRODUCT_MAILBOX_ID), "quantity": quantity}
        ],
    }
    response = client.post("/api/v1/orders", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_profit_of_current_month(test_client: TestClient):
    now = utc_now()
    _place_order(test_client, STATUS_COMPLETED_ID, 2)
    _place_order(test_client, STATUS_CREATED_ID, 5)

    response = test_client.get(f"/api/v1/profit/monthly/{now.year}/{now.month}")

    assert response.status_code == 200
    assert Decimal(response.json()) == Decimal("0.2")


def test_profit_with_status_query(test_client: TestClient):
    now = utc_now()
    _place_order(test_client, STATUS_CREATED_ID, 5)

    response = test_client.get(
        f"/api/v1/profit/monthly/{now.year}/{now.month}", params={"status": "Created"}
    )

    assert response.status_code == 200
    assert Decimal(response.json()) == Decimal("0.5")


def test_profit_of_empty_month_is_zero(test_client: TestClient):
    response = test_client.get("/api/v1/profit/monthly/1999/6")

    assert response.status_code == 200
    assert Decimal(response.json()) == Decimal("0")


def test_profit_rejects_invalid_month(test_client: TestClient):
    assert test_client.get("/api/v1/profit/monthly/2025/13").status_code == 422
    assert test_client.get("/api/v1/profit/monthly/2025/0").status_code == 422
