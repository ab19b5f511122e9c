"""Tests for computed order views."""

import uuid
from datetime import datetime
from decimal import Decimal

from ordering.domain.entities.catalog import Product
from ordering.domain.entities.views import OrderDetail, OrderItemView


def _item(quantity, unit_cost="0.8", unit_price="0.9", product_name="100GB Mailbox"):
    return OrderItemView(
        id=uuid.uuid4(),
        order_id=uuid.uuid4(),
        service_id=uuid.uuid4(),
        service_name="Email",
        product_id=uuid.uuid4(),
        product_name=product_name,
        quantity=quantity,
        unit_cost=Decimal(unit_cost),
        unit_price=Decimal(unit_price),
    )


def _detail(*items):
    return OrderDetail(
        id=uuid.uuid4(),
        reseller_id=uuid.uuid4(),
        customer_id=uuid.uuid4(),
        status_id=uuid.uuid4(),
        status_name="Created",
        created_date=datetime(2025, 1, 15, 10, 0),
        items=tuple(items),
    )


def test_item_totals_are_exact_decimals():
    item = _item(3)

    assert item.total_cost == Decimal("2.4")
    assert item.total_price == Decimal("2.7")
    assert item.profit == Decimal("0.3")


def test_unresolved_product_prices_are_zero():
    item = OrderItemView(
        id=uuid.uuid4(),
        order_id=uuid.uuid4(),
        service_id=uuid.uuid4(),
        service_name=None,
        product_id=uuid.uuid4(),
        product_name=None,
        quantity=5,
    )

    assert item.total_cost == Decimal("0")
    assert item.total_price == Decimal("0")


def test_detail_sums_items():
    detail = _detail(_item(3), _item(2, unit_cost="4.00", unit_price="5.50"))

    assert detail.item_count == 2
    assert detail.total_cost == Decimal("10.4")
    assert detail.total_price == Decimal("13.7")


def test_empty_detail_totals_are_zero():
    detail = _detail()

    assert detail.item_count == 0
    assert detail.total_cost == Decimal("0")
    assert detail.total_price == Decimal("0")


def test_summary_keeps_header_and_totals():
    detail = _detail(_item(3))

    summary = detail.summary()

    assert summary.id == detail.id
    assert summary.status_name == "Created"
    assert summary.created_date == detail.created_date
    assert summary.item_count == 1
    assert summary.total_cost == Decimal("2.4")
    assert summary.total_price == Decimal("2.7")


def test_product_margin_normalizes_to_decimal():
    product = Product(
        id=uuid.uuid4(),
        name="100GB Mailbox",
        unit_cost=0.8,
        unit_price=0.9,
        service_id=uuid.uuid4(),
    )

    assert isinstance(product.unit_cost, Decimal)
    assert product.unit_margin == Decimal("0.1")
