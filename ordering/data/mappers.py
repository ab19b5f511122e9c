"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import Dict, Iterable

from ordering.domain.entities.catalog import Product, Service, Status
from ordering.domain.entities.order import Order, OrderItem
from ordering.domain.entities.views import OrderDetail, OrderItemView

from .models.catalog_model import ProductModel, ServiceModel, StatusModel
from .models.order_model import OrderItemModel, OrderModel


class CatalogMapper:
    """Static mapper for catalog models → domain reference records."""

    @staticmethod
    def status_to_domain(model: StatusModel) -> Status:
        return Status(id=model.id, name=model.name)

    @staticmethod
    def service_to_domain(model: ServiceModel) -> Service:
        return Service(id=model.id, name=model.name)

    @staticmethod
    def product_to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            unit_cost=Decimal(str(model.unit_cost)),
            unit_price=Decimal(str(model.unit_price)),
            service_id=model.service_id,
        )


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_persistence(entity: OrderItem) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=entity.id,
            order_id=entity.order_id,
            service_id=entity.service_id,
            product_id=entity.product_id,
            quantity=entity.quantity,
            line_number=entity.line_number,
        )

    @staticmethod
    def to_view(
        model: OrderItemModel,
        products: Dict,
        services: Dict,
    ) -> OrderItemView:
        """Enrich an item row with current product and service data.

        Args:
            model: OrderItemModel instance
            products: Resolved products keyed by id
            services: Resolved services keyed by id

        Returns:
            OrderItemView (names None and prices zero for dangling references)
        """
        product = products.get(model.product_id)
        service = services.get(model.service_id)

        return OrderItemView(
            id=model.id,
            order_id=model.order_id,
            service_id=model.service_id,
            service_name=service.name if service else None,
            product_id=model.product_id,
            product_name=product.name if product else None,
            quantity=model.quantity,
            unit_cost=product.unit_cost if product else Decimal("0"),
            unit_price=product.unit_price if product else Decimal("0"),
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            reseller_id=entity.reseller_id,
            customer_id=entity.customer_id,
            status_id=entity.status_id,
            created_date=entity.created_date,
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item) for item in entity.items
        ]

        return order_model

    @staticmethod
    def to_detail(
        model: OrderModel,
        item_models: Iterable[OrderItemModel],
        statuses: Dict,
        products: Dict,
        services: Dict,
    ) -> OrderDetail:
        """Build the detail view of one order from explicitly loaded rows.

        Args:
            model: OrderModel instance
            item_models: The order's item rows, in line order
            statuses: Resolved statuses keyed by id
            products: Resolved products keyed by id
            services: Resolved services keyed by id

        Returns:
            OrderDetail view
        """
        status = statuses.get(model.status_id)

        return OrderDetail(
            id=model.id,
            reseller_id=model.reseller_id,
            customer_id=model.customer_id,
            status_id=model.status_id,
            status_name=status.name if status else None,
            created_date=model.created_date,
            items=tuple(
                OrderItemMapper.to_view(item, products, services)
                for item in item_models
            ),
        )
