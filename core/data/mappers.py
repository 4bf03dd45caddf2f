"""Static mappers for domain entities ↔ database models."""

from datetime import timezone
from decimal import Decimal

from sqlalchemy import inspect

from core.domain.entities import Category, Order, OrderItem, Product, User
from core.domain.value_objects import Money, ShippingAddress

from .models import CategoryModel, OrderItemModel, OrderModel, ProductModel, UserModel


def _is_loaded(model, attribute: str) -> bool:
    """True when a relationship was eagerly loaded (never triggers a lazy load)."""
    return attribute not in inspect(model).unloaded


class CatalogMapper:
    """Static mapper for catalog and user rows."""

    @staticmethod
    def category_to_domain(model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name)

    @staticmethod
    def product_to_domain(model: ProductModel) -> Product:
        category = None
        if _is_loaded(model, "category") and model.category is not None:
            category = CatalogMapper.category_to_domain(model.category)

        return Product(
            id=model.id,
            name=model.name,
            description=model.description or "",
            price=Money(amount=Decimal(str(model.price)), currency=model.currency),
            category=category,
            count_in_stock=model.count_in_stock or 0,
        )

    @staticmethod
    def product_to_persistence(entity: Product) -> ProductModel:
        return ProductModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            price=entity.price.amount,
            currency=entity.price.currency,
            category_id=entity.category.id if entity.category else None,
            count_in_stock=entity.count_in_stock,
        )

    @staticmethod
    def user_to_domain(model: UserModel) -> User:
        return User(id=model.id, name=model.name, email=model.email)


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        The product is attached only when it was loaded with the item.
        """
        product = None
        if _is_loaded(model, "product") and model.product is not None:
            product = CatalogMapper.product_to_domain(model.product)

        return OrderItem(
            id=model.id,
            product_id=model.product_id,
            quantity=model.quantity,
            product=product,
        )

    @staticmethod
    def to_persistence(entity: OrderItem) -> OrderItemModel:
        return OrderItemModel(
            id=entity.id,
            product_id=entity.product_id,
            quantity=entity.quantity,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel loaded with its items

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        user_name = None
        if _is_loaded(model, "user") and model.user is not None:
            user_name = model.user.name

        date_ordered = model.date_ordered
        # SQLite drops tzinfo; stored values are always UTC
        if date_ordered is not None and date_ordered.tzinfo is None:
            date_ordered = date_ordered.replace(tzinfo=timezone.utc)

        return Order(
            id=model.id,
            user_id=model.user_id,
            user_name=user_name,
            shipping=ShippingAddress(
                address1=model.shipping_address1,
                address2=model.shipping_address2,
                city=model.city,
                zip=model.zip,
                country=model.country,
            ),
            phone=model.phone,
            status=model.status,
            total_price=Money(
                amount=Decimal(str(model.total_price)),
                currency=model.currency,
            ),
            items=items,
            date_ordered=date_ordered,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (items are linked separately).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        return OrderModel(
            id=entity.id,
            shipping_address1=entity.shipping.address1,
            shipping_address2=entity.shipping.address2,
            city=entity.shipping.city,
            zip=entity.shipping.zip,
            country=entity.shipping.country,
            phone=entity.phone,
            status=entity.status,
            total_price=entity.total_price.amount,
            currency=entity.total_price.currency,
            user_id=entity.user_id,
            date_ordered=entity.date_ordered,
        )
