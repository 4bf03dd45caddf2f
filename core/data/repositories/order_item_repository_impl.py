"""SQLAlchemy implementation of OrderItemRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import OrderItem
from core.domain.exceptions import NotFoundError, ValidationError
from core.domain.repositories.order_item_repository import OrderItemRepository
from core.domain.value_objects import Money

from ..mappers import OrderItemMapper
from ..models import OrderItemModel, ProductModel
from .base import execute, flush, get


class SqlAlchemyOrderItemRepository(OrderItemRepository):
    """Order item store backed by the order_items table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product_id: str, quantity: int) -> OrderItem:
        """Persist a standalone item (not yet attached to an order).

        Args:
            product_id: Referenced product
            quantity: Positive whole quantity

        Returns:
            The stored OrderItem with its generated id

        Raises:
            ValidationError: unknown product or bad quantity
        """
        item = OrderItem(product_id=product_id, quantity=quantity)

        product = await get(self._session, ProductModel, product_id)
        if product is None:
            raise ValidationError(f"Invalid product: {product_id}")

        self._session.add(OrderItemMapper.to_persistence(item))
        await flush(self._session)
        return item

    async def resolve_price(self, item_id: str) -> Money:
        """Dereference item -> product and return the product's unit price."""
        result = await execute(
            self._session,
            select(OrderItemModel)
            .options(selectinload(OrderItemModel.product))
            .where(OrderItemModel.id == item_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            raise NotFoundError("OrderItem", item_id)
        if model.product is None:
            raise NotFoundError("Product", model.product_id)

        return Money(
            amount=Decimal(str(model.product.price)),
            currency=model.product.currency,
        )

    async def find_by_id(self, item_id: str) -> Optional[OrderItem]:
        result = await execute(
            self._session,
            select(OrderItemModel)
            .options(selectinload(OrderItemModel.product).selectinload(ProductModel.category))
            .where(OrderItemModel.id == item_id)
        )
        model = result.scalar_one_or_none()
        return OrderItemMapper.to_domain(model) if model else None

    async def delete_by_id(self, item_id: str) -> bool:
        result = await execute(
            self._session,
            delete(OrderItemModel).where(OrderItemModel.id == item_id)
        )
        return result.rowcount > 0
