"""SQLAlchemy implementation of OrderRepository."""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import Order
from core.domain.exceptions import NotFoundError, StoreError
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import Money

from ..mappers import OrderMapper
from ..models import OrderItemModel, OrderModel, ProductModel
from .base import execute, flush, get

# Everything needed to render an order: items -> product -> category, and the user
_NESTED = (
    selectinload(OrderModel.items)
    .selectinload(OrderItemModel.product)
    .selectinload(ProductModel.category),
    selectinload(OrderModel.user),
)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> None:
        """Insert the order row, then point each stored item at it.

        Args:
            order: Order domain aggregate whose items already exist
        """
        self._session.add(OrderMapper.to_persistence(order))
        await flush(self._session)

        for position, item_id in enumerate(order.item_ids):
            item_model = await get(self._session, OrderItemModel, item_id)
            if item_model is None:
                raise StoreError(f"Order item {item_id} vanished before order {order.id} was saved")
            item_model.order_id = order.id
            item_model.position = position

        await flush(self._session)

    async def update_status(self, order_id: str, status: str) -> None:
        result = await execute(
            self._session,
            update(OrderModel).where(OrderModel.id == order_id).values(status=status)
        )
        if result.rowcount == 0:
            raise NotFoundError("Order", order_id)

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        result = await execute(
            self._session,
            select(OrderModel)
            .options(*_NESTED)
            .where(OrderModel.id == order_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def find_all(self) -> List[Order]:
        result = await execute(
            self._session,
            select(OrderModel)
            .options(*_NESTED)
            .order_by(OrderModel.date_ordered.desc())
            .execution_options(populate_existing=True)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def find_by_user(self, user_id: str) -> List[Order]:
        result = await execute(
            self._session,
            select(OrderModel)
            .options(*_NESTED)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.date_ordered.desc())
            .execution_options(populate_existing=True)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def delete(self, order_id: str) -> bool:
        result = await execute(
            self._session,
            delete(OrderModel).where(OrderModel.id == order_id)
        )
        return result.rowcount > 0

    async def count(self) -> int:
        result = await execute(self._session, select(func.count()).select_from(OrderModel))
        return result.scalar_one()

    async def total_revenue(self, currency: str) -> Money:
        """Sum of every stored total; an empty table sums to zero."""
        result = await execute(self._session, select(func.sum(OrderModel.total_price)))
        total = result.scalar_one_or_none()
        if total is None:
            return Money.zero(currency)
        return Money(amount=Decimal(str(total)), currency=currency)
