"""Application service for Order operations."""

from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import (
    CategoryDTO,
    CreateOrderRequest,
    OrderDTO,
    OrderItemDTO,
    ProductDTO,
    UserRefDTO,
)
from core.data.uow import create_uow
from core.domain.entities import Order, OrderItem
from core.domain.exceptions import NotFoundError, ValidationError
from core.domain.value_objects import Money, OrderStatus, ShippingAddress
from core.infrastructure.logging import get_logger
from core.settings import OrderSettings

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Place orders: create items, price them, persist the parent order
    - Query and maintain placed orders (status, delete, count, revenue)
    - Handle transactions via UoW
    - Transform between DTOs and domain entities

    Every public method runs in its own UnitOfWork, so a failure part-way
    through leaves nothing behind.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        settings: Optional[OrderSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
            settings: Order settings (currency, default/strict status)
            clock: Source of dateOrdered timestamps
        """
        self._session_factory = session_factory
        self._settings = settings or OrderSettings()
        self._clock = clock or _utcnow

    # =========================================================================
    # PLACEMENT
    # =========================================================================

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Place an order from cart lines.

        1. Validate the user and every product before writing anything
        2. Create one stored item per line, in input order
        3. Resolve each item's unit price and sum the extended prices
        4. Persist the order referencing the items
        5. Atomic commit

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDTO with the computed total

        Raises:
            ValidationError: unknown user/product, bad shipping fields, phone or status
        """
        status = self._initial_status(request.status)
        try:
            shipping = ShippingAddress(
                address1=request.shipping_address1,
                address2=request.shipping_address2,
                city=request.city,
                zip=request.zip,
                country=request.country,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if not request.phone.strip():
            raise ValidationError("Phone is required")

        uow = create_uow(self._session_factory)
        async with uow:
            # 1. References must resolve before any write
            if await uow.users.find_by_id(request.user) is None:
                raise ValidationError(f"Invalid user: {request.user}")

            product_ids = [line.product for line in request.order_items]
            known = await uow.products.find_many(product_ids)
            missing = [pid for pid in dict.fromkeys(product_ids) if pid not in known]
            if missing:
                raise ValidationError(f"Invalid product: {', '.join(missing)}")

            # 2. One item per line; sequential, so input order is kept
            items: List[OrderItem] = []
            for line in request.order_items:
                items.append(await uow.order_items.create(line.product, line.quantity))

            # 3. All items are flushed; price them
            priced_items = [
                (item, await uow.order_items.resolve_price(item.id)) for item in items
            ]

            # 4. Parent order with the snapshot total
            order = Order.place(
                user_id=request.user,
                priced_items=priced_items,
                shipping=shipping,
                phone=request.phone,
                status=status,
                currency=self._settings.currency,
                date_ordered=self._clock(),
            )
            await uow.orders.add(order)

            # 5. Atomic commit
            await uow.commit()
            logger.info(
                f"Order {order.id} placed for user {order.user_id}: "
                f"{len(items)} item(s), total {order.total_price}"
            )

            stored = await uow.orders.find_by_id(order.id)
            return self._order_to_dto(stored)

    # =========================================================================
    # DIRECTORY
    # =========================================================================

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get order by ID.

        Raises:
            NotFoundError: no such order
        """
        uow = create_uow(self._session_factory)
        async with uow:
            order = await uow.orders.find_by_id(order_id)
            if not order:
                raise NotFoundError("Order", order_id)
            return self._order_to_dto(order)

    async def list_orders(self) -> List[OrderDTO]:
        """All orders, newest first."""
        uow = create_uow(self._session_factory)
        async with uow:
            orders = await uow.orders.find_all()
            return [self._order_to_dto(order) for order in orders]

    async def list_orders_for_user(self, user_id: str) -> List[OrderDTO]:
        """One user's orders, newest first."""
        uow = create_uow(self._session_factory)
        async with uow:
            orders = await uow.orders.find_by_user(user_id)
            return [self._order_to_dto(order) for order in orders]

    async def update_status(self, order_id: str, status: str) -> OrderDTO:
        """Replace the status label of an order.

        Raises:
            NotFoundError: no such order
            ValidationError: empty status, or a rejected move in strict mode
        """
        uow = create_uow(self._session_factory)
        async with uow:
            order = await uow.orders.find_by_id(order_id)
            if not order:
                raise NotFoundError("Order", order_id)

            previous = order.change_status(status, strict=self._settings.strict_status)
            await uow.orders.update_status(order_id, order.status)
            await uow.commit()

            logger.info(f"Order {order_id} status: {previous} → {order.status}")
            return self._order_to_dto(order)

    async def delete_order(self, order_id: str) -> bool:
        """Delete an order together with its items, in one transaction.

        Raises:
            NotFoundError: no such order
            StoreError: any deletion failed (nothing is removed)
        """
        uow = create_uow(self._session_factory)
        async with uow:
            order = await uow.orders.find_by_id(order_id)
            if not order:
                raise NotFoundError("Order", order_id)

            # Items first: they hold the foreign key to the order
            removed = 0
            for item_id in order.item_ids:
                if await uow.order_items.delete_by_id(item_id):
                    removed += 1
            deleted = await uow.orders.delete(order_id)
            await uow.commit()

            if removed != len(order.item_ids):
                logger.warning(
                    f"Order {order_id}: {len(order.item_ids) - removed} item(s) were already gone"
                )
            logger.info(f"Order {order_id} deleted with {removed} item(s)")
            return deleted

    async def count_orders(self) -> int:
        uow = create_uow(self._session_factory)
        async with uow:
            return await uow.orders.count()

    async def total_revenue(self) -> Money:
        """Sum of every order's total; zero when there are no orders."""
        uow = create_uow(self._session_factory)
        async with uow:
            return await uow.orders.total_revenue(self._settings.currency)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _initial_status(self, requested: Optional[str]) -> str:
        status = requested if requested and requested.strip() else self._settings.default_status
        if self._settings.strict_status:
            try:
                return OrderStatus.parse(status).value
            except ValueError as e:
                raise ValidationError(str(e)) from e
        return status

    def _order_to_dto(self, order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        items = []
        for item in order.items:
            product = None
            if item.product is not None:
                category = item.product.category
                product = ProductDTO(
                    id=item.product.id,
                    name=item.product.name,
                    description=item.product.description,
                    price=item.product.price.amount,
                    category=CategoryDTO(id=category.id, name=category.name) if category else None,
                )
            items.append(OrderItemDTO(id=item.id, quantity=item.quantity, product=product))

        return OrderDTO(
            id=order.id,
            order_items=items,
            shipping_address1=order.shipping.address1,
            shipping_address2=order.shipping.address2,
            city=order.shipping.city,
            zip=order.shipping.zip,
            country=order.shipping.country,
            phone=order.phone,
            status=order.status,
            total_price=order.total_price.amount,
            currency=order.total_price.currency,
            user=UserRefDTO(id=order.user_id, name=order.user_name),
            date_ordered=order.date_ordered,
        )
