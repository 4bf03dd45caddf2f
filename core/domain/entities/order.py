"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from ..exceptions import ValidationError
from ..value_objects import Money, OrderStatus, ShippingAddress, can_transition, new_id
from .catalog import Product


@dataclass
class OrderItem:
    """
    A single product + quantity line.

    Stored as its own record; the owning order only references it by id.
    `product` is filled in when the item is loaded for display.
    """
    product_id: str
    quantity: int
    id: str = field(default_factory=new_id)
    product: Optional[Product] = None

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity <= 0:
            raise ValidationError(
                f"Quantity must be a positive integer, got: {self.quantity!r}"
            )
        if not self.product_id:
            raise ValidationError("Order item requires a product")

    def extended_price(self, unit_price: Money) -> Money:
        """Unit price times quantity."""
        return unit_price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    `total_price` is a snapshot: it is computed from catalog prices once,
    when the order is placed, and never recomputed afterwards.
    """
    user_id: str
    shipping: ShippingAddress
    phone: str
    total_price: Money
    items: List[OrderItem] = field(default_factory=list)
    status: str = OrderStatus.PENDING.value
    date_ordered: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=new_id)

    # Display-only, resolved from the user directory
    user_name: Optional[str] = None

    def __post_init__(self):
        if not self.items:
            raise ValidationError("Order must contain at least one item")
        if not self.user_id:
            raise ValidationError("Order requires a user")
        if not self.phone or not self.phone.strip():
            raise ValidationError("Phone is required")
        if not self.status or not self.status.strip():
            raise ValidationError("Status cannot be empty")
        # Stored without an offset, so aware timestamps are kept in UTC
        if self.date_ordered.tzinfo is not None:
            self.date_ordered = self.date_ordered.astimezone(timezone.utc)

    @property
    def item_ids(self) -> List[str]:
        return [item.id for item in self.items]

    @staticmethod
    def calculate_total(
        priced_items: Iterable[Tuple[OrderItem, Money]],
        currency: str = "USD",
    ) -> Money:
        """Sum of unit price x quantity over every item."""
        total = Money.zero(currency)
        for item, unit_price in priced_items:
            if unit_price.currency != currency:
                raise ValidationError(
                    f"Product {item.product_id} is priced in {unit_price.currency}, "
                    f"orders are placed in {currency}"
                )
            total = total + item.extended_price(unit_price)
        return total

    @classmethod
    def place(
        cls,
        *,
        user_id: str,
        priced_items: List[Tuple[OrderItem, Money]],
        shipping: ShippingAddress,
        phone: str,
        status: str,
        currency: str,
        date_ordered: Optional[datetime] = None,
    ) -> "Order":
        """
        Factory for a new order.

        Items keep the order they were given in; the total is priced from
        the supplied unit prices at this moment.
        """
        return cls(
            user_id=user_id,
            shipping=shipping,
            phone=phone,
            status=status,
            items=[item for item, _ in priced_items],
            total_price=cls.calculate_total(priced_items, currency),
            date_ordered=date_ordered or datetime.now(timezone.utc),
        )

    def change_status(self, new_status: str, strict: bool = False) -> str:
        """
        Replace the status label.

        Permissive by default: any non-empty string is accepted. With
        `strict`, both labels must be known statuses and the move must be
        allowed by the transition table.

        Returns:
            The previous status
        """
        if not new_status or not new_status.strip():
            raise ValidationError("Status cannot be empty")

        previous = self.status
        if strict:
            try:
                current = OrderStatus.parse(previous)
                target = OrderStatus.parse(new_status)
            except ValueError as e:
                raise ValidationError(str(e)) from e
            if not can_transition(current, target):
                raise ValidationError(
                    f"Cannot move order from {current.value} to {target.value}"
                )
            new_status = target.value

        self.status = new_status
        return previous
