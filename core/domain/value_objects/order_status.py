"""Order status labels and the optional transition table."""
from enum import Enum
from typing import Dict, FrozenSet


class OrderStatus(str, Enum):
    """
    Known order status labels.

    Orders store status as free text. These members are only enforced when
    strict status transitions are switched on.
    """
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str) -> "OrderStatus":
        """Case-insensitive lookup by label."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown order status: {value!r}")


ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    # Re-applying the current status is a no-op, not a transition
    return current == new or new in ALLOWED_TRANSITIONS[current]
