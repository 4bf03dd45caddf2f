"""Domain value objects."""

from .value_objects import Money, ShippingAddress, new_id
from .order_status import ALLOWED_TRANSITIONS, OrderStatus, can_transition

__all__ = [
    "ALLOWED_TRANSITIONS",
    "Money",
    "OrderStatus",
    "ShippingAddress",
    "can_transition",
    "new_id",
]
