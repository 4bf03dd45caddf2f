"""Repository interface for stored order items."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import OrderItem
from ..value_objects import Money


class OrderItemRepository(ABC):
    """
    Order item store.

    Items are written before the order that owns them, so every item
    is addressable on its own.
    """

    @abstractmethod
    async def create(self, product_id: str, quantity: int) -> OrderItem:
        """Persist a new item.

        Raises:
            ValidationError: unknown product or non-positive quantity
        """
        pass

    @abstractmethod
    async def resolve_price(self, item_id: str) -> Money:
        """Current unit price of the item's product.

        Raises:
            NotFoundError: item or its product no longer exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, item_id: str) -> Optional[OrderItem]:
        pass

    @abstractmethod
    async def delete_by_id(self, item_id: str) -> bool:
        """Returns whether a record was removed."""
        pass
