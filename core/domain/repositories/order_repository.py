"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..value_objects import Money


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Persist a new order and link its (already stored) items.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def update_status(self, order_id: str, status: str) -> None:
        """Overwrite the stored status label.

        Args:
            order_id: Order identifier
            status: New status label
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by id with items, products and user name resolved.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """List all orders, newest first."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Order]:
        """List one user's orders, newest first."""
        pass

    @abstractmethod
    async def delete(self, order_id: str) -> bool:
        """Remove the order record (items are handled separately).

        Returns:
            True if a record was removed
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def total_revenue(self, currency: str) -> Money:
        """Sum of total_price across all orders (zero when there are none)."""
        pass
