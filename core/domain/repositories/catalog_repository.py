"""Read-side interfaces for the product catalog and the user directory."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from ..entities.catalog import Category, Product, User
from ..value_objects import Money


class ProductCatalog(ABC):
    """Product lookup used for pricing order items."""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        pass

    @abstractmethod
    async def find_many(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        """Bulk lookup; ids that do not resolve are absent from the result."""
        pass

    @abstractmethod
    async def add_category(self, category: Category) -> None:
        pass

    @abstractmethod
    async def add(self, product: Product) -> None:
        pass

    @abstractmethod
    async def update_price(self, product_id: str, price: Money) -> None:
        pass


class UserDirectory(ABC):
    """User lookup used for ownership checks and display names."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def add(self, user: User) -> None:
        pass
