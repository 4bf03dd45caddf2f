"""Repository interfaces."""

from .catalog_repository import ProductCatalog, UserDirectory
from .order_item_repository import OrderItemRepository
from .order_repository import OrderRepository

__all__ = ["OrderItemRepository", "OrderRepository", "ProductCatalog", "UserDirectory"]
