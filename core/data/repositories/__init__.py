"""SQLAlchemy repository implementations."""

from .catalog_repository_impl import SqlAlchemyProductCatalog, SqlAlchemyUserDirectory
from .order_item_repository_impl import SqlAlchemyOrderItemRepository
from .order_repository_impl import SqlAlchemyOrderRepository

__all__ = [
    "SqlAlchemyOrderItemRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductCatalog",
    "SqlAlchemyUserDirectory",
]
