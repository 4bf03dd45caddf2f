"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.exceptions import StoreError

from .repositories import (
    SqlAlchemyOrderItemRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductCatalog,
    SqlAlchemyUserDirectory,
)

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            item = await uow.order_items.create(product_id, 2)
            await uow.orders.add(order)
            await uow.commit()

    Leaving the block without commit() discards everything written.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._order_item_repository: Optional[SqlAlchemyOrderItemRepository] = None
        self._product_catalog: Optional[SqlAlchemyProductCatalog] = None
        self._user_directory: Optional[SqlAlchemyUserDirectory] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session.

        Driver errors that escaped a repository leave as StoreError.
        """
        try:
            if exc_type is not None:
                logger.warning(f"Transaction rolled back: {exc_type.__name__}: {exc_val}")
                await self._session.rollback()
        finally:
            await self._session.close()

        if isinstance(exc_val, SQLAlchemyError):
            raise StoreError(f"Database operation failed: {exc_val}") from exc_val

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session)
        return self._order_repository

    @property
    def order_items(self) -> SqlAlchemyOrderItemRepository:
        """Lazy-load order item repository."""
        if self._order_item_repository is None:
            self._order_item_repository = SqlAlchemyOrderItemRepository(self.session)
        return self._order_item_repository

    @property
    def products(self) -> SqlAlchemyProductCatalog:
        if self._product_catalog is None:
            self._product_catalog = SqlAlchemyProductCatalog(self.session)
        return self._product_catalog

    @property
    def users(self) -> SqlAlchemyUserDirectory:
        if self._user_directory is None:
            self._user_directory = SqlAlchemyUserDirectory(self.session)
        return self._user_directory

    async def commit(self) -> None:
        """Commit all pending changes."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Commit failed: {e}")
            await self.rollback()
            raise StoreError(f"Failed to commit transaction: {e}") from e

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
