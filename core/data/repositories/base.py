"""Shared helpers for SQLAlchemy repositories."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


async def flush(session: AsyncSession) -> None:
    """Flush pending changes, surfacing driver failures as StoreError."""
    try:
        await session.flush()  # Propagate to DB without committing
    except SQLAlchemyError as e:
        logger.error(f"Flush failed: {e}")
        raise StoreError(f"Failed to write to the database: {e}") from e


async def execute(session: AsyncSession, statement):
    """Run a statement, surfacing driver failures as StoreError."""
    try:
        return await session.execute(statement)
    except SQLAlchemyError as e:
        logger.error(f"Query failed: {e}")
        raise StoreError(f"Failed to query the database: {e}") from e


async def get(session: AsyncSession, model, ident):
    """Primary-key lookup, surfacing driver failures as StoreError."""
    try:
        return await session.get(model, ident)
    except SQLAlchemyError as e:
        logger.error(f"Lookup of {model.__name__} {ident} failed: {e}")
        raise StoreError(f"Failed to read from the database: {e}") from e
