from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import StorefrontBaseSettings


class DatabaseSettings(StorefrontBaseSettings):
    """
    Database connection settings.
    Loaded from .env with exact variable name matching.
    """

    url: str = Field("sqlite+aiosqlite:///./storefront.db", alias="DATABASE_URL")
    echo_sql: bool = Field(False, alias="DB_ECHO_SQL")

    # Connection pool settings (ignored for SQLite)
    pool_size: int = Field(10, alias="DB_POOL_SIZE")
    max_overflow: int = Field(20, alias="DB_MAX_OVERFLOW")
    pool_timeout: int = Field(30, alias="DB_POOL_TIMEOUT")
    pool_recycle: int = Field(3600, alias="DB_POOL_RECYCLE")  # 1 hour

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")
