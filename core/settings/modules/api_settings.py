from __future__ import annotations

from typing import List

from pydantic import Field

from core.settings.base_settings import StorefrontBaseSettings


class ApiSettings(StorefrontBaseSettings):
    """
    HTTP layer settings.
    Loaded from .env with exact variable name matching.
    """

    title: str = Field("Storefront Orders API", alias="API_TITLE")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], alias="API_CORS_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
