from __future__ import annotations

from pydantic import Field, field_validator

from core.settings.base_settings import StorefrontBaseSettings


class OrderSettings(StorefrontBaseSettings):
    """
    Order placement settings.
    Loaded from .env with exact variable name matching.
    """

    currency: str = Field("USD", alias="ORDERS_CURRENCY")
    default_status: str = Field("Pending", alias="ORDERS_DEFAULT_STATUS")
    # Off: status is a free-text label. On: known statuses + transition table.
    strict_status: bool = Field(False, alias="ORDERS_STRICT_STATUS")

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        if len(value) != 3:
            raise ValueError(f"ORDERS_CURRENCY must be a 3-letter code, got: {value}")
        return value.upper()
