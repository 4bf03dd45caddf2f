# Settings package
from core.settings.modules import (
    ApiSettings,
    AppSettings,
    DatabaseSettings,
    OrderSettings,
    get_app_settings,
)

__all__ = ["get_app_settings", "AppSettings", "ApiSettings", "DatabaseSettings", "OrderSettings"]
