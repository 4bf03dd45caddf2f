# Settings modules
from .api_settings import ApiSettings
from .app_settings import AppSettings, get_app_settings
from .database_settings import DatabaseSettings
from .order_settings import OrderSettings

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DatabaseSettings",
    "OrderSettings",
    "get_app_settings",
]
