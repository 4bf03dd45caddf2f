"""Database models."""

from .base import Base
from .catalog_model import CategoryModel, ProductModel, UserModel
from .order_model import OrderItemModel, OrderModel

__all__ = [
    "Base",
    "CategoryModel",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
    "UserModel",
]
