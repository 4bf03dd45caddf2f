"""Domain layer - pure domain models and interfaces."""

from .entities import Category, Order, OrderItem, Product, User
from .exceptions import NotFoundError, OrderServiceError, StoreError, ValidationError
from .repositories import OrderItemRepository, OrderRepository, ProductCatalog, UserDirectory
from .value_objects import Money, OrderStatus, ShippingAddress

__all__ = [
    "Category",
    "Money",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderItemRepository",
    "OrderRepository",
    "OrderServiceError",
    "OrderStatus",
    "Product",
    "ProductCatalog",
    "ShippingAddress",
    "StoreError",
    "User",
    "UserDirectory",
    "ValidationError",
]
