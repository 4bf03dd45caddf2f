"""Domain entities."""

from .catalog import Category, Product, User
from .order import Order, OrderItem

__all__ = ["Category", "Order", "OrderItem", "Product", "User"]
