"""
Catalog and customer entities.

These belong to collaborators of the orders service: orders only read them
(price lookup, display names), they are never modified here.
"""
from dataclasses import dataclass, field
from typing import Optional

from ..value_objects import Money, new_id


@dataclass
class Category:
    name: str
    id: str = field(default_factory=new_id)


@dataclass
class Product:
    """A catalog product with its current unit price."""
    name: str
    price: Money
    description: str = ""
    category: Optional[Category] = None
    count_in_stock: int = 0
    id: str = field(default_factory=new_id)


@dataclass
class User:
    name: str
    email: str
    id: str = field(default_factory=new_id)
