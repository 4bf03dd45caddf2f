"""SQLAlchemy ORM models for the catalog and user tables."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import Base


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    category_id = Column(String(32), ForeignKey("categories.id"), nullable=True)
    count_in_stock = Column(Integer, nullable=False, default=0)

    category = relationship("CategoryModel")


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
