"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(32), primary_key=True)
    shipping_address1 = Column(String(255), nullable=False)
    shipping_address2 = Column(String(255), nullable=True)
    city = Column(String(100), nullable=False)
    zip = Column(String(20), nullable=False)
    country = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=False)
    status = Column(String(50), nullable=False, default="Pending")
    total_price = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    date_ordered = Column(DateTime(timezone=True), nullable=False, index=True)

    # Items are ordered by their position in the submitted cart
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        order_by="OrderItemModel.position",
    )
    user = relationship("UserModel")


class OrderItemModel(Base):
    """
    SQLAlchemy ORM model for order_items table.

    Rows are inserted before their parent order, so `order_id` and
    `position` stay NULL until the order itself is written.
    """

    __tablename__ = "order_items"
    __table_args__ = (CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),)

    id = Column(String(32), primary_key=True)
    product_id = Column(String(32), ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    order_id = Column(String(32), ForeignKey("orders.id"), nullable=True, index=True)
    position = Column(Integer, nullable=True)

    order = relationship("OrderModel", back_populates="items")
    product = relationship("ProductModel")
