"""Application DTOs for Order operations.

Field names are snake_case in Python and camelCase on the wire
(`orderItems`, `shippingAddress1`, `totalPrice`, `dateOrdered`, ...).
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Fixed-point internally, plain JSON number on the wire
MoneyAmount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OrderLineRequest(BaseModel):
    """One cart line in a create-order request."""

    product: str = Field(..., min_length=1, description="Product id")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = _CONFIG


class CreateOrderRequest(BaseModel):
    """Request DTO for placing an order."""

    order_items: List[OrderLineRequest] = Field(..., min_length=1, description="Cart lines")
    shipping_address1: str = Field(..., min_length=1)
    shipping_address2: Optional[str] = None
    city: str = Field(..., min_length=1)
    zip: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    status: Optional[str] = Field(None, description="Initial status (defaults to Pending)")
    user: str = Field(..., min_length=1, description="Id of the ordering user")

    model_config = _CONFIG


class UpdateOrderStatusRequest(BaseModel):
    status: str = Field(..., min_length=1, description="New status label")

    model_config = _CONFIG


class CategoryDTO(BaseModel):
    id: str
    name: str

    model_config = _CONFIG


class ProductDTO(BaseModel):
    id: str
    name: str
    description: str = ""
    price: MoneyAmount
    category: Optional[CategoryDTO] = None

    model_config = _CONFIG


class OrderItemDTO(BaseModel):
    """DTO for a stored order item with its product resolved."""

    id: str
    quantity: int
    product: Optional[ProductDTO] = None

    model_config = _CONFIG


class UserRefDTO(BaseModel):
    id: str
    name: Optional[str] = None

    model_config = _CONFIG


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str
    order_items: List[OrderItemDTO] = Field(default_factory=list)
    shipping_address1: str
    shipping_address2: Optional[str] = None
    city: str
    zip: str
    country: str
    phone: str
    status: str
    total_price: MoneyAmount = Field(..., description="Priced when the order was placed")
    currency: str = "USD"
    user: UserRefDTO
    date_ordered: datetime

    model_config = _CONFIG


class OrderCountDTO(BaseModel):
    order_count: int = Field(..., ge=0)

    model_config = _CONFIG


class TotalSalesDTO(BaseModel):
    totalsales: MoneyAmount

    model_config = _CONFIG


class DeleteOrderResponse(BaseModel):
    success: bool
    message: str

    model_config = _CONFIG
