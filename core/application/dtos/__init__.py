"""Application DTOs."""

from .order_dto import (
    CategoryDTO,
    CreateOrderRequest,
    DeleteOrderResponse,
    OrderCountDTO,
    OrderDTO,
    OrderItemDTO,
    OrderLineRequest,
    ProductDTO,
    TotalSalesDTO,
    UpdateOrderStatusRequest,
    UserRefDTO,
)

__all__ = [
    "CategoryDTO",
    "CreateOrderRequest",
    "DeleteOrderResponse",
    "OrderCountDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderLineRequest",
    "ProductDTO",
    "TotalSalesDTO",
    "UpdateOrderStatusRequest",
    "UserRefDTO",
]
