"""Application layer - services and DTOs."""

from .dtos import CreateOrderRequest, OrderDTO, OrderItemDTO, UpdateOrderStatusRequest
from .services import OrderApplicationService

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "OrderDTO",
    "OrderItemDTO",
    "UpdateOrderStatusRequest",
    # Services
    "OrderApplicationService",
]
