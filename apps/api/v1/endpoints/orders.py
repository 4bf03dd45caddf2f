"""Order endpoints for REST API.

Domain errors raised by the service are translated to HTTP responses by
the exception handlers registered in `apps.api.main`.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from core.application.dtos.order_dto import (
    CreateOrderRequest,
    DeleteOrderResponse,
    OrderCountDTO,
    OrderDTO,
    TotalSalesDTO,
    UpdateOrderStatusRequest,
)
from core.application.services.order_service import OrderApplicationService

from apps.api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderDTO])
async def list_orders(
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """List all orders, newest first, with user and items resolved."""
    return await service.list_orders()


@router.get("/get/count", response_model=OrderCountDTO)
async def get_order_count(
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderCountDTO:
    """Total number of orders."""
    return OrderCountDTO(order_count=await service.count_orders())


@router.get("/get/totalsales", response_model=TotalSalesDTO)
async def get_total_sales(
    service: OrderApplicationService = Depends(get_order_service),
) -> TotalSalesDTO:
    """Sum of every order's total price (0 when there are no orders)."""
    revenue = await service.total_revenue()
    return TotalSalesDTO(totalsales=revenue.amount)


@router.get("/get/userorders/{user_id}", response_model=List[OrderDTO])
async def list_user_orders(
    user_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """One user's orders, newest first."""
    return await service.list_orders_for_user(user_id)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID.

    Args:
        order_id: Order ID string
        service: OrderApplicationService instance

    Returns:
        OrderDTO with items, products and categories resolved
    """
    return await service.get_order(order_id)


@router.post("", response_model=OrderDTO)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Place a new order.

    Args:
        request: CreateOrderRequest DTO
        service: OrderApplicationService instance

    Returns:
        OrderDTO with the computed total price
    """
    order = await service.create_order(request)
    logger.info(f"Created order {order.id} (total {order.total_price})")
    return order


@router.put("/{order_id}", response_model=OrderDTO)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Update the status of an order (the only mutable field)."""
    return await service.update_status(order_id, request.status)


@router.delete("/{order_id}", response_model=DeleteOrderResponse)
async def delete_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> DeleteOrderResponse:
    """Delete an order and its items."""
    await service.delete_order(order_id)
    return DeleteOrderResponse(success=True, message="the order is deleted!")
