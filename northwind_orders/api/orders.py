"""
Order API endpoints
"""
from typing import Dict, List, NoReturn, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from northwind_orders.config import settings
from northwind_orders.database import get_db
from northwind_orders.exceptions import ErrorKind, OrderServiceError
from northwind_orders.schemas import AddOrderResponse, BriefOrder, FullOrder
from northwind_orders.services import OrderService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


def raise_http_error(
    error: Exception,
    operation: str,
    order_id: Optional[int] = None,
    status_by_kind: Optional[Dict[ErrorKind, int]] = None,
) -> NoReturn:
    """
    Log a failed operation and translate it to an HTTPException

    The status code is picked from ``status_by_kind`` by the error's kind;
    kinds not listed there, and exceptions outside the service taxonomy,
    become 500.
    """
    kind = error.kind if isinstance(error, OrderServiceError) else ErrorKind.UNEXPECTED
    status_code = (status_by_kind or {}).get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.error(
        "order_operation_failed",
        operation=operation,
        order_id=order_id,
        kind=kind.value,
        error=str(error),
        exc_info=status_code == status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        detail = f"Unexpected error during {operation}"
    else:
        detail = str(error)
    raise HTTPException(status_code=status_code, detail=detail) from error


@router.get("", response_model=List[BriefOrder], summary="Get orders")
def get_orders(
    skip: int = Query(0, description="Number of orders to skip"),
    count: int = Query(settings.DEFAULT_PAGE_SIZE, description="Maximum number of orders to return"),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a page of orders in brief form, sorted by ID

    - **skip**: Number of orders to skip (default: 0, must not be negative)
    - **count**: Maximum number of orders to return (default: 10, must be positive)
    """
    try:
        return service.get_orders(skip=skip, count=count)
    except Exception as e:
        raise_http_error(
            e, "get_orders",
            status_by_kind={ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST}
        )


@router.get("/{order_id}", response_model=FullOrder, summary="Get order by ID")
def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order with customer, employee, shipper and product names

    - **order_id**: Order ID
    """
    try:
        return service.get_order(order_id)
    except Exception as e:
        raise_http_error(
            e, "get_order", order_id,
            status_by_kind={ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND}
        )


@router.post("", response_model=AddOrderResponse, summary="Create order")
def create_order(
    order_data: BriefOrder,
    service: OrderService = Depends(get_order_service)
):
    """
    Create a new order from its brief form

    Products named by the lines are created when unknown.
    Returns the generated order ID.
    """
    try:
        order_id = service.create_order(order_data)
    except Exception as e:
        raise_http_error(e, "create_order")
    return AddOrderResponse(order_id=order_id)


@router.put("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Replace order")
def replace_order(
    order_id: int,
    order_data: BriefOrder,
    service: OrderService = Depends(get_order_service)
):
    """
    Replace an order: every header field and the whole set of lines

    - **order_id**: Order ID, must match the ID in the body
    """
    if order_data.id != order_id:
        logger.warning("order_id_mismatch", operation="replace_order", order_id=order_id, body_id=order_data.id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Order id in body ({order_data.id}) does not match id in path ({order_id})"
        )

    try:
        service.replace_order(order_data)
    except Exception as e:
        raise_http_error(
            e, "replace_order", order_id,
            status_by_kind={ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND}
        )
    return None


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete order")
def delete_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Delete an order and its lines

    - **order_id**: Order ID
    """
    try:
        service.delete_order(order_id)
    except Exception as e:
        raise_http_error(
            e, "delete_order", order_id,
            status_by_kind={ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND}
        )
    return None
