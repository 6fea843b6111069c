"""
Domain package
"""
from northwind_orders.domain.order import (
    CustomerRef,
    EmployeeRef,
    Order,
    OrderDetail,
    ProductRef,
    ShipperRef,
    ShippingAddress
)

__all__ = [
    "CustomerRef",
    "EmployeeRef",
    "Order",
    "OrderDetail",
    "ProductRef",
    "ShipperRef",
    "ShippingAddress"
]
