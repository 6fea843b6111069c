"""
Schemas package
"""
from northwind_orders.schemas.order import (
    AddOrderResponse,
    BriefOrder,
    BriefOrderDetail,
    CustomerInfo,
    EmployeeInfo,
    FullOrder,
    FullOrderDetail,
    ShipperInfo,
    ShippingAddressInfo
)

__all__ = [
    "AddOrderResponse",
    "BriefOrder",
    "BriefOrderDetail",
    "CustomerInfo",
    "EmployeeInfo",
    "FullOrder",
    "FullOrderDetail",
    "ShipperInfo",
    "ShippingAddressInfo"
]
