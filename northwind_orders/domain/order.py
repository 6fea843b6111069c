"""
Order aggregate, independent of storage

An Order owns its OrderDetail lines. Customer, Employee, Shipper and Product
are references: the order points at them by identity and carries their
display fields, but never owns them. A display field left as ``None`` means
the caller did not supply it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional


@dataclass
class CustomerRef:
    code: str
    company_name: Optional[str] = None


@dataclass
class EmployeeRef:
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None


@dataclass
class ShipperRef:
    id: int
    company_name: Optional[str] = None


@dataclass
class ProductRef:
    """Product as seen from an order line, with supplier and category names"""
    id: int
    name: Optional[str] = None
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None


@dataclass
class ShippingAddress:
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


@dataclass
class OrderDetail:
    """One order line"""
    product: ProductRef
    unit_price: Decimal
    quantity: int
    discount: float = 0.0
    order: Optional[Order] = field(default=None, repr=False, compare=False)


@dataclass
class Order:
    """
    Order aggregate root

    ``id`` is 0 until the order has been persisted and does not change after
    that. Use ``add_detail`` so every line points back at its order.
    """
    customer: CustomerRef
    employee: EmployeeRef
    shipper: ShipperRef
    order_date: datetime
    required_date: datetime
    shipped_date: Optional[datetime] = None
    freight: Decimal = Decimal("0")
    ship_name: Optional[str] = None
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)
    id: int = 0
    details: List[OrderDetail] = field(default_factory=list)

    def __post_init__(self):
        for detail in self.details:
            detail.order = self

    def add_detail(self, detail: OrderDetail) -> OrderDetail:
        detail.order = self
        self.details.append(detail)
        return detail

    @property
    def product_ids(self) -> List[int]:
        return [detail.product.id for detail in self.details]
