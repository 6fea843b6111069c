"""
Pydantic schemas for request/response validation

Two order shapes go over the wire: the full one for single-order reads,
carrying display names of every referenced entity, and the brief one for
lists and writes, carrying identifiers only. JSON keys are camelCase.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MONEY_DECIMAL_PLACES = 4


def _check_money_scale(value: float) -> float:
    exponent = Decimal(str(value)).as_tuple().exponent
    if exponent < -MONEY_DECIMAL_PLACES:
        raise ValueError(f"at most {MONEY_DECIMAL_PLACES} decimal places are allowed")
    return value


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BriefOrderDetail(CamelModel):
    """Order line in brief form"""
    product_id: int = Field(..., gt=0, description="Product ID")
    unit_price: float = Field(..., ge=0, description="Unit price")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    discount: float = Field(0.0, ge=0, lt=1, description="Discount as a fraction")

    @field_validator("unit_price")
    @classmethod
    def check_unit_price_scale(cls, value: float) -> float:
        return _check_money_scale(value)


class BriefOrder(CamelModel):
    """Order in brief form, used for lists, creation and replacement"""
    id: int = Field(0, ge=0, description="Order ID, ignored on creation")
    customer_id: str = Field(..., min_length=1, max_length=5, description="Customer code")
    employee_id: int = Field(..., description="Employee ID")
    order_date: datetime
    required_date: datetime
    shipped_date: Optional[datetime] = None
    shipper_id: int = Field(..., description="Shipper ID")
    freight: float = Field(0.0, ge=0)
    ship_name: Optional[str] = None
    ship_address: Optional[str] = None
    ship_city: Optional[str] = None
    ship_region: Optional[str] = None
    ship_postal_code: Optional[str] = None
    ship_country: Optional[str] = None
    order_details: List[BriefOrderDetail] = Field(default_factory=list)

    @field_validator("freight")
    @classmethod
    def check_freight_scale(cls, value: float) -> float:
        return _check_money_scale(value)


class CustomerInfo(CamelModel):
    code: str
    company_name: Optional[str] = None


class EmployeeInfo(CamelModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None


class ShipperInfo(CamelModel):
    id: int
    company_name: Optional[str] = None


class ShippingAddressInfo(CamelModel):
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class FullOrderDetail(CamelModel):
    """Order line with product, category and supplier names"""
    product_id: int
    product_name: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    supplier_id: Optional[int] = None
    supplier_company_name: Optional[str] = None
    unit_price: float
    quantity: int
    discount: float


class FullOrder(CamelModel):
    """Order with display fields of every referenced entity"""
    id: int
    customer: CustomerInfo
    employee: EmployeeInfo
    order_date: datetime
    required_date: datetime
    shipped_date: Optional[datetime] = None
    shipper: ShipperInfo
    freight: float
    ship_name: Optional[str] = None
    shipping_address: ShippingAddressInfo
    order_details: List[FullOrderDetail]


class AddOrderResponse(CamelModel):
    """Schema for order creation response"""
    order_id: int
