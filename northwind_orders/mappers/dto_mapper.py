"""Mapper for Order Domain ↔ API schema conversion."""

from decimal import Decimal

from northwind_orders.domain import (
    CustomerRef,
    EmployeeRef,
    Order,
    OrderDetail,
    ProductRef,
    ShipperRef,
    ShippingAddress,
)
from northwind_orders.schemas import (
    BriefOrder,
    BriefOrderDetail,
    CustomerInfo,
    EmployeeInfo,
    FullOrder,
    FullOrderDetail,
    ShipperInfo,
    ShippingAddressInfo,
)


def _to_decimal(value: float) -> Decimal:
    return Decimal(str(value))


class OrderDtoMapper:
    """Mapper for Order Domain ↔ API schema conversion."""

    def to_full(self, order: Order) -> FullOrder:
        """Single-order representation with every display field."""
        return FullOrder(
            id=order.id,
            customer=CustomerInfo(code=order.customer.code, company_name=order.customer.company_name),
            employee=EmployeeInfo(
                id=order.employee.id,
                first_name=order.employee.first_name,
                last_name=order.employee.last_name,
                country=order.employee.country,
            ),
            order_date=order.order_date,
            required_date=order.required_date,
            shipped_date=order.shipped_date,
            shipper=ShipperInfo(id=order.shipper.id, company_name=order.shipper.company_name),
            freight=float(order.freight),
            ship_name=order.ship_name,
            shipping_address=ShippingAddressInfo(
                address=order.shipping_address.address,
                city=order.shipping_address.city,
                region=order.shipping_address.region,
                postal_code=order.shipping_address.postal_code,
                country=order.shipping_address.country,
            ),
            order_details=[
                FullOrderDetail(
                    product_id=detail.product.id,
                    product_name=detail.product.name,
                    category_id=detail.product.category_id,
                    category_name=detail.product.category_name,
                    supplier_id=detail.product.supplier_id,
                    supplier_company_name=detail.product.supplier_name,
                    unit_price=float(detail.unit_price),
                    quantity=detail.quantity,
                    discount=detail.discount,
                )
                for detail in order.details
            ],
        )

    def to_brief(self, order: Order) -> BriefOrder:
        """List/write representation carrying identifiers only."""
        return BriefOrder(
            id=order.id,
            customer_id=order.customer.code,
            employee_id=order.employee.id,
            order_date=order.order_date,
            required_date=order.required_date,
            shipped_date=order.shipped_date,
            shipper_id=order.shipper.id,
            freight=float(order.freight),
            ship_name=order.ship_name,
            ship_address=order.shipping_address.address,
            ship_city=order.shipping_address.city,
            ship_region=order.shipping_address.region,
            ship_postal_code=order.shipping_address.postal_code,
            ship_country=order.shipping_address.country,
            order_details=[
                BriefOrderDetail(
                    product_id=detail.product.id,
                    unit_price=float(detail.unit_price),
                    quantity=detail.quantity,
                    discount=detail.discount,
                )
                for detail in order.details
            ],
        )

    def to_domain(self, brief: BriefOrder) -> Order:
        """Build the aggregate from a brief order; display fields stay unset."""
        order = Order(
            id=brief.id,
            customer=CustomerRef(code=brief.customer_id),
            employee=EmployeeRef(id=brief.employee_id),
            shipper=ShipperRef(id=brief.shipper_id),
            order_date=brief.order_date,
            required_date=brief.required_date,
            shipped_date=brief.shipped_date,
            freight=_to_decimal(brief.freight),
            ship_name=brief.ship_name,
            shipping_address=ShippingAddress(
                address=brief.ship_address,
                city=brief.ship_city,
                region=brief.ship_region,
                postal_code=brief.ship_postal_code,
                country=brief.ship_country,
            ),
        )

        for detail in brief.order_details:
            order.add_detail(
                OrderDetail(
                    product=ProductRef(id=detail.product_id),
                    unit_price=_to_decimal(detail.unit_price),
                    quantity=detail.quantity,
                    discount=detail.discount,
                )
            )

        return order
