"""Mapper for Order ORM ↔ Domain conversion."""

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
from northwind_orders.models import Order as OrderORM
from northwind_orders.models import OrderDetail as OrderDetailORM
from northwind_orders.models import Product as ProductORM


class OrderMapper:
    """Mapper for Order ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: OrderORM) -> Order:
        """Convert an order row with its joined rows to the domain aggregate."""
        order = Order(
            id=orm_model.id,
            customer=CustomerRef(
                code=orm_model.customer_id,
                company_name=orm_model.customer.company_name if orm_model.customer else None,
            ),
            employee=self._employee_to_domain(orm_model),
            shipper=ShipperRef(
                id=orm_model.shipper_id,
                company_name=orm_model.shipper.company_name if orm_model.shipper else None,
            ),
            order_date=orm_model.order_date,
            required_date=orm_model.required_date,
            shipped_date=orm_model.shipped_date,
            freight=Decimal(orm_model.freight),
            ship_name=orm_model.ship_name,
            shipping_address=ShippingAddress(
                address=orm_model.ship_address,
                city=orm_model.ship_city,
                region=orm_model.ship_region,
                postal_code=orm_model.ship_postal_code,
                country=orm_model.ship_country,
            ),
        )

        for detail in orm_model.details:
            order.add_detail(
                OrderDetail(
                    product=self.product_to_domain(detail.product),
                    unit_price=Decimal(detail.unit_price),
                    quantity=detail.quantity,
                    discount=detail.discount,
                )
            )

        return order

    def product_to_domain(self, orm_model: ProductORM) -> ProductRef:
        """Missing supplier or category rows map to empty names."""
        return ProductRef(
            id=orm_model.id,
            name=orm_model.name,
            supplier_id=orm_model.supplier_id,
            supplier_name=orm_model.supplier.company_name if orm_model.supplier else "",
            category_id=orm_model.category_id,
            category_name=orm_model.category.name if orm_model.category else "",
        )

    def apply_header(self, domain_entity: Order, orm_model: OrderORM) -> OrderORM:
        """Overwrite every scalar header column from the domain aggregate."""
        orm_model.customer_id = domain_entity.customer.code
        orm_model.employee_id = domain_entity.employee.id
        orm_model.shipper_id = domain_entity.shipper.id
        orm_model.order_date = domain_entity.order_date
        orm_model.required_date = domain_entity.required_date
        orm_model.shipped_date = domain_entity.shipped_date
        orm_model.freight = domain_entity.freight
        orm_model.ship_name = domain_entity.ship_name
        orm_model.ship_address = domain_entity.shipping_address.address
        orm_model.ship_city = domain_entity.shipping_address.city
        orm_model.ship_region = domain_entity.shipping_address.region
        orm_model.ship_postal_code = domain_entity.shipping_address.postal_code
        orm_model.ship_country = domain_entity.shipping_address.country
        return orm_model

    def detail_to_orm(self, domain_entity: OrderDetail, product: ProductORM, line_no: int) -> OrderDetailORM:
        """Build a detail row against an already resolved product row."""
        return OrderDetailORM(
            product_id=product.id,
            product=product,
            line_no=line_no,
            unit_price=domain_entity.unit_price,
            quantity=domain_entity.quantity,
            discount=domain_entity.discount,
        )

    @staticmethod
    def _employee_to_domain(orm_model: OrderORM) -> EmployeeRef:
        employee = orm_model.employee
        if employee is None:
            return EmployeeRef(id=orm_model.employee_id)
        return EmployeeRef(
            id=orm_model.employee_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            country=employee.country,
        )
