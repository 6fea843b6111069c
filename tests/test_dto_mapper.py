"""Tests for domain ↔ API schema mapping."""

from decimal import Decimal

from northwind_orders.domain import CustomerRef, EmployeeRef, ProductRef, ShipperRef
from northwind_orders.mappers import OrderDtoMapper
from northwind_orders.schemas import BriefOrder
from tests.factories import brief_order_payload, build_order


def test_brief_order_accepts_camel_case_body() -> None:
    brief = BriefOrder.model_validate(brief_order_payload(order_id=3))

    assert brief.id == 3
    assert brief.customer_id == "ALFKI"
    assert brief.order_details[0].product_id == 7


def test_brief_to_domain_keeps_identifiers_only() -> None:
    brief = BriefOrder.model_validate(brief_order_payload())

    order = OrderDtoMapper().to_domain(brief)

    assert order.customer == CustomerRef(code="ALFKI")
    assert order.employee == EmployeeRef(id=1)
    assert order.shipper == ShipperRef(id=1)
    assert order.freight == Decimal("10.5")
    assert order.shipping_address.city == "Berlin"
    assert order.details[0].product == ProductRef(id=7)
    assert order.details[0].unit_price == Decimal("9.99")
    assert order.details[0].order is order


def test_full_representation_carries_display_names() -> None:
    order = build_order(order_id=10248)
    order.customer.company_name = "Alfreds Futterkiste"
    order.employee.first_name = "Nancy"
    order.employee.last_name = "Davolio"
    order.employee.country = "USA"
    order.shipper.company_name = "Speedy Express"
    order.details[0].product = ProductRef(
        id=7, name="Uncle Bob's Organic Dried Pears",
        supplier_id=3, supplier_name="Grandma Kelly's Homestead",
        category_id=7, category_name="Produce",
    )

    body = OrderDtoMapper().to_full(order).model_dump(by_alias=True, mode="json")

    assert body["id"] == 10248
    assert body["customer"] == {"code": "ALFKI", "companyName": "Alfreds Futterkiste"}
    assert body["employee"]["lastName"] == "Davolio"
    assert body["shipper"] == {"id": 1, "companyName": "Speedy Express"}
    assert body["shippingAddress"]["postalCode"] == "12209"
    assert body["freight"] == 10.5
    assert body["orderDetails"] == [
        {
            "productId": 7,
            "productName": "Uncle Bob's Organic Dried Pears",
            "categoryId": 7,
            "categoryName": "Produce",
            "supplierId": 3,
            "supplierCompanyName": "Grandma Kelly's Homestead",
            "unitPrice": 9.99,
            "quantity": 2,
            "discount": 0.0,
        }
    ]


def test_brief_representation_has_no_display_names() -> None:
    order = build_order(order_id=10248)
    order.customer.company_name = "Alfreds Futterkiste"

    body = OrderDtoMapper().to_brief(order).model_dump(by_alias=True, mode="json")

    assert body["customerId"] == "ALFKI"
    assert "customer" not in body
    assert body["shipCity"] == "Berlin"
    assert body["orderDetails"] == [{"productId": 7, "unitPrice": 9.99, "quantity": 2, "discount": 0.0}]
