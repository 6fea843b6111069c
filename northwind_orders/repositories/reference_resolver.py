"""
Reference Resolver - resolve-or-create for rows an order points at

Orders never own customers, employees, shippers or products, but a write may
mention one the store has not seen yet, or carry display names that differ
from the stored ones. The resolver looks each reference up by identity,
creates it when absent and updates its display fields when the caller
supplied different ones. Nothing is committed here; the caller owns the
transaction.
"""
from typing import Optional

import structlog
from sqlalchemy.orm import Session, joinedload

from northwind_orders.domain import CustomerRef, EmployeeRef, ProductRef, ShipperRef
from northwind_orders.models import Category, Customer, Employee, Product, Shipper, Supplier

logger = structlog.get_logger(__name__)


def _differs(incoming: Optional[str], stored: Optional[str]) -> bool:
    """A display field only counts as changed when the caller supplied it"""
    return incoming is not None and incoming != stored


class ReferenceResolver:
    """Looks up or upserts the reference rows of an order aggregate"""

    def __init__(self, db: Session):
        self.db = db

    def resolve_customer(self, ref: CustomerRef) -> Customer:
        customer = self.db.get(Customer, ref.code)
        if customer is None:
            customer = Customer(code=ref.code, company_name=ref.company_name)
            self.db.add(customer)
            self.db.flush()
            logger.info("customer_created", customer_code=ref.code)
        elif _differs(ref.company_name, customer.company_name):
            customer.company_name = ref.company_name
        return customer

    def resolve_employee(self, ref: EmployeeRef) -> Employee:
        employee = self.db.get(Employee, ref.id)
        if employee is None:
            employee = Employee(
                id=ref.id,
                first_name=ref.first_name,
                last_name=ref.last_name,
                country=ref.country,
            )
            self.db.add(employee)
            self.db.flush()
            logger.info("employee_created", employee_id=ref.id)
            return employee

        for field in ("first_name", "last_name", "country"):
            incoming = getattr(ref, field)
            if _differs(incoming, getattr(employee, field)):
                setattr(employee, field, incoming)
        return employee

    def resolve_shipper(self, ref: ShipperRef) -> Shipper:
        shipper = self.db.get(Shipper, ref.id)
        if shipper is None:
            shipper = Shipper(id=ref.id, company_name=ref.company_name)
            self.db.add(shipper)
            self.db.flush()
            logger.info("shipper_created", shipper_id=ref.id)
        elif _differs(ref.company_name, shipper.company_name):
            shipper.company_name = ref.company_name
        return shipper

    def resolve_product(self, ref: ProductRef) -> Product:
        """
        Resolve the product of an order line

        Absent products are created from the line's fields. For an existing
        product whose supplier or category name differs from the incoming
        one, the product is re-pointed at the incoming supplier/category and
        that row takes the incoming name. This mutates shared reference data
        from order input, so every overwrite is logged.

        Args:
            ref: Product as carried by the order line

        Returns:
            Product row attached to the session
        """
        product = (
            self.db.query(Product)
            .options(joinedload(Product.supplier), joinedload(Product.category))
            .filter(Product.id == ref.id)
            .first()
        )

        if product is None:
            product = Product(id=ref.id, name=ref.name)
            product.supplier = self._resolve_supplier(ref.supplier_id, ref.supplier_name)
            product.category = self._resolve_category(ref.category_id, ref.category_name)
            self.db.add(product)
            self.db.flush()
            logger.info("product_created", product_id=ref.id)
            return product

        if _differs(ref.name, product.name):
            logger.warning(
                "product_reference_overwritten",
                product_id=product.id,
                field="name",
                old=product.name,
                new=ref.name,
            )
            product.name = ref.name

        stored_supplier = product.supplier.company_name if product.supplier else None
        if _differs(ref.supplier_name, stored_supplier):
            logger.warning(
                "product_reference_overwritten",
                product_id=product.id,
                field="supplier",
                old=stored_supplier,
                new=ref.supplier_name,
            )
            product.supplier = self._resolve_supplier(
                ref.supplier_id if ref.supplier_id is not None else product.supplier_id,
                ref.supplier_name,
            )

        stored_category = product.category.name if product.category else None
        if _differs(ref.category_name, stored_category):
            logger.warning(
                "product_reference_overwritten",
                product_id=product.id,
                field="category",
                old=stored_category,
                new=ref.category_name,
            )
            product.category = self._resolve_category(
                ref.category_id if ref.category_id is not None else product.category_id,
                ref.category_name,
            )

        return product

    def _resolve_supplier(self, supplier_id: Optional[int], company_name: Optional[str]) -> Optional[Supplier]:
        if supplier_id is None:
            return None
        supplier = self.db.get(Supplier, supplier_id)
        if supplier is None:
            supplier = Supplier(id=supplier_id, company_name=company_name)
            self.db.add(supplier)
            self.db.flush()
        elif _differs(company_name, supplier.company_name):
            supplier.company_name = company_name
        return supplier

    def _resolve_category(self, category_id: Optional[int], name: Optional[str]) -> Optional[Category]:
        if category_id is None:
            return None
        category = self.db.get(Category, category_id)
        if category is None:
            category = Category(id=category_id, name=name)
            self.db.add(category)
            self.db.flush()
        elif _differs(name, category.name):
            category.name = name
        return category
