"""
Order Repository - Data Access Layer
"""
from decimal import Decimal
from typing import List, NoReturn

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from northwind_orders.domain import Order
from northwind_orders.exceptions import (
    InvalidArgumentError,
    OrderConflictError,
    OrderNotFoundError,
    OrderServiceError,
    RepositoryError
)
from northwind_orders.mappers.order_mapper import OrderMapper
from northwind_orders.models import Order as OrderORM
from northwind_orders.models import OrderDetail as OrderDetailORM
from northwind_orders.models import Product as ProductORM
from northwind_orders.repositories.reference_resolver import ReferenceResolver

logger = structlog.get_logger(__name__)

# Money columns are Numeric(19, 4)
MONEY_QUANTUM = Decimal("0.0001")


def _full_order_options():
    """Eager loads for an order with every joined row it maps to"""
    return (
        joinedload(OrderORM.customer),
        joinedload(OrderORM.employee),
        joinedload(OrderORM.shipper),
        selectinload(OrderORM.details)
        .joinedload(OrderDetailORM.product)
        .joinedload(ProductORM.supplier),
        selectinload(OrderORM.details)
        .joinedload(OrderDetailORM.product)
        .joinedload(ProductORM.category),
    )


class OrderRepository:
    """Repository for Order aggregate CRUD operations"""

    def __init__(self, db: Session):
        self.db = db
        self.mapper = OrderMapper()
        self.references = ReferenceResolver(db)

    def get_order(self, order_id: int) -> Order:
        """
        Get order by ID with customer, employee, shipper and product rows

        Raises:
            OrderNotFoundError: If no order has this ID
        """
        try:
            orm_order = (
                self.db.query(OrderORM)
                .options(*_full_order_options())
                .filter(OrderORM.id == order_id)
                .first()
            )
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error reading order {order_id}: {e}") from e

        if orm_order is None:
            raise OrderNotFoundError(order_id)

        return self.mapper.to_domain(orm_order)

    def get_orders(self, skip: int, count: int) -> List[Order]:
        """
        Get a page of orders sorted by ID ascending

        Args:
            skip: Number of orders to skip, at least 0
            count: Maximum number of orders to return, at least 1

        Raises:
            InvalidArgumentError: If skip or count is out of range
        """
        if skip < 0:
            raise InvalidArgumentError(f"skip must be non-negative, got {skip}")
        if count <= 0:
            raise InvalidArgumentError(f"count must be positive, got {count}")

        try:
            orm_orders = (
                self.db.query(OrderORM)
                .options(*_full_order_options())
                .order_by(OrderORM.id)
                .offset(skip)
                .limit(count)
                .all()
            )
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error listing orders: {e}") from e

        return [self.mapper.to_domain(o) for o in orm_orders]

    def add_order(self, order: Order) -> int:
        """
        Persist a new order with its details

        Products named by the details are resolved or created on the way.
        Everything is written in one transaction.

        Args:
            order: Order aggregate; its ``id`` is ignored

        Returns:
            Generated order ID

        Raises:
            InvalidArgumentError: If a detail is malformed (e.g. product ID <= 0)
            OrderConflictError: On duplicate products or constraint violation
            RepositoryError: On any other storage failure
        """
        self._verify_order(order)

        try:
            orm_order = self.mapper.apply_header(order, OrderORM())
            self._attach_references(order, orm_order)
            orm_order.details = self._build_details(order)
            self.db.add(orm_order)
            self.db.commit()
        except Exception as e:
            self._rollback_and_raise(e, "adding the order")

        logger.info("order_added", order_id=orm_order.id, details=len(order.details))
        return orm_order.id

    def remove_order(self, order_id: int) -> None:
        """
        Delete an order and its details

        Raises:
            OrderNotFoundError: If no order has this ID
        """
        orm_order = (
            self.db.query(OrderORM)
            .options(selectinload(OrderORM.details))
            .filter(OrderORM.id == order_id)
            .first()
        )
        if orm_order is None:
            raise OrderNotFoundError(order_id)

        try:
            self.db.delete(orm_order)
            self.db.commit()
        except Exception as e:
            self._rollback_and_raise(e, f"removing order {order_id}")

        logger.info("order_removed", order_id=order_id)

    def update_order(self, order: Order) -> None:
        """
        Replace an existing order

        Every header field is overwritten and the detail set is replaced
        wholesale: old lines are deleted, then the supplied lines inserted.

        Raises:
            OrderNotFoundError: If no order has ``order.id``
            InvalidArgumentError: If a detail is malformed
            OrderConflictError: On duplicate products or constraint violation
            RepositoryError: On any other storage failure
        """
        existing = (
            self.db.query(OrderORM)
            .options(selectinload(OrderORM.details))
            .filter(OrderORM.id == order.id)
            .first()
        )
        if existing is None:
            raise OrderNotFoundError(order.id)

        self._verify_order(order)

        try:
            self.mapper.apply_header(order, existing)
            self._attach_references(order, existing)

            # Old lines must be gone before lines with the same keys go in
            existing.details.clear()
            self.db.flush()

            existing.details.extend(self._build_details(order))
            self.db.commit()
        except Exception as e:
            self._rollback_and_raise(e, f"updating order {order.id}")

        logger.info("order_updated", order_id=order.id, details=len(order.details))

    def _attach_references(self, order: Order, orm_order: OrderORM) -> None:
        orm_order.customer = self.references.resolve_customer(order.customer)
        orm_order.employee = self.references.resolve_employee(order.employee)
        orm_order.shipper = self.references.resolve_shipper(order.shipper)

    def _build_details(self, order: Order) -> List[OrderDetailORM]:
        return [
            self.mapper.detail_to_orm(detail, self.references.resolve_product(detail.product), line_no)
            for line_no, detail in enumerate(order.details)
        ]

    def _rollback_and_raise(self, error: Exception, action: str) -> NoReturn:
        self.db.rollback()
        if isinstance(error, OrderServiceError):
            raise error
        if isinstance(error, IntegrityError):
            raise OrderConflictError(f"Constraint violation while {action}: {error.orig}") from error
        if isinstance(error, SQLAlchemyError):
            raise RepositoryError(f"Error while {action}: {error}") from error
        raise RepositoryError(f"An error occurred while {action}: {error}") from error

    @staticmethod
    def _verify_order(order: Order) -> None:
        if order is None:
            raise InvalidArgumentError("order is required")

        if order.freight < 0:
            raise InvalidArgumentError(f"freight must be non-negative, got {order.freight}")
        if order.freight.quantize(MONEY_QUANTUM) != order.freight:
            raise InvalidArgumentError(f"freight has more than 4 decimal places: {order.freight}")

        for detail in order.details:
            if detail.product is None or detail.product.id <= 0:
                raise InvalidArgumentError("Invalid product id in order detail")
            if detail.quantity <= 0:
                raise InvalidArgumentError(
                    f"quantity must be positive, got {detail.quantity} for product {detail.product.id}"
                )
            if detail.unit_price < 0:
                raise InvalidArgumentError(
                    f"unit price must be non-negative, got {detail.unit_price} for product {detail.product.id}"
                )
            if detail.unit_price.quantize(MONEY_QUANTUM) != detail.unit_price:
                raise InvalidArgumentError(
                    f"unit price has more than 4 decimal places: {detail.unit_price} for product {detail.product.id}"
                )
            if not 0 <= detail.discount < 1:
                raise InvalidArgumentError(
                    f"discount must be in [0, 1), got {detail.discount} for product {detail.product.id}"
                )

        product_ids = order.product_ids
        duplicates = sorted({pid for pid in product_ids if product_ids.count(pid) > 1})
        if duplicates:
            raise OrderConflictError(f"Order lists products more than once: {duplicates}")
