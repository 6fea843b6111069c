"""
Order Service - Business Logic Layer
"""
from typing import List

from sqlalchemy.orm import Session

from northwind_orders.mappers import OrderDtoMapper
from northwind_orders.repositories import OrderRepository
from northwind_orders.schemas import BriefOrder, FullOrder


class OrderService:
    """Service layer between the order routes and the repository"""

    def __init__(self, db: Session):
        self.repository = OrderRepository(db)
        self.mapper = OrderDtoMapper()

    def get_order(self, order_id: int) -> FullOrder:
        """Get order by ID in full representation"""
        return self.mapper.to_full(self.repository.get_order(order_id))

    def get_orders(self, skip: int, count: int) -> List[BriefOrder]:
        """Get a page of orders in brief representation"""
        return [self.mapper.to_brief(o) for o in self.repository.get_orders(skip, count)]

    def create_order(self, order_data: BriefOrder) -> int:
        """
        Create new order

        Args:
            order_data: Brief order; its ``id`` is ignored

        Returns:
            Generated order ID
        """
        order = self.mapper.to_domain(order_data)
        order.id = 0
        return self.repository.add_order(order)

    def replace_order(self, order_data: BriefOrder) -> None:
        """Replace header and lines of the order identified by the body's ID"""
        self.repository.update_order(self.mapper.to_domain(order_data))

    def delete_order(self, order_id: int) -> None:
        """Delete order and its lines"""
        self.repository.remove_order(order_id)
