"""
Repositories package
"""
from northwind_orders.repositories.order_repository import OrderRepository
from northwind_orders.repositories.reference_resolver import ReferenceResolver

__all__ = ["OrderRepository", "ReferenceResolver"]
