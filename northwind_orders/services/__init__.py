"""
Services package
"""
from northwind_orders.services.order_service import OrderService

__all__ = ["OrderService"]
