"""
Mappers package
"""
from northwind_orders.mappers.dto_mapper import OrderDtoMapper
from northwind_orders.mappers.order_mapper import OrderMapper

__all__ = ["OrderDtoMapper", "OrderMapper"]
