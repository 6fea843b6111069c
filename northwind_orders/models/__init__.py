"""
Models package
"""
from northwind_orders.models.order import Order, OrderDetail
from northwind_orders.models.reference import Category, Customer, Employee, Product, Shipper, Supplier

__all__ = [
    "Category",
    "Customer",
    "Employee",
    "Order",
    "OrderDetail",
    "Product",
    "Shipper",
    "Supplier"
]
