"""
SQLAlchemy Order and OrderDetail models
"""
from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from northwind_orders.database import Base


class Order(Base):
    """Order database model"""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    customer_id = Column(String(5), ForeignKey("customers.code"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    shipper_id = Column(Integer, ForeignKey("shippers.id"), nullable=False, index=True)
    order_date = Column(DateTime, nullable=False)
    required_date = Column(DateTime, nullable=False)
    shipped_date = Column(DateTime, nullable=True)
    freight = Column(Numeric(19, 4), nullable=False, default=0)
    ship_name = Column(String(40), nullable=True)
    ship_address = Column(String(60), nullable=True)
    ship_city = Column(String(15), nullable=True)
    ship_region = Column(String(15), nullable=True)
    ship_postal_code = Column(String(10), nullable=True)
    ship_country = Column(String(15), nullable=True)

    customer = relationship("Customer")
    employee = relationship("Employee")
    shipper = relationship("Shipper")
    details = relationship(
        "OrderDetail",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderDetail.line_no",
    )

    # Constraints
    __table_args__ = (
        CheckConstraint('freight >= 0', name='check_freight_non_negative'),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, customer_id='{self.customer_id}', details={len(self.details)})>"


class OrderDetail(Base):
    """Order line database model, keyed by (order_id, product_id)"""

    __tablename__ = "order_details"

    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    line_no = Column(Integer, nullable=False, default=0)
    unit_price = Column(Numeric(19, 4), nullable=False)
    quantity = Column(Integer, nullable=False)
    discount = Column(Float, nullable=False, default=0.0)

    order = relationship("Order", back_populates="details")
    product = relationship("Product")

    # Constraints
    __table_args__ = (
        CheckConstraint('unit_price >= 0', name='check_unit_price_non_negative'),
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        CheckConstraint('discount >= 0 AND discount < 1', name='check_discount_fraction'),
    )

    def __repr__(self):
        return f"<OrderDetail(order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity})>"
