"""
SQLAlchemy models for reference data an order points at
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from northwind_orders.database import Base


class Customer(Base):
    """Customer database model, keyed by its natural code"""

    __tablename__ = "customers"

    code = Column(String(5), primary_key=True)
    company_name = Column(String(40), nullable=True)

    def __repr__(self):
        return f"<Customer(code='{self.code}', company_name='{self.company_name}')>"


class Employee(Base):
    """Employee database model"""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=False)
    first_name = Column(String(10), nullable=True)
    last_name = Column(String(20), nullable=True)
    country = Column(String(15), nullable=True)

    def __repr__(self):
        return f"<Employee(id={self.id}, first_name='{self.first_name}', last_name='{self.last_name}')>"


class Shipper(Base):
    """Shipper database model"""

    __tablename__ = "shippers"

    id = Column(Integer, primary_key=True, autoincrement=False)
    company_name = Column(String(40), nullable=True)

    def __repr__(self):
        return f"<Shipper(id={self.id}, company_name='{self.company_name}')>"


class Supplier(Base):
    """Supplier database model"""

    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, autoincrement=False)
    company_name = Column(String(40), nullable=True)

    products = relationship("Product", back_populates="supplier")

    def __repr__(self):
        return f"<Supplier(id={self.id}, company_name='{self.company_name}')>"


class Category(Base):
    """Category database model"""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(15), nullable=True)

    products = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"


class Product(Base):
    """Product database model"""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(40), nullable=True, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)

    supplier = relationship("Supplier", back_populates="products")
    category = relationship("Category", back_populates="products")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', supplier_id={self.supplier_id}, category_id={self.category_id})>"
