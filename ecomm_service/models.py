# ecomm_service/models.py

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .db import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    price = Column(Float, nullable=True)
    color = Column(String(255), nullable=True)

    # Deleting a product takes its order lines with it
    order_details = relationship(
        "OrderDetail", back_populates="product", cascade="all"
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price}, color='{self.color}')>"


class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    ship_addr = Column(Text, nullable=True)
    order_date = Column(DateTime(timezone=True), nullable=False)

    order_details = relationship(
        "OrderDetail", back_populates="order", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Order(id={self.order_id}, ship_addr='{self.ship_addr}', order_date={self.order_date})>"


class OrderDetail(Base):
    __tablename__ = "orderdetails"

    order_details_id = Column(
        Integer, primary_key=True, index=True, autoincrement=True
    )
    order_id = Column(
        Integer, ForeignKey("orders.order_id"), nullable=False, index=True
    )
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=0)
    # Unit (fraction or absolute amount) is left to the client
    discount = Column(Float, nullable=False, default=0.0)

    order = relationship("Order", back_populates="order_details")
    product = relationship("Product", back_populates="order_details")

    def __repr__(self):
        return f"<OrderDetail(id={self.order_details_id}, order_id={self.order_id}, product_id={self.product_id}, qty={self.quantity})>"
