from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tableside.core.constants import OrderStatus, PaymentStatus
from tableside.models.base import Base, JSONType


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # walk-in orders have no account
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False)
    table_id = Column(Integer, ForeignKey("tables.id"), nullable=False)

    # Snapshot of the cart: [{"menuItemId", "quantity", "price"}]
    items = Column(JSONType, nullable=False)
    total = Column(Numeric(10, 2), nullable=False)

    status = Column(Text, nullable=False, default=OrderStatus.pending.value, server_default=OrderStatus.pending.value)
    customer_name = Column(Text, nullable=True)
    customer_phone = Column(Text, nullable=True)
    payment_status = Column(Text, default=PaymentStatus.pending.value, server_default=PaymentStatus.pending.value)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("User", back_populates="orders")
    restaurant = relationship("Restaurant", back_populates="orders")
    table = relationship("Table", back_populates="orders")
