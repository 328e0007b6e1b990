from sqlalchemy import Column, DateTime, Integer, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tableside.core.constants import UserRole
from tableside.models.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=False)
    role = Column(Text, nullable=False, default=UserRole.customer.value, server_default=UserRole.customer.value)
    created_at = Column(DateTime, server_default=func.now())

    orders = relationship("Order", back_populates="customer")
