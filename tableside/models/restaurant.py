from sqlalchemy import Boolean, Column, DateTime, Integer, Text, true
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tableside.models.base import Base


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, server_default=true())
    created_at = Column(DateTime, server_default=func.now())

    menu_items = relationship("MenuItem", back_populates="restaurant")
    tables = relationship("Table", back_populates="restaurant")
    orders = relationship("Order", back_populates="restaurant")
