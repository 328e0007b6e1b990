from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, Text, true
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tableside.models.base import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(Text, nullable=False)  # veg, non-veg, desserts
    image = Column(Text, nullable=True)
    is_available = Column(Boolean, default=True, server_default=true())
    created_at = Column(DateTime, server_default=func.now())

    restaurant = relationship("Restaurant", back_populates="menu_items")
