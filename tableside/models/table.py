from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text, true
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tableside.models.base import Base


class Table(Base):
    """A physical dining table, addressed by the QR code printed on it."""

    __tablename__ = "tables"

    id = Column(Integer, primary_key=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False)
    number = Column(Integer, nullable=False)
    capacity = Column(Integer, nullable=False)
    is_available = Column(Boolean, default=True, server_default=true())
    qr_code = Column(Text, nullable=False, unique=True)
    created_at = Column(DateTime, server_default=func.now())

    restaurant = relationship("Restaurant", back_populates="tables")
    orders = relationship("Order", back_populates="table")
    sessions = relationship("TableSession", back_populates="table")
