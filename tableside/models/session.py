from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, true
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tableside.models.base import Base, JSONType


class TableSession(Base):
    """A diner's visit to a table, opened by scanning its QR code.

    Named TableSession so it never shadows SQLAlchemy's own Session.
    """

    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True)
    table_id = Column(Integer, ForeignKey("tables.id"), nullable=False)
    is_active = Column(Boolean, default=True, server_default=true())
    customer_info = Column(JSONType, nullable=True)  # {"name", "phone", ...}
    created_at = Column(DateTime, server_default=func.now())
    expires_at = Column(DateTime, nullable=True)

    table = relationship("Table", back_populates="sessions")
