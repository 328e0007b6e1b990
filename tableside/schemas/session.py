from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from tableside.schemas.base import Id, InsertSchema, ReadSchema


class CustomerInfo(InsertSchema):
    # name and phone are known; anything else the front end collects rides along
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    phone: Optional[str] = None


class SessionCreate(InsertSchema):
    table_id: Id
    customer_info: Optional[CustomerInfo] = None


class SessionRead(ReadSchema):
    id: int
    table_id: int
    is_active: Optional[bool] = None
    customer_info: Optional[CustomerInfo] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
