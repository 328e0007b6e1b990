from datetime import datetime
from typing import Optional

from pydantic import Field, StrictInt

from tableside.schemas.base import Id, InsertSchema, ReadSchema


class TableCreate(InsertSchema):
    restaurant_id: Id
    number: StrictInt = Field(ge=1)
    capacity: StrictInt = Field(ge=1)


class TableRead(ReadSchema):
    id: int
    restaurant_id: int
    number: int
    capacity: int
    is_available: Optional[bool] = None
    qr_code: str
    created_at: Optional[datetime] = None
