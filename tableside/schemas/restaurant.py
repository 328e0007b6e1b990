from datetime import datetime
from typing import Optional

from tableside.schemas.base import InsertSchema, Name, ReadSchema


class RestaurantCreate(InsertSchema):
    name: Name
    description: Optional[str] = None


class RestaurantRead(ReadSchema):
    id: int
    name: str
    description: Optional[str] = None
    is_active: Optional[bool] = None
    created_at: Optional[datetime] = None
