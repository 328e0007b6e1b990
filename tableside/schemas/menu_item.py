from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import StrictBool

from tableside.core.constants import MenuCategory
from tableside.schemas.base import Id, InsertSchema, Money, Name, ReadSchema


class MenuItemCreate(InsertSchema):
    restaurant_id: Id
    name: Name
    description: Optional[str] = None
    price: Money
    category: MenuCategory
    image: Optional[str] = None
    is_available: StrictBool = True


class MenuItemRead(ReadSchema):
    id: int
    restaurant_id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    category: str
    image: Optional[str] = None
    is_available: Optional[bool] = None
    created_at: Optional[datetime] = None
