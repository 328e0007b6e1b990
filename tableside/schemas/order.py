from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, StrictInt

from tableside.schemas.base import Id, InsertSchema, Money, ReadSchema


class OrderLineItem(InsertSchema):
    """One cart line, priced at the moment the order was placed."""

    menu_item_id: Id
    quantity: StrictInt = Field(ge=1)
    price: Money


class OrderCreate(InsertSchema):
    customer_id: Optional[Id] = None
    restaurant_id: Id
    table_id: Id
    items: List[OrderLineItem] = Field(min_length=1)
    total: Money
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None


class OrderLineItemRead(ReadSchema):
    # lenient: lines written by other tools may carry extra keys or odd prices
    menu_item_id: int
    quantity: int
    price: Decimal


class OrderRead(ReadSchema):
    id: int
    customer_id: Optional[int] = None
    restaurant_id: int
    table_id: int
    items: List[OrderLineItemRead]
    total: Decimal
    status: str
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    payment_status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
