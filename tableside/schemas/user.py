from datetime import datetime
from typing import Optional

from pydantic import Field

from tableside.core.constants import UserRole
from tableside.schemas.base import InsertSchema, Name, ReadSchema


class UserCreate(InsertSchema):
    username: Name
    password: str = Field(min_length=1)
    role: UserRole = UserRole.customer


class UserRead(ReadSchema):
    id: int
    username: str
    password: str = Field(exclude=True)  # read back from storage, never serialized
    role: str
    created_at: Optional[datetime] = None
