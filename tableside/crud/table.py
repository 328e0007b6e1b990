import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from tableside.crud.base import persist
from tableside.models.table import Table
from tableside.schemas.table import TableCreate


def generate_qr_code(restaurant_id: int, number: int) -> str:
    return f"rst{restaurant_id}-t{number}-{uuid.uuid4().hex[:12]}"


async def create_table(db: AsyncSession, table: TableCreate, qr_code: Optional[str] = None):
    # qr_code is server-managed; callers only pass one when re-printing a known code
    new_table = Table(
        restaurant_id=table.restaurant_id,
        number=table.number,
        capacity=table.capacity,
        qr_code=qr_code or generate_qr_code(table.restaurant_id, table.number),
    )
    return await persist(db, new_table)


async def get_table(db: AsyncSession, table_id: int):
    return await db.get(Table, table_id)


async def get_table_by_qr_code(db: AsyncSession, qr_code: str):
    result = await db.execute(select(Table).where(Table.qr_code == qr_code))
    return result.scalar_one_or_none()
