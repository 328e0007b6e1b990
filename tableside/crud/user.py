from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from tableside.crud.base import persist
from tableside.models.user import User
from tableside.schemas.user import UserCreate


async def create_user(db: AsyncSession, user: UserCreate):
    new_user = User(
        username=user.username,
        password=user.password,
        role=user.role,
    )
    return await persist(db, new_user)


async def get_user(db: AsyncSession, user_id: int):
    return await db.get(User, user_id)


async def get_user_by_username(db: AsyncSession, username: str):
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()
