from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from tableside.core.config import settings
from tableside.crud.base import persist
from tableside.models.session import TableSession
from tableside.schemas.session import SessionCreate


async def create_session(db: AsyncSession, session: SessionCreate, ttl_minutes: int = None):
    ttl = settings.session_ttl_minutes if ttl_minutes is None else ttl_minutes
    customer_info = None
    if session.customer_info is not None:
        customer_info = session.customer_info.model_dump(mode="json", exclude_none=True)

    new_session = TableSession(
        table_id=session.table_id,
        customer_info=customer_info,
        expires_at=datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(minutes=ttl),
    )
    return await persist(db, new_session)


async def get_session(db: AsyncSession, session_id: int):
    return await db.get(TableSession, session_id)
