import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tableside.core.exceptions import ConstraintViolationError

log = logging.getLogger(__name__)


async def persist(db: AsyncSession, row):
    """Insert ``row`` and reload it so server defaults (id, created_at) are populated."""
    db.add(row)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        log.warning("insert rejected: table=%s error=%s", row.__tablename__, exc.orig)
        raise ConstraintViolationError(row.__tablename__, str(exc.orig)) from exc

    await db.refresh(row)
    log.info("insert: table=%s id=%s", row.__tablename__, row.id)
    return row
