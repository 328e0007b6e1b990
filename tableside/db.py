from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from tableside.core.config import settings
from tableside.models.base import Base

_engine = None
_session_factory = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    engine = create_async_engine(url, echo=echo)
    # SQLite ignores REFERENCES unless asked per connection
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


# Reusable engine getter
def get_async_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is not set!")
        _engine = build_engine(settings.database_url, echo=settings.sql_echo)
    return _engine


def get_session_factory():
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(get_async_engine(), expire_on_commit=False)
    return _session_factory


# Dependency
async def get_db():
    async with get_session_factory()() as session:
        yield session


async def create_db_and_tables(engine: AsyncEngine = None):
    import tableside.models  # registers every table on Base.metadata

    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
