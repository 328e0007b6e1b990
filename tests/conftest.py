from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker

from tableside.crud.menu_item import create_menu_item
from tableside.crud.restaurant import create_restaurant
from tableside.crud.table import create_table
from tableside.db import build_engine, create_db_and_tables, get_db
from tableside.schemas import MenuItemCreate, RestaurantCreate, TableCreate


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'tableside.db'}")
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    from tableside.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def restaurant(db):
    return await create_restaurant(db, RestaurantCreate(name="Chai Corner", description="Street food"))


@pytest_asyncio.fixture
async def dining_table(db, restaurant):
    return await create_table(db, TableCreate(restaurant_id=restaurant.id, number=1, capacity=4))


@pytest_asyncio.fixture
async def samosa(db, restaurant):
    return await create_menu_item(
        db,
        MenuItemCreate(restaurant_id=restaurant.id, name="Samosa", price=Decimal("2.50"), category="veg"),
    )
