from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from tableside.crud.base import persist
from tableside.models.menu_item import MenuItem
from tableside.schemas.menu_item import MenuItemCreate


async def create_menu_item(db: AsyncSession, item: MenuItemCreate):
    new_item = MenuItem(
        restaurant_id=item.restaurant_id,
        name=item.name,
        description=item.description,
        price=item.price,
        category=item.category,
        image=item.image,
        is_available=item.is_available,
    )
    return await persist(db, new_item)


async def get_menu_item(db: AsyncSession, item_id: int):
    return await db.get(MenuItem, item_id)


async def get_menu_items(db: AsyncSession, restaurant_id: int):
    """All menu items for a restaurant, grouped by category then name."""
    result = await db.execute(
        select(MenuItem)
        .where(MenuItem.restaurant_id == restaurant_id)
        .order_by(MenuItem.category, MenuItem.name)
    )
    return result.scalars().all()
