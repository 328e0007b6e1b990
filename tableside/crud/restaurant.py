from sqlalchemy.ext.asyncio import AsyncSession

from tableside.crud.base import persist
from tableside.models.restaurant import Restaurant
from tableside.schemas.restaurant import RestaurantCreate


async def create_restaurant(db: AsyncSession, restaurant: RestaurantCreate):
    new_restaurant = Restaurant(
        name=restaurant.name,
        description=restaurant.description,
    )
    return await persist(db, new_restaurant)


async def get_restaurant(db: AsyncSession, restaurant_id: int):
    return await db.get(Restaurant, restaurant_id)
