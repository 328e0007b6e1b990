# scripts/seed_demo.py

import argparse
import asyncio
from decimal import Decimal

from sqlalchemy.future import select

from tableside.crud.menu_item import create_menu_item
from tableside.crud.restaurant import create_restaurant
from tableside.crud.table import create_table
from tableside.crud.user import create_user, get_user_by_username
from tableside.db import get_session_factory
from tableside.models.restaurant import Restaurant
from tableside.schemas import MenuItemCreate, RestaurantCreate, TableCreate, UserCreate

# 🎯 DEMO DATA
STAFF_TO_SEED = [
    {"username": "admin", "password": "admin", "role": "admin"},
    {"username": "kitchen", "password": "kitchen", "role": "kitchen"},
]

MENU_TO_SEED = [
    {"name": "Paneer Tikka", "price": Decimal("8.50"), "category": "veg"},
    {"name": "Dal Makhani", "price": Decimal("7.25"), "category": "veg"},
    {"name": "Butter Chicken", "price": Decimal("11.00"), "category": "non-veg"},
    {"name": "Gulab Jamun", "price": Decimal("4.00"), "category": "desserts"},
]


async def seed(restaurant_name: str, table_count: int):
    async with get_session_factory()() as db:
        # 🔁 Step 1: Staff accounts
        for data in STAFF_TO_SEED:
            if await get_user_by_username(db, data["username"]):
                print(f"⚠️  User '{data['username']}' already exists. Skipping.")
                continue
            user = await create_user(db, UserCreate(**data))
            print(f"✅ Created: {user.username} ({user.role})")

        # 🔁 Step 2: Restaurant
        result = await db.execute(select(Restaurant).where(Restaurant.name == restaurant_name))
        restaurant = result.scalars().first()
        if restaurant:
            print(f"⚠️  Restaurant '{restaurant_name}' already exists. Nothing else to seed.")
            return
        restaurant = await create_restaurant(db, RestaurantCreate(name=restaurant_name))
        print(f"🏢 Created restaurant: {restaurant.name}")

        # 🔁 Step 3: Menu + tables
        for data in MENU_TO_SEED:
            await create_menu_item(db, MenuItemCreate(restaurant_id=restaurant.id, **data))
        print(f"🍽️  Added {len(MENU_TO_SEED)} menu items")

        for number in range(1, table_count + 1):
            table = await create_table(
                db, TableCreate(restaurant_id=restaurant.id, number=number, capacity=4)
            )
            print(f"🪑 Table {table.number}: {table.qr_code}")

        print("✅ Done seeding.\n")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed a demo restaurant")
    parser.add_argument("--name", type=str, default="Demo Kitchen", help="Restaurant name")
    parser.add_argument("--tables", type=int, default=6, help="Number of tables to create")

    args = parser.parse_args()
    asyncio.run(seed(args.name, args.tables))


### Usage
#python -m scripts.seed_demo
#python -m scripts.seed_demo --name "Chai Corner" --tables 10
