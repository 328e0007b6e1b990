from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from tableside.crud import menu_item, order, restaurant, session, table, user
from tableside.db import get_db
from tableside.schemas import (
    MenuItemCreate,
    MenuItemRead,
    OrderCreate,
    OrderRead,
    RestaurantCreate,
    RestaurantRead,
    SessionCreate,
    SessionRead,
    TableCreate,
    TableRead,
    UserCreate,
    UserRead,
)

router = APIRouter()


def _found(row, label: str):
    if not row:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row


# -----------------------
# Users
# -----------------------

@router.post("/users", response_model=UserRead, status_code=201, tags=["users"])
async def create_user(payload: UserCreate, db: AsyncSession = Depends(get_db)):
    return await user.create_user(db, payload)


@router.get("/users/{user_id}", response_model=UserRead, tags=["users"])
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return _found(await user.get_user(db, user_id), "User")


# -----------------------
# Restaurants & menu
# -----------------------

@router.post("/restaurants", response_model=RestaurantRead, status_code=201, tags=["restaurants"])
async def create_restaurant(payload: RestaurantCreate, db: AsyncSession = Depends(get_db)):
    return await restaurant.create_restaurant(db, payload)


@router.get("/restaurants/{restaurant_id}", response_model=RestaurantRead, tags=["restaurants"])
async def get_restaurant(restaurant_id: int, db: AsyncSession = Depends(get_db)):
    return _found(await restaurant.get_restaurant(db, restaurant_id), "Restaurant")


@router.get("/restaurants/{restaurant_id}/menu-items", response_model=List[MenuItemRead], tags=["menu"])
async def list_menu_items(restaurant_id: int, db: AsyncSession = Depends(get_db)):
    _found(await restaurant.get_restaurant(db, restaurant_id), "Restaurant")
    return await menu_item.get_menu_items(db, restaurant_id)


@router.post("/menu-items", response_model=MenuItemRead, status_code=201, tags=["menu"])
async def create_menu_item(payload: MenuItemCreate, db: AsyncSession = Depends(get_db)):
    return await menu_item.create_menu_item(db, payload)


@router.get("/menu-items/{item_id}", response_model=MenuItemRead, tags=["menu"])
async def get_menu_item(item_id: int, db: AsyncSession = Depends(get_db)):
    return _found(await menu_item.get_menu_item(db, item_id), "Menu item")


# -----------------------
# Tables & sessions
# -----------------------

@router.post("/tables", response_model=TableRead, status_code=201, tags=["tables"])
async def create_table(payload: TableCreate, db: AsyncSession = Depends(get_db)):
    return await table.create_table(db, payload)


@router.get("/tables/{table_id}", response_model=TableRead, tags=["tables"])
async def get_table(table_id: int, db: AsyncSession = Depends(get_db)):
    return _found(await table.get_table(db, table_id), "Table")


@router.post("/sessions", response_model=SessionRead, status_code=201, tags=["sessions"])
async def create_session(payload: SessionCreate, db: AsyncSession = Depends(get_db)):
    return await session.create_session(db, payload)


@router.get("/sessions/{session_id}", response_model=SessionRead, tags=["sessions"])
async def get_session(session_id: int, db: AsyncSession = Depends(get_db)):
    return _found(await session.get_session(db, session_id), "Session")


# -----------------------
# Orders
# -----------------------

@router.post("/orders", response_model=OrderRead, status_code=201, tags=["orders"])
async def create_order(payload: OrderCreate, db: AsyncSession = Depends(get_db)):
    return await order.create_order(db, payload)


@router.get("/orders/{order_id}", response_model=OrderRead, tags=["orders"])
async def get_order(order_id: int, db: AsyncSession = Depends(get_db)):
    return _found(await order.get_order(db, order_id), "Order")
