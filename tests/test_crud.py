from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from tableside.core.constants import OrderStatus, PaymentStatus, UserRole
from tableside.core.exceptions import ConstraintViolationError
from tableside.crud.menu_item import create_menu_item, get_menu_items
from tableside.crud.order import create_order, get_order
from tableside.crud.restaurant import get_restaurant
from tableside.crud.session import create_session
from tableside.crud.table import create_table, get_table_by_qr_code
from tableside.crud.user import create_user, get_user_by_username
from tableside.models.order import Order
from tableside.schemas import (
    MenuItemCreate,
    OrderCreate,
    OrderRead,
    SessionCreate,
    TableCreate,
    UserCreate,
)


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def test_user_role_defaults_to_customer(db):
    user = await create_user(db, UserCreate(username="asha", password="s3cret"))
    assert user.id is not None
    assert user.role == "customer"
    assert user.role in {r.value for r in UserRole}
    assert user.created_at is not None


async def test_duplicate_username_is_rejected(db):
    await create_user(db, UserCreate(username="asha", password="one"))
    with pytest.raises(ConstraintViolationError) as exc_info:
        await create_user(db, UserCreate(username="asha", password="two"))
    assert exc_info.value.table == "users"

    # the session stays usable after the rollback
    user = await get_user_by_username(db, "asha")
    assert user.password == "one"


async def test_restaurant_is_active_by_default(db, restaurant):
    loaded = await get_restaurant(db, restaurant.id)
    assert loaded.is_active is True
    assert loaded.description == "Street food"


async def test_table_gets_generated_qr_code(db, restaurant, dining_table):
    assert dining_table.qr_code.startswith(f"rst{restaurant.id}-t1-")
    assert dining_table.is_available is True
    assert (await get_table_by_qr_code(db, dining_table.qr_code)).id == dining_table.id


async def test_duplicate_qr_code_is_rejected(db, restaurant):
    await create_table(db, TableCreate(restaurant_id=restaurant.id, number=1, capacity=2), qr_code="QR-1")
    with pytest.raises(ConstraintViolationError) as exc_info:
        await create_table(
            db, TableCreate(restaurant_id=restaurant.id, number=2, capacity=2), qr_code="QR-1"
        )
    assert exc_info.value.table == "tables"


async def test_menu_item_price_round_trips_exactly(db, samosa):
    assert samosa.price == Decimal("2.50")
    assert samosa.is_available is True


async def test_menu_items_are_listed_by_category(db, restaurant, samosa):
    await create_menu_item(
        db,
        MenuItemCreate(restaurant_id=restaurant.id, name="Kulfi", price=Decimal("3.00"), category="desserts"),
    )
    items = await get_menu_items(db, restaurant.id)
    assert [i.name for i in items] == ["Kulfi", "Samosa"]


async def test_menu_item_for_missing_restaurant_is_rejected(db):
    with pytest.raises(ConstraintViolationError) as exc_info:
        await create_menu_item(
            db, MenuItemCreate(restaurant_id=999, name="Ghost", price=Decimal("1.00"), category="veg")
        )
    assert exc_info.value.table == "menu_items"


async def test_table_for_missing_restaurant_is_rejected(db):
    with pytest.raises(ConstraintViolationError):
        await create_table(db, TableCreate(restaurant_id=999, number=1, capacity=2))


def _order(restaurant_id, table_id, menu_item_id, **extra):
    return OrderCreate(
        restaurant_id=restaurant_id,
        table_id=table_id,
        items=[{"menuItemId": menu_item_id, "quantity": 2, "price": "2.50"}],
        total=Decimal("5.00"),
        **extra,
    )


async def test_order_status_defaults_to_pending(db, restaurant, dining_table, samosa):
    order = await create_order(db, _order(restaurant.id, dining_table.id, samosa.id, customer_name="Ravi"))
    assert order.status == "pending"
    assert order.payment_status == "pending"
    assert OrderStatus(order.status) is OrderStatus.pending
    assert PaymentStatus(order.payment_status) is PaymentStatus.pending
    assert order.customer_id is None
    assert order.total == Decimal("5.00")
    assert order.created_at is not None
    assert order.updated_at is not None


async def test_order_items_are_stored_as_line_snapshots(db, restaurant, dining_table, samosa):
    order = await create_order(db, _order(restaurant.id, dining_table.id, samosa.id))
    loaded = await get_order(db, order.id)
    assert loaded.items == [{"menuItemId": samosa.id, "quantity": 2, "price": "2.50"}]

    read = OrderRead.model_validate(loaded)
    assert read.items[0].price == Decimal("2.50")


async def test_order_written_outside_the_api_still_reads_back(db, restaurant, dining_table, samosa):
    row = Order(
        restaurant_id=restaurant.id,
        table_id=dining_table.id,
        items=[{"menuItemId": samosa.id, "quantity": 1, "price": 2.5, "note": "no onions"}],
        total=Decimal("2.50"),
        status="on-hold",
    )
    db.add(row)
    await db.commit()
    await db.refresh(row)

    read = OrderRead.model_validate(row)
    assert read.status == "on-hold"
    assert read.items[0].menu_item_id == samosa.id
    assert read.items[0].price == Decimal("2.5")


async def test_order_for_registered_customer(db, restaurant, dining_table, samosa):
    user = await create_user(db, UserCreate(username="ravi", password="pw"))
    order = await create_order(db, _order(restaurant.id, dining_table.id, samosa.id, customer_id=user.id))
    assert order.customer_id == user.id


async def test_order_for_missing_table_is_rejected(db, restaurant, samosa):
    with pytest.raises(ConstraintViolationError) as exc_info:
        await create_order(db, _order(restaurant.id, 999, samosa.id))
    assert exc_info.value.table == "orders"


async def test_order_for_missing_restaurant_is_rejected(db, dining_table, samosa):
    with pytest.raises(ConstraintViolationError):
        await create_order(db, _order(999, dining_table.id, samosa.id))


async def test_order_for_missing_customer_is_rejected(db, restaurant, dining_table, samosa):
    with pytest.raises(ConstraintViolationError):
        await create_order(db, _order(restaurant.id, dining_table.id, samosa.id, customer_id=999))


async def test_session_expires_after_ttl(db, dining_table):
    before = _utcnow()
    session = await create_session(
        db,
        SessionCreate(table_id=dining_table.id, customer_info={"name": "Ravi", "partySize": 3}),
        ttl_minutes=30,
    )
    assert session.is_active is True
    assert session.customer_info == {"name": "Ravi", "partySize": 3}
    assert before + timedelta(minutes=29) < session.expires_at < _utcnow() + timedelta(minutes=31)


async def test_session_for_missing_table_is_rejected(db):
    with pytest.raises(ConstraintViolationError) as exc_info:
        await create_session(db, SessionCreate(table_id=999))
    assert exc_info.value.table == "sessions"
