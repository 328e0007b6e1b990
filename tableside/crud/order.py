from sqlalchemy.ext.asyncio import AsyncSession

from tableside.crud.base import persist
from tableside.models.order import Order
from tableside.schemas.order import OrderCreate


async def create_order(db: AsyncSession, order: OrderCreate):
    """Place an order. status and payment_status start at their column defaults."""
    new_order = Order(
        customer_id=order.customer_id,
        restaurant_id=order.restaurant_id,
        table_id=order.table_id,
        # JSON mode keeps prices as exact decimal strings
        items=[line.model_dump(mode="json", by_alias=True) for line in order.items],
        total=order.total,
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
    )
    return await persist(db, new_order)


async def get_order(db: AsyncSession, order_id: int):
    return await db.get(Order, order_id)
