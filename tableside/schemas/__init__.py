from .base import InsertSchema, ReadSchema, validate_insert
from .user import UserCreate, UserRead
from .restaurant import RestaurantCreate, RestaurantRead
from .menu_item import MenuItemCreate, MenuItemRead
from .table import TableCreate, TableRead
from .order import OrderCreate, OrderLineItem, OrderLineItemRead, OrderRead
from .session import CustomerInfo, SessionCreate, SessionRead
