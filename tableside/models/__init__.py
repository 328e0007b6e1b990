from .base import Base
from .user import User
from .restaurant import Restaurant
from .menu_item import MenuItem
from .table import Table
from .order import Order
from .session import TableSession
