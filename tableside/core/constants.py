from enum import Enum

# Value sets for the text columns that behave like enums. Storage keeps them
# as plain text; the insert schemas check them.


class UserRole(str, Enum):
    customer = "customer"
    kitchen = "kitchen"
    admin = "admin"


class MenuCategory(str, Enum):
    veg = "veg"
    non_veg = "non-veg"
    desserts = "desserts"


class OrderStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cooking = "cooking"
    ready = "ready"
    served = "served"
    completed = "completed"


class PaymentStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    failed = "failed"
