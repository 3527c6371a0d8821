"""
Fixed payloads served by the API.

Everything here is built once at import time and never changes.
"""
from typing import Tuple

from hello_api.models.schemas.common import Greeting, HealthStatus
from hello_api.models.schemas.order import Order
from hello_api.models.schemas.user import User


ROOT_GREETING = Greeting(message="Hello Express + TypeScript!")
HELLO_GREETING = Greeting(message="Hello from Express API!")
HEALTH_UP = HealthStatus(status="UP")

USERS: Tuple[User, ...] = (
    User(id=1, name="My name is Gotjitag E3 Mak Mak"),
    User(id=2, name="My name is Kritchanat T."),
)

ORDERS: Tuple[Order, ...] = (
    Order(id=1, user_id=1, product_id=2, quantity=1),
    Order(id=2, user_id=2, product_id=3, quantity=2),
    Order(id=3, user_id=1, product_id=1, quantity=1),
    Order(id=4, user_id=2, product_id=4, quantity=1),
)


def get_users() -> Tuple[User, ...]:
    return USERS


def get_orders() -> Tuple[Order, ...]:
    return ORDERS
