from enum import Enum

from storefront.orders.config import ORDER_STATUS_TRANSITIONS
from storefront.orders.exceptions import InvalidStatusTransitionException


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    return requested.value in ORDER_STATUS_TRANSITIONS.get(current.value, [])


def ensure_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """Lève InvalidStatusTransitionException si la transition est interdite."""
    if not can_transition(current, requested):
        raise InvalidStatusTransitionException(current.value, requested.value)
