import pytest

from storefront.orders.domain.status import OrderStatus, can_transition, ensure_transition
from storefront.orders.exceptions import InvalidStatusTransitionException


@pytest.mark.parametrize(
    "current, requested",
    [
        (OrderStatus.PENDING, OrderStatus.PROCESSING),
        (OrderStatus.PENDING, OrderStatus.CANCELLED),
        (OrderStatus.PROCESSING, OrderStatus.COMPLETED),
        (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    ],
)
def test_allowed_transitions(current, requested):
    assert can_transition(current, requested)
    ensure_transition(current, requested)


@pytest.mark.parametrize(
    "current, requested",
    [
        (OrderStatus.PENDING, OrderStatus.COMPLETED),
        (OrderStatus.PENDING, OrderStatus.PENDING),
        (OrderStatus.PROCESSING, OrderStatus.PENDING),
        (OrderStatus.COMPLETED, OrderStatus.CANCELLED),
        (OrderStatus.CANCELLED, OrderStatus.PROCESSING),
    ],
)
def test_forbidden_transitions(current, requested):
    assert not can_transition(current, requested)
    with pytest.raises(InvalidStatusTransitionException) as exc_info:
        ensure_transition(current, requested)
    assert exc_info.value.current_status == current.value
    assert exc_info.value.requested_status == requested.value
    assert exc_info.value.message == f"Invalid status transition from {current.value} to {requested.value}"
