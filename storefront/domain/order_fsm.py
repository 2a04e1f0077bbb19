"""Order and delivery status transition rules (single source of truth)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from storefront.domain.value_objects import DeliveryStatus, OrderStatus

ALLOWED_ORDER_TRANSITIONS: Mapping[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.DELIVERING, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERING: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

ALLOWED_DELIVERY_TRANSITIONS: Mapping[DeliveryStatus, frozenset[DeliveryStatus]] = {
    DeliveryStatus.ASSIGNED: frozenset({DeliveryStatus.PICKED_UP, DeliveryStatus.CANCELLED}),
    DeliveryStatus.PICKED_UP: frozenset({DeliveryStatus.COMPLETED, DeliveryStatus.CANCELLED}),
    DeliveryStatus.COMPLETED: frozenset(),
    DeliveryStatus.CANCELLED: frozenset(),
}

TERMINAL_ORDER_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})
TERMINAL_DELIVERY_STATUSES = frozenset({DeliveryStatus.COMPLETED, DeliveryStatus.CANCELLED})


@dataclass(frozen=True, slots=True)
class TransitionValidationResult:
    allowed: bool
    reason: str | None = None


def _coerce(enum_cls, value):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None


def _validate(enum_cls, matrix, terminal, current_status, target_status) -> TransitionValidationResult:
    if not target_status:
        return TransitionValidationResult(False, "Target status is missing.")

    target = _coerce(enum_cls, target_status)
    if target is None:
        return TransitionValidationResult(False, f"Unsupported status: {target_status}")

    current = _coerce(enum_cls, current_status)
    if current_status is not None and current is None:
        return TransitionValidationResult(False, f"Unsupported current status: {current_status}")

    if current is None or current == target:
        return TransitionValidationResult(True)

    if current in terminal:
        return TransitionValidationResult(False, f"Status '{current.value}' is terminal.")

    if target not in matrix[current]:
        return TransitionValidationResult(
            False,
            f"Transition '{current.value} -> {target.value}' is not allowed.",
        )

    return TransitionValidationResult(True)


def validate_order_transition(
    current_status: OrderStatus | str | None,
    target_status: OrderStatus | str,
) -> TransitionValidationResult:
    return _validate(
        OrderStatus, ALLOWED_ORDER_TRANSITIONS, TERMINAL_ORDER_STATUSES, current_status, target_status
    )


def validate_delivery_transition(
    current_status: DeliveryStatus | str | None,
    target_status: DeliveryStatus | str,
) -> TransitionValidationResult:
    return _validate(
        DeliveryStatus,
        ALLOWED_DELIVERY_TRANSITIONS,
        TERMINAL_DELIVERY_STATUSES,
        current_status,
        target_status,
    )
