"""Value Objects for domain model."""
from __future__ import annotations

from enum import Enum


class PriceUnit(str, Enum):
    """Unit a product price refers to."""

    UNIT = "unit"
    KG = "kg"
    G = "g"
    L = "l"
    ML = "ml"


class PaymentMethod(str, Enum):
    """Payment methods offered at checkout."""

    CASH = "cash"
    CARD = "card"
    PIX = "pix"


class OrderStatus(str, Enum):
    """Order lifecycle as seen by the business admin."""

    PENDING = "pending"
    PREPARING = "preparing"
    DELIVERING = "delivering"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class DeliveryStatus(str, Enum):
    """Delivery lifecycle as seen by the driver."""

    ASSIGNED = "assigned"
    PICKED_UP = "picked_up"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Weekday(str, Enum):
    """Days of the week, Monday first to match datetime.weekday()."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_date(cls, value) -> Weekday:
        return list(cls)[value.weekday()]
