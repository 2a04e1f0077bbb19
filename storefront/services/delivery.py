"""Driver assignment, pickup and geolocated delivery confirmation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable
from urllib.parse import quote

from storefront.core.exceptions import LocationRequiredException, TransitionException, ValidationException
from storefront.core.order_math import to_money
from storefront.domain.entities import Delivery, GeoPoint, Order
from storefront.domain.order_fsm import validate_delivery_transition, validate_order_transition
from storefront.domain.value_objects import DeliveryStatus, OrderStatus

logger = logging.getLogger(__name__)

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="


def change_order_status(order: Order, target: OrderStatus) -> Order:
    result = validate_order_transition(order.status, target)
    if not result.allowed:
        raise TransitionException(order.status.value, target.value, result.reason)
    logger.info("Order %s: %s -> %s", order.id, order.status.value, target.value)
    return order.model_copy(update={"status": target})


def change_delivery_status(delivery: Delivery, target: DeliveryStatus) -> Delivery:
    result = validate_delivery_transition(delivery.status, target)
    if not result.allowed:
        raise TransitionException(delivery.status.value, target.value, result.reason)
    logger.info("Delivery for order %s: %s -> %s", delivery.order_id, delivery.status.value, target.value)
    return delivery.model_copy(update={"status": target})


def maps_search_url(address: str, complement: str | None = None) -> str:
    query = f"{address}, {complement}" if complement else address
    return MAPS_SEARCH_URL + quote(query, safe="")


@dataclass(frozen=True, slots=True)
class DriverSummary:
    completed_today: int
    active: int
    earnings_today: Decimal


class DeliveryService:
    """Order-side steps of the delivery flow.

    Persistence belongs to the caller: every method returns updated copies
    and leaves its arguments unchanged.
    """

    def __init__(self, default_fee: Decimal = Decimal("5.00")):
        self.default_fee = to_money(default_fee)

    def start_preparing(self, order: Order) -> Order:
        return change_order_status(order, OrderStatus.PREPARING)

    def cancel(self, order: Order, delivery: Delivery | None = None) -> tuple[Order, Delivery | None]:
        cancelled = change_order_status(order, OrderStatus.CANCELLED)
        if delivery is not None and delivery.is_active:
            delivery = change_delivery_status(delivery, DeliveryStatus.CANCELLED)
        return cancelled, delivery

    def assign_driver(
        self, order: Order, driver_id: str, fee: Decimal | None = None
    ) -> tuple[Order, Delivery]:
        if not driver_id:
            raise ValidationException("Select a driver first")
        if order.status != OrderStatus.PREPARING:
            raise TransitionException(
                order.status.value,
                OrderStatus.DELIVERING.value,
                "Only orders being prepared can be sent for delivery.",
            )
        delivery = Delivery(
            order_id=order.id,
            driver_id=driver_id,
            status=DeliveryStatus.ASSIGNED,
            fee=self.default_fee if fee is None else to_money(fee),
        )
        return change_order_status(order, OrderStatus.DELIVERING), delivery

    def mark_picked_up(self, delivery: Delivery) -> Delivery:
        return change_delivery_status(delivery, DeliveryStatus.PICKED_UP)

    def confirm_delivery(
        self, order: Order, delivery: Delivery, location: GeoPoint | None
    ) -> tuple[Order, Delivery]:
        if location is None:
            raise LocationRequiredException()
        if delivery.order_id != order.id:
            raise ValidationException(f"Delivery belongs to order {delivery.order_id}, not {order.id}")
        completed = change_delivery_status(delivery, DeliveryStatus.COMPLETED)
        completed = completed.model_copy(update={"confirmed_at": location})
        return change_order_status(order, OrderStatus.DELIVERED), completed

    @staticmethod
    def driver_summary(deliveries: Iterable[Delivery], today: date) -> DriverSummary:
        completed_today = 0
        active = 0
        earnings = Decimal("0")
        for delivery in deliveries:
            if delivery.status == DeliveryStatus.CANCELLED:
                continue
            if delivery.status == DeliveryStatus.COMPLETED:
                if delivery.created_at is not None and delivery.created_at.date() >= today:
                    completed_today += 1
                    earnings += delivery.fee
            else:
                active += 1
        return DriverSummary(completed_today=completed_today, active=active, earnings_today=earnings)
