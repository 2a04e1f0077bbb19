"""Domain package."""

from .entities import Business, Delivery, GeoPoint, Ingredient, OpeningWindow, Order, Product, Size
from .value_objects import DeliveryStatus, OrderStatus, PaymentMethod, PriceUnit, Weekday

__all__ = [
    # Entities
    "Business",
    "OpeningWindow",
    "Ingredient",
    "Product",
    "Size",
    "Order",
    "Delivery",
    "GeoPoint",
    # Value Objects
    "PriceUnit",
    "PaymentMethod",
    "OrderStatus",
    "DeliveryStatus",
    "Weekday",
]
