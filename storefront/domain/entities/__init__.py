"""Domain entities package."""

from .business import Business, OpeningWindow
from .order import Delivery, GeoPoint, Order
from .product import Ingredient, Product
from .size import Size

__all__ = [
    "Business",
    "OpeningWindow",
    "Order",
    "Delivery",
    "GeoPoint",
    "Ingredient",
    "Product",
    "Size",
]
