"""Custom exceptions for the storefront."""
from __future__ import annotations


class StorefrontException(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class ConfigurationException(StorefrontException):
    """Configuration errors."""

    pass


class ValidationException(StorefrontException):
    """Input validation errors."""

    pass


class CartException(ValidationException):
    """Rejected cart action."""

    pass


class IndexOutOfRange(CartException):
    """Cart line index does not address an existing item."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Cart index {index} is out of range for {size} item(s)")
        self.index = index
        self.size = size


class InvalidQuantity(CartException):
    """Quantity below the minimum of one."""

    def __init__(self, quantity: object) -> None:
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}")
        self.quantity = quantity


class EmptyCartException(CartException):
    """Checkout attempted with nothing in the cart."""

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class TooManyFlavors(ValidationException):
    """More flavors than the selected size allows."""

    def __init__(self, max_flavors: int) -> None:
        super().__init__(f"Selected size allows at most {max_flavors} flavor(s)")
        self.max_flavors = max_flavors


class BusinessClosedException(ValidationException):
    """Business is outside its opening hours."""

    def __init__(self, business_id: str) -> None:
        super().__init__(f"Business {business_id} is closed")
        self.business_id = business_id


class TransitionException(StorefrontException):
    """Order or delivery status change that the lifecycle forbids."""

    def __init__(self, current: str | None, target: str, reason: str | None = None) -> None:
        super().__init__(reason or f"Transition '{current} -> {target}' is not allowed")
        self.current = current
        self.target = target


class LocationRequiredException(StorefrontException):
    """Delivery confirmation without a validated driver location."""

    def __init__(self) -> None:
        super().__init__("Driver location must be validated before confirming delivery")
