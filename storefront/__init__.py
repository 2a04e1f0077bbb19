"""Multi-tenant food-delivery storefront: cart engine and order-side helpers."""

__version__ = "0.1.0"
