"""Environment-driven configuration objects for the storefront."""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv

from storefront.core.exceptions import ConfigurationException


def _str_to_bool(value: str | None, default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"true", "1", "yes", "y"}


def _get_decimal(key: str, default: str) -> Decimal:
    raw = os.getenv(key, default).strip() or default
    try:
        value = Decimal(raw.replace(",", "."))
    except InvalidOperation as exc:
        raise ConfigurationException(f"{key} must be a decimal number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationException(f"{key} must not be negative")
    return value


def _get_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationException(f"{key} must be an integer, got {raw!r}") from exc


@dataclass(slots=True)
class Settings:
    currency: str
    delivery_fee: Decimal
    money_decimals: int
    log_level: str
    strict_cart: bool


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    decimals = _get_int("STOREFRONT_MONEY_DECIMALS", 2)
    if decimals < 0:
        raise ConfigurationException("STOREFRONT_MONEY_DECIMALS must not be negative")

    return Settings(
        currency=(os.getenv("STOREFRONT_CURRENCY") or "BRL").strip().upper(),
        delivery_fee=_get_decimal("STOREFRONT_DELIVERY_FEE", "5.00"),
        money_decimals=decimals,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        strict_cart=_str_to_bool(os.getenv("STOREFRONT_STRICT_CART"), default=True),
    )
