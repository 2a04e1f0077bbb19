"""Shared pytest fixtures for storefront tests."""
from __future__ import annotations

from decimal import Decimal

import pytest

from storefront.core.config import Settings
from storefront.domain.entities import Business, Ingredient, Product, Size


@pytest.fixture()
def medium() -> Size:
    return Size(id="m", name="Media", price="35.90", max_flavors=2, description="25cm - 6 slices")


@pytest.fixture()
def large() -> Size:
    return Size(id="g", name="Grande", price="45.90", max_flavors=3, description="35cm - 8 slices")


@pytest.fixture()
def margherita() -> Product:
    return Product(
        id="p1",
        business_id="biz1",
        name="Margherita",
        price="0",
        allows_multiple_flavors=True,
        ingredients=[
            Ingredient(id="basil", name="Basil", default=True),
            Ingredient(id="olives", name="Olives", price="2.50"),
        ],
    )


@pytest.fixture()
def calabresa() -> Product:
    return Product(id="p3", business_id="biz1", name="Calabresa", price="0", allows_multiple_flavors=True)


@pytest.fixture()
def soda() -> Product:
    return Product(id="p2", business_id="biz1", name="Soda", price="12.00")


@pytest.fixture()
def business() -> Business:
    return Business(id="biz1", name="Pizzaria Bella", whatsapp="5511999999999")


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        currency="BRL",
        delivery_fee=Decimal("5.00"),
        money_decimals=2,
        log_level="INFO",
        strict_cart=True,
    )
