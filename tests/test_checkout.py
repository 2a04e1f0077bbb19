from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.core.exceptions import EmptyCartException, ValidationException
from storefront.domain.cart import AddToCart, CartState, SetBusiness, UpdateQuantity, apply_action
from storefront.domain.entities import Product
from storefront.domain.value_objects import OrderStatus, PaymentMethod
from storefront.services.checkout import CustomerInfo, build_order_draft


def _customer(**overrides) -> CustomerInfo:
    data = {
        "name": "Ana Souza",
        "phone": "(11) 98765-4321",
        "address": "Rua das Flores, 123",
    }
    data.update(overrides)
    return CustomerInfo(**data)


def _cart(medium, margherita, soda) -> CartState:
    state = CartState()
    for action in (
        SetBusiness("biz1"),
        AddToCart(products=(margherita,), size=medium),
        UpdateQuantity(0, 3),
        AddToCart(products=(soda,)),
    ):
        state = apply_action(state, action)
    return state


def test_draft_totals_include_delivery_fee(medium, margherita, soda) -> None:
    draft = build_order_draft(_cart(medium, margherita, soda), _customer(), Decimal("5.00"))
    assert draft.subtotal == Decimal("119.70")
    assert draft.delivery_fee == Decimal("5.00")
    assert draft.total == Decimal("124.70")
    assert draft.status == OrderStatus.PENDING
    assert [line.quantity for line in draft.lines] == [3, 1]
    assert draft.lines[0].line_total == Decimal("107.70")
    assert draft.lines[0].description == "Margherita Media"
    assert draft.lines[1].flavors == ["Soda"]


def test_phone_is_normalised_to_digits() -> None:
    assert _customer().phone == "11987654321"


def test_change_is_computed_for_cash(medium, margherita, soda) -> None:
    draft = build_order_draft(
        _cart(medium, margherita, soda), _customer(change_for="150"), Decimal("5.00")
    )
    assert draft.change == Decimal("25.30")


def test_change_must_cover_total(medium, margherita, soda) -> None:
    with pytest.raises(ValidationException):
        build_order_draft(_cart(medium, margherita, soda), _customer(change_for="100"), Decimal("5.00"))


def test_change_only_for_cash() -> None:
    with pytest.raises(ValidationError):
        _customer(payment_method=PaymentMethod.PIX, change_for="50")


def test_empty_cart_cannot_be_checked_out() -> None:
    with pytest.raises(EmptyCartException):
        build_order_draft(CartState(business_id="biz1"), _customer(), Decimal("5.00"))


def test_draft_amounts_are_rounded_to_money_decimals() -> None:
    state = CartState()
    for action in (
        SetBusiness("biz1"),
        AddToCart(products=(Product(id="px", business_id="biz1", name="Pastel", price="10.005"),)),
    ):
        state = apply_action(state, action)

    draft = build_order_draft(state, _customer(change_for="20.015"), Decimal("4.999"), decimals=2)

    assert draft.lines[0].line_total == Decimal("10.01")
    assert draft.subtotal == Decimal("10.01")
    assert draft.delivery_fee == Decimal("5.00")
    assert draft.total == Decimal("15.01")
    assert draft.total == draft.subtotal + draft.delivery_fee
    assert draft.change == Decimal("5.01")
    assert str(draft.total) == "15.01"


def test_draft_rounding_follows_decimals_argument(soda) -> None:
    state = apply_action(CartState(business_id="biz1"), AddToCart(products=(soda,)))
    draft = build_order_draft(state, _customer(), Decimal("4.60"), decimals=0)
    assert draft.subtotal == Decimal("12")
    assert draft.delivery_fee == Decimal("5")
    assert draft.total == Decimal("17")
