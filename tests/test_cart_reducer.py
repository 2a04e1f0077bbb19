from __future__ import annotations

from decimal import Decimal

import pytest

from storefront.core.exceptions import IndexOutOfRange, InvalidQuantity, ValidationException
from storefront.domain.cart import (
    EMPTY_CART,
    AddToCart,
    CartState,
    ClearCart,
    RemoveFromCart,
    SetBusiness,
    SimpleItem,
    SizedComboItem,
    UpdateQuantity,
    apply_action,
    cart_total,
    item_price,
)


def _run(state: CartState, *actions) -> CartState:
    for action in actions:
        state = apply_action(state, action)
    return state


def test_walkthrough_from_empty_cart_to_business_switch(medium, margherita, soda) -> None:
    state = apply_action(EMPTY_CART, SetBusiness("biz1"))
    assert state == CartState(business_id="biz1", items=(), total=Decimal("0"))

    state = apply_action(state, AddToCart(products=(margherita,), size=medium))
    assert len(state.items) == 1
    assert state.items[0].quantity == 1
    assert state.total == Decimal("35.90")

    state = apply_action(state, UpdateQuantity(0, 3))
    assert state.items[0].quantity == 3
    assert state.total == Decimal("107.70")

    state = apply_action(state, AddToCart(products=(soda,)))
    assert len(state.items) == 2
    assert state.total == Decimal("119.70")

    state = apply_action(state, RemoveFromCart(0))
    assert [item.products[0].id for item in state.items] == ["p2"]
    assert state.total == Decimal("12.00")

    state = apply_action(state, SetBusiness("biz2"))
    assert state == CartState(business_id="biz2", items=(), total=Decimal("0"))


def test_total_matches_recomputation_after_every_add(medium, large, margherita, calabresa, soda) -> None:
    actions = [
        AddToCart(products=(margherita,), size=medium),
        AddToCart(products=(soda,)),
        AddToCart(products=(margherita, calabresa), size=large),
        AddToCart(products=(soda,)),
    ]
    state = apply_action(EMPTY_CART, SetBusiness("biz1"))
    for action in actions:
        state = apply_action(state, action)
        assert state.total == cart_total(state.items)
        assert state.total == sum((item_price(item) for item in state.items), Decimal("0"))


def test_remove_does_not_drift_from_full_recomputation(medium, margherita, soda) -> None:
    state = _run(
        EMPTY_CART,
        SetBusiness("biz1"),
        AddToCart(products=(margherita,), size=medium),
        AddToCart(products=(soda,)),
        UpdateQuantity(1, 4),
        AddToCart(products=(margherita,), size=medium),
    )
    state = apply_action(state, RemoveFromCart(1))
    assert state.total == cart_total(state.items) == Decimal("71.80")


def test_identical_items_are_not_merged(soda) -> None:
    state = _run(EMPTY_CART, AddToCart(products=(soda,)), AddToCart(products=(soda,)))
    assert len(state.items) == 2
    assert [item.quantity for item in state.items] == [1, 1]


def test_switching_to_other_business_discards_items(soda) -> None:
    state = _run(EMPTY_CART, SetBusiness("A"), AddToCart(products=(soda,)))
    state = apply_action(state, SetBusiness("B"))
    assert state.items == ()
    assert state.total == 0
    assert state.business_id == "B"


def test_setting_same_business_keeps_items(soda) -> None:
    state = _run(EMPTY_CART, SetBusiness("A"), AddToCart(products=(soda,)))
    again = apply_action(state, SetBusiness("A"))
    assert again.items == state.items
    assert again.total == state.total


def test_first_business_binding_keeps_items_added_before_it(soda) -> None:
    state = _run(EMPTY_CART, AddToCart(products=(soda,)), SetBusiness("A"))
    assert len(state.items) == 1
    assert state.business_id == "A"


def test_clear_cart_is_idempotent_and_keeps_business(medium, margherita) -> None:
    state = _run(EMPTY_CART, SetBusiness("biz1"), AddToCart(products=(margherita,), size=medium))
    once = apply_action(state, ClearCart())
    twice = apply_action(once, ClearCart())
    assert once == twice == CartState(business_id="biz1")


def test_sized_item_price_ignores_product_prices(large, margherita, soda) -> None:
    state = apply_action(EMPTY_CART, AddToCart(products=(soda, margherita), size=large))
    assert isinstance(state.items[0], SizedComboItem)
    assert state.total == Decimal("45.90")


def test_unsized_item_is_simple_and_priced_by_its_product(soda) -> None:
    state = apply_action(EMPTY_CART, AddToCart(products=(soda,)))
    item = state.items[0]
    assert isinstance(item, SimpleItem)
    assert item.size is None
    assert item.products == (soda,)
    assert item_price(item) == Decimal("12.00")


def test_add_requires_products_and_size_for_combos(margherita, soda) -> None:
    with pytest.raises(ValidationException):
        AddToCart(products=())
    with pytest.raises(ValidationException):
        AddToCart(products=(margherita, soda))


def test_previous_state_is_left_untouched(soda) -> None:
    before = apply_action(EMPTY_CART, AddToCart(products=(soda,)))
    after = apply_action(before, UpdateQuantity(0, 5))
    assert before.items[0].quantity == 1
    assert before.total == Decimal("12.00")
    assert after.total == Decimal("60.00")


@pytest.mark.parametrize("index", [-1, 1, 7])
def test_out_of_range_index_is_rejected(soda, index) -> None:
    state = apply_action(EMPTY_CART, AddToCart(products=(soda,)))
    with pytest.raises(IndexOutOfRange) as exc_info:
        apply_action(state, RemoveFromCart(index))
    assert exc_info.value.size == 1
    with pytest.raises(IndexOutOfRange):
        apply_action(state, UpdateQuantity(index, 2))


@pytest.mark.parametrize("quantity", [0, -3, True, 1.5])
def test_quantity_below_one_is_rejected(soda, quantity) -> None:
    state = apply_action(EMPTY_CART, AddToCart(products=(soda,)))
    with pytest.raises(InvalidQuantity):
        apply_action(state, UpdateQuantity(0, quantity))


def test_unknown_action_type_raises(soda) -> None:
    with pytest.raises(TypeError):
        apply_action(EMPTY_CART, object())
