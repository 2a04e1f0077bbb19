"""Cart state, actions and the reducer that applies them.

A cart is bound to at most one business. Every action produces a new
``CartState``; the previous state object is never modified, so callers may
keep references to old states without them changing underneath.

Pricing has a single rule (``item_price``): a sized item costs the size's
flat price, an unsized item costs its product's price, and both are
multiplied by the line quantity. Ingredient toggles and notes travel with the
line but never change its price.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Sequence, Union

from storefront.core.exceptions import IndexOutOfRange, InvalidQuantity, ValidationException
from storefront.core.order_math import calc_items_total, calc_line_total
from storefront.domain.entities import Product, Size


@dataclass(frozen=True, slots=True)
class FlavorChoice:
    """Ingredient selection for one product of a cart line."""

    product_id: str
    name: str
    included_ingredient_ids: frozenset[str] = frozenset()

    @classmethod
    def from_product(cls, product: Product) -> FlavorChoice:
        return cls(
            product_id=product.id,
            name=product.name,
            included_ingredient_ids=product.default_ingredient_ids(),
        )


@dataclass(frozen=True, slots=True)
class SimpleItem:
    """Single product sold by its own price."""

    product: Product
    quantity: int = 1
    flavors: tuple[FlavorChoice, ...] = ()
    notes: str = ""

    @property
    def size(self) -> None:
        return None

    @property
    def products(self) -> tuple[Product, ...]:
        return (self.product,)

    @property
    def unit_price(self) -> Decimal:
        return self.product.price


@dataclass(frozen=True, slots=True)
class SizedComboItem:
    """One or more flavors sharing a size and its flat price."""

    size: Size
    products: tuple[Product, ...]
    quantity: int = 1
    flavors: tuple[FlavorChoice, ...] = ()
    notes: str = ""

    @property
    def unit_price(self) -> Decimal:
        return self.size.price


CartItem = Union[SimpleItem, SizedComboItem]


@dataclass(frozen=True, slots=True)
class CartState:
    business_id: str | None = None
    items: tuple[CartItem, ...] = ()
    total: Decimal = Decimal("0")

    @property
    def is_empty(self) -> bool:
        return not self.items


EMPTY_CART = CartState()


# Actions


@dataclass(frozen=True, slots=True)
class SetBusiness:
    business_id: str


@dataclass(frozen=True, slots=True)
class AddToCart:
    """Append a new line with quantity 1.

    ``size`` is None for products sold on their own; only sized lines may
    carry more than one product.
    """

    products: tuple[Product, ...]
    size: Size | None = None
    flavors: tuple[FlavorChoice, ...] = ()
    notes: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.products, tuple):
            object.__setattr__(self, "products", tuple(self.products))
        if not isinstance(self.flavors, tuple):
            object.__setattr__(self, "flavors", tuple(self.flavors))
        if not self.products:
            raise ValidationException("AddToCart needs at least one product")
        if self.size is None and len(self.products) > 1:
            raise ValidationException("Only sized items can combine several products")


@dataclass(frozen=True, slots=True)
class RemoveFromCart:
    index: int


@dataclass(frozen=True, slots=True)
class UpdateQuantity:
    index: int
    quantity: int


@dataclass(frozen=True, slots=True)
class ClearCart:
    pass


CartAction = Union[SetBusiness, AddToCart, RemoveFromCart, UpdateQuantity, ClearCart]


# Pricing


def item_price(item: CartItem) -> Decimal:
    if isinstance(item, SizedComboItem):
        return calc_line_total(item.size.price, item.quantity)
    if isinstance(item, SimpleItem):
        return calc_line_total(item.product.price, item.quantity)
    raise TypeError(f"Unsupported cart item: {type(item).__name__}")


def cart_total(items: Sequence[CartItem]) -> Decimal:
    return calc_items_total((item.unit_price, item.quantity) for item in items)


def make_item(action: AddToCart) -> CartItem:
    if action.size is None:
        return SimpleItem(
            product=action.products[0],
            flavors=action.flavors,
            notes=action.notes,
        )
    return SizedComboItem(
        size=action.size,
        products=action.products,
        flavors=action.flavors,
        notes=action.notes,
    )


# Reducer


def _check_index(state: CartState, index: int) -> None:
    # bool is an int subclass; True must not address line 1
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(state.items):
        raise IndexOutOfRange(index, len(state.items))


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantity(quantity)


def apply_action(state: CartState, action: CartAction) -> CartState:
    """Return the state that results from applying ``action`` to ``state``.

    Raises ``IndexOutOfRange`` and ``InvalidQuantity`` for actions that
    address a missing line or set a quantity below one; ``state`` is left
    as it was.
    """
    if isinstance(action, SetBusiness):
        if state.business_id is not None and state.business_id != action.business_id:
            return CartState(business_id=action.business_id)
        return replace(state, business_id=action.business_id)

    if isinstance(action, AddToCart):
        new_item = make_item(action)
        return replace(
            state,
            items=state.items + (new_item,),
            total=state.total + item_price(new_item),
        )

    if isinstance(action, RemoveFromCart):
        _check_index(state, action.index)
        removed = state.items[action.index]
        items = state.items[: action.index] + state.items[action.index + 1 :]
        return replace(state, items=items, total=state.total - item_price(removed))

    if isinstance(action, UpdateQuantity):
        _check_index(state, action.index)
        _check_quantity(action.quantity)
        items = tuple(
            replace(item, quantity=action.quantity) if idx == action.index else item
            for idx, item in enumerate(state.items)
        )
        return replace(state, items=items, total=cart_total(items))

    if isinstance(action, ClearCart):
        return CartState(business_id=state.business_id)

    raise TypeError(f"Unsupported cart action: {type(action).__name__}")
