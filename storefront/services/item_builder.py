"""Customisation flow for a single cart line.

Mirrors the product dialog: the customer picks a size, optionally adds more
flavors up to the size's limit, toggles ingredients per flavor, writes notes
and chooses a quantity. The result is an ``AddToCart`` action plus the
quantity to apply to the new line.
"""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Sequence

from storefront.core.exceptions import InvalidQuantity, TooManyFlavors, ValidationException
from storefront.core.order_math import calc_line_total
from storefront.domain.cart import AddToCart, FlavorChoice
from storefront.domain.entities import Product, Size


class ItemBuilder:
    def __init__(
        self,
        product: Product,
        sizes: Sequence[Size] = (),
        available_products: Sequence[Product] = (),
    ):
        self.product = product
        self.sizes = tuple(sizes)
        self.available_products = tuple(available_products)
        self.size: Size | None = self.sizes[0] if self.sizes else None
        self._flavors: list[tuple[Product, FlavorChoice]] = [(product, FlavorChoice.from_product(product))]
        self.quantity = 1
        self.notes = ""

    @property
    def flavors(self) -> tuple[FlavorChoice, ...]:
        return tuple(choice for _, choice in self._flavors)

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(product for product, _ in self._flavors)

    @property
    def can_add_flavor(self) -> bool:
        return (
            self.size is not None
            and self.product.allows_multiple_flavors
            and len(self._flavors) < self.size.max_flavors
        )

    def flavor_options(self) -> list[Product]:
        """Products that may still be added as another flavor."""
        if not self.can_add_flavor:
            return []
        chosen = {product.id for product in self.products}
        return [p for p in self.available_products if p.id not in chosen]

    def select_size(self, size: Size) -> None:
        if self.sizes and size not in self.sizes:
            raise ValidationException(f"Size {size.id} is not offered for {self.product.name}")
        self.size = size
        # changing size drops every extra flavor
        self._flavors = self._flavors[:1]

    def add_flavor(self, product: Product) -> None:
        if self.size is None or not self.product.allows_multiple_flavors:
            raise ValidationException(f"{self.product.name} cannot be combined with other flavors")
        if len(self._flavors) >= self.size.max_flavors:
            raise TooManyFlavors(self.size.max_flavors)
        if any(existing.id == product.id for existing in self.products):
            raise ValidationException(f"{product.name} is already selected")
        self._flavors.append((product, FlavorChoice.from_product(product)))

    def remove_flavor(self, index: int) -> None:
        if index == 0:
            raise ValidationException("The first flavor cannot be removed")
        if not 0 < index < len(self._flavors):
            raise ValidationException(f"No flavor at position {index}")
        del self._flavors[index]

    def toggle_ingredient(self, flavor_index: int, ingredient_id: str) -> None:
        if not 0 <= flavor_index < len(self._flavors):
            raise ValidationException(f"No flavor at position {flavor_index}")
        product, choice = self._flavors[flavor_index]
        if all(ing.id != ingredient_id for ing in product.ingredients):
            raise ValidationException(f"{product.name} has no ingredient {ingredient_id}")
        included = set(choice.included_ingredient_ids)
        included.symmetric_difference_update({ingredient_id})
        self._flavors[flavor_index] = (product, replace(choice, included_ingredient_ids=frozenset(included)))

    def set_quantity(self, quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantity(quantity)
        self.quantity = quantity

    def preview_total(self) -> Decimal:
        unit_price = self.size.price if self.size is not None else self.product.price
        return calc_line_total(unit_price, self.quantity)

    def to_action(self) -> AddToCart:
        return AddToCart(
            products=self.products,
            size=self.size,
            flavors=self.flavors,
            notes=self.notes.strip(),
        )
