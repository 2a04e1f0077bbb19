"""Top-level owner of the cart for one customer session."""
from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from storefront.core.cart_store import CartStore
from storefront.core.config import Settings
from storefront.core.exceptions import BusinessClosedException, ValidationException
from storefront.domain.business_hours import is_open
from storefront.domain.cart import (
    CartAction,
    CartState,
    ClearCart,
    RemoveFromCart,
    SetBusiness,
    UpdateQuantity,
)
from storefront.domain.entities import Business
from storefront.services.checkout import CustomerInfo, OrderDraft, build_order_draft
from storefront.services.item_builder import ItemBuilder

logger = logging.getLogger(__name__)


class StorefrontSession:
    """Creates the cart store on start and drops it on ``close()``."""

    def __init__(self, settings: Settings, clock: Callable[[], datetime] = datetime.now):
        self.settings = settings
        self._clock = clock
        self._store: CartStore | None = CartStore(strict=settings.strict_cart)
        self.business: Business | None = None

    @property
    def store(self) -> CartStore:
        if self._store is None:
            raise ValidationException("Session is closed")
        return self._store

    @property
    def state(self) -> CartState:
        return self.store.get_state()

    def dispatch(self, action: CartAction) -> CartState:
        self.store.dispatch(action)
        return self.store.get_state()

    def open_business(self, business: Business) -> CartState:
        self.business = business
        return self.dispatch(SetBusiness(business.id))

    def is_business_open(self) -> bool:
        if self.business is None:
            return False
        return is_open(self.business.hours, self._clock())

    def add_item(self, builder: ItemBuilder) -> CartState:
        if self.business is None:
            raise ValidationException("Open a business before adding items")
        if builder.product.business_id != self.business.id:
            raise ValidationException(
                f"Product {builder.product.id} does not belong to business {self.business.id}"
            )
        if not self.is_business_open():
            raise BusinessClosedException(self.business.id)

        actions: list[CartAction] = [builder.to_action()]
        if builder.quantity > 1:
            # AddToCart always creates quantity 1; the new line is the last one
            actions.append(UpdateQuantity(len(self.state.items), builder.quantity))
        self.store.dispatch_batch(actions)
        return self.store.get_state()

    def update_quantity(self, index: int, quantity: int) -> CartState:
        return self.dispatch(UpdateQuantity(index, quantity))

    def remove_item(self, index: int) -> CartState:
        return self.dispatch(RemoveFromCart(index))

    def clear(self) -> CartState:
        return self.dispatch(ClearCart())

    def delivery_fee(self) -> Decimal:
        if self.business is not None and self.business.delivery_fee is not None:
            return self.business.delivery_fee
        return self.settings.delivery_fee

    def checkout(self, customer: CustomerInfo) -> OrderDraft:
        draft = build_order_draft(
            self.state, customer, self.delivery_fee(), decimals=self.settings.money_decimals
        )
        logger.info(
            "Checkout for business %s: %d line(s), total %s %s",
            draft.business_id,
            len(draft.lines),
            draft.total,
            self.settings.currency,
        )
        self.store.dispatch(ClearCart())
        return draft

    def close(self) -> None:
        self._store = None
        self.business = None
