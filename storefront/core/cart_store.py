"""In-process cart container owned by one storefront session."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from storefront.core.exceptions import CartException, IndexOutOfRange
from storefront.domain.cart import EMPTY_CART, CartAction, CartState, SetBusiness, apply_action

logger = logging.getLogger(__name__)

Listener = Callable[[CartState], None]


class CartStore:
    """Holds the current cart and replaces it on every dispatched action.

    In strict mode (the default) a rejected action raises and the state stays
    as it was. With ``strict=False`` an action addressing a missing line is
    ignored with a warning instead.
    """

    def __init__(self, initial: CartState | None = None, *, strict: bool = True):
        self._state = initial if initial is not None else EMPTY_CART
        self._strict = strict
        self._listeners: list[Listener] = []

    @property
    def strict(self) -> bool:
        return self._strict

    def get_state(self) -> CartState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the new state after each change; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _apply(self, state: CartState, action: CartAction) -> CartState:
        logger.debug("Cart action %s", action)
        try:
            new_state = apply_action(state, action)
        except IndexOutOfRange as exc:
            if not self._strict:
                logger.warning("Ignored cart action %s: %s", type(action).__name__, exc.message)
                return state
            logger.warning("Rejected cart action %s: %s", type(action).__name__, exc.message)
            raise
        except CartException as exc:
            logger.warning("Rejected cart action %s: %s", type(action).__name__, exc.message)
            raise

        if (
            isinstance(action, SetBusiness)
            and state.business_id is not None
            and state.business_id != action.business_id
            and state.items
        ):
            logger.info(
                "Cart switched business %s -> %s, discarded %d item(s)",
                state.business_id,
                action.business_id,
                len(state.items),
            )
        return new_state

    def _commit(self, new_state: CartState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    def dispatch(self, action: CartAction) -> None:
        self._commit(self._apply(self._state, action))

    def dispatch_batch(self, actions: Iterable[CartAction]) -> None:
        """Apply ``actions`` in order as one change.

        Listeners are notified once with the final state. If any action is
        rejected none of them take effect.
        """
        state = self._state
        for action in actions:
            state = self._apply(state, action)
        self._commit(state)

    def reset(self) -> None:
        self._state = EMPTY_CART
