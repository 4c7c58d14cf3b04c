"""Lunch tray order state holder."""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from animemoi.config import TAX_RATE
from animemoi.models import OrderItem, OrderState

logger = logging.getLogger(__name__)

OrderListener = Callable[[OrderState], None]

_CENTS = Decimal("0.01")


def format_price(amount: Decimal) -> str:
    """Format an amount as dollars with two decimals, e.g. `$7.00`."""
    return f"${amount.quantize(_CENTS, rounding=ROUND_HALF_UP):,.2f}"


class OrderController:
    """Holds the wizard selections and keeps subtotal, tax and total consistent."""

    def __init__(self, tax_rate: Decimal = TAX_RATE) -> None:
        self.tax_rate = tax_rate
        self._state = OrderState()
        self._listeners: list[OrderListener] = []

    @property
    def state(self) -> OrderState:
        return self._state

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Call `listener` with the new state after every mutation."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update_entree(self, entree: OrderItem) -> None:
        self._set_slots(replace(self._state, entree=entree))

    def update_side_dish(self, side_dish: OrderItem) -> None:
        self._set_slots(replace(self._state, side_dish=side_dish))

    def update_accompaniment(self, accompaniment: OrderItem) -> None:
        self._set_slots(replace(self._state, accompaniment=accompaniment))

    def reset_order(self) -> None:
        logger.debug("reset_order")
        self._publish(OrderState())

    def _set_slots(self, slots: OrderState) -> None:
        item_total = sum((item.price for item in slots.selected_items()), Decimal("0"))
        order_tax = item_total * self.tax_rate
        state = replace(slots, item_total=item_total, order_tax=order_tax, order_total=item_total + order_tax)
        logger.debug(
            "order_updated entree=%r side_dish=%r accompaniment=%r total=%s",
            state.entree.name if state.entree else None,
            state.side_dish.name if state.side_dish else None,
            state.accompaniment.name if state.accompaniment else None,
            state.order_total,
        )
        self._publish(state)

    def _publish(self, state: OrderState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
