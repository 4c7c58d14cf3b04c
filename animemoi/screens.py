"""Lunch tray wizard steps."""

from __future__ import annotations

from enum import Enum


class LunchTrayScreen(Enum):
    """Ordered wizard steps, each carrying its display title."""

    Start = "Lunch Tray"
    Entree = "Choose Entree"
    SideDish = "Choose Side Dish"
    Accompaniment = "Choose Accompaniment"
    Checkout = "Order Checkout"

    @property
    def title(self) -> str:
        return self.value

    @property
    def can_navigate_back(self) -> bool:
        return self is not LunchTrayScreen.Start

    @property
    def next_screen(self) -> LunchTrayScreen | None:
        steps = list(LunchTrayScreen)
        idx = steps.index(self)
        if idx + 1 >= len(steps):
            return None
        return steps[idx + 1]

    @classmethod
    def from_route(cls, route: str | None) -> LunchTrayScreen:
        """Resolve a route name to its step, defaulting to Start when no route is active."""
        if route is None:
            return cls.Start
        return cls[route]
