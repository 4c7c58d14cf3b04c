"""Static catalog and word source data."""

from __future__ import annotations

from decimal import Decimal

from animemoi.constant import ACCOMPANIMENT_CATALOG, ALL_WORDS, ENTREE_CATALOG, SIDE_DISH_CATALOG
from animemoi.models import OrderItem


def _order_items(raw_items: list[dict[str, str | None]]) -> list[OrderItem]:
    return [
        OrderItem(
            name=str(raw["name"]),
            description=str(raw["description"]),
            price=Decimal(str(raw["price"])),
            image=str(raw["image"]) if raw.get("image") is not None else None,
        )
        for raw in raw_items
    ]


ENTREE_MENU_ITEMS: list[OrderItem] = _order_items(ENTREE_CATALOG)
SIDE_DISH_MENU_ITEMS: list[OrderItem] = _order_items(SIDE_DISH_CATALOG)
ACCOMPANIMENT_MENU_ITEMS: list[OrderItem] = _order_items(ACCOMPANIMENT_CATALOG)

WORD_SOURCE: tuple[str, ...] = tuple(ALL_WORDS)
