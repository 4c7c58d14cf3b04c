from decimal import Decimal

import pytest

from animemoi.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from animemoi.models import OrderItem, OrderState
from animemoi.order import OrderController, format_price

CAULIFLOWER = ENTREE_MENU_ITEMS[0]
CHILI = ENTREE_MENU_ITEMS[1]
SOUP = SIDE_DISH_MENU_ITEMS[1]
ROLL = ACCOMPANIMENT_MENU_ITEMS[0]


def _assert_totals_consistent(state: OrderState, tax_rate=Decimal("0.08")):
    assert state.item_total == sum((item.price for item in state.selected_items()), Decimal("0"))
    assert state.order_tax == state.item_total * tax_rate
    assert state.order_total == state.item_total + state.order_tax


def test_new_order_is_empty():
    state = OrderController().state
    assert state == OrderState()
    assert state.selected_items() == []
    assert state.order_total == 0


def test_single_entree_totals():
    order = OrderController()
    order.update_entree(CAULIFLOWER)
    assert order.state.entree == CAULIFLOWER
    assert order.state.item_total == Decimal("7.00")
    assert order.state.order_tax == Decimal("0.56")
    assert order.state.order_total == Decimal("7.56")


def test_replacing_entree_keeps_only_latest():
    order = OrderController()
    order.update_side_dish(SOUP)
    order.update_entree(CAULIFLOWER)
    order.update_entree(CHILI)

    assert order.state.entree == CHILI
    assert order.state.item_total == CHILI.price + SOUP.price
    _assert_totals_consistent(order.state)


def test_full_order_totals():
    order = OrderController()
    order.update_entree(CAULIFLOWER)
    order.update_side_dish(SOUP)
    order.update_accompaniment(ROLL)

    assert order.state.selected_items() == [CAULIFLOWER, SOUP, ROLL]
    assert order.state.item_total == Decimal("10.50")
    assert order.state.order_total == Decimal("11.34")
    _assert_totals_consistent(order.state)


def test_partial_order_has_lower_subtotal():
    order = OrderController()
    order.update_accompaniment(ROLL)
    assert order.state.entree is None
    assert order.state.item_total == Decimal("0.50")
    _assert_totals_consistent(order.state)


def test_reset_order_clears_everything():
    order = OrderController()
    order.update_entree(CAULIFLOWER)
    order.update_side_dish(SOUP)
    order.update_accompaniment(ROLL)
    order.reset_order()

    assert order.state == OrderState()
    assert order.state.item_total == 0
    assert order.state.order_tax == 0


def test_custom_tax_rate():
    order = OrderController(tax_rate=Decimal("0.10"))
    order.update_entree(OrderItem("Soup", "Hot", Decimal("5.00")))
    assert order.state.order_total == Decimal("5.50")
    _assert_totals_consistent(order.state, Decimal("0.10"))


def test_listeners_receive_every_mutation():
    order = OrderController()
    seen = []
    unsubscribe = order.subscribe(seen.append)

    order.update_entree(CAULIFLOWER)
    order.reset_order()
    assert [state.entree for state in seen] == [CAULIFLOWER, None]

    unsubscribe()
    order.update_entree(CHILI)
    assert len(seen) == 2


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("7"), "$7.00"),
        (Decimal("0.5"), "$0.50"),
        (Decimal("11.34"), "$11.34"),
        (Decimal("0.565"), "$0.57"),
        (Decimal("1234.5"), "$1,234.50"),
    ],
)
def test_format_price(amount, expected):
    assert format_price(amount) == expected


def test_catalog_is_loaded():
    assert [item.name for item in ENTREE_MENU_ITEMS] == [
        "Cauliflower",
        "Three Bean Chili",
        "Mushroom Pasta",
        "Spicy Black Bean Skillet",
    ]
    assert len(SIDE_DISH_MENU_ITEMS) == 4
    assert len(ACCOMPANIMENT_MENU_ITEMS) == 3
    assert all(isinstance(item.price, Decimal) for item in ENTREE_MENU_ITEMS)
