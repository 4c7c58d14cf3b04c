"""Lunch tray ordering wizard as a Textual app."""

from __future__ import annotations

import logging
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Header, Static

from animemoi.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from animemoi.models import OrderItem, OrderState
from animemoi.order import OrderController, format_price
from animemoi.rendering import format_app_bar, format_menu_option, format_order_summary
from animemoi.screens import LunchTrayScreen

logger = logging.getLogger(__name__)


class StartOrderScreen(Screen):
    """Landing step of the wizard."""

    BINDINGS = [
        ("enter", "start_order", "Start Order"),
        ("s", "start_order", "Start Order"),
    ]

    def __init__(self) -> None:
        super().__init__(name=LunchTrayScreen.Start.name)
        self.step = LunchTrayScreen.from_route(self.name)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="app-bar")
        with Vertical(classes="pane"):
            yield Static(id="start-body")
            yield Static("Enter start order, Ctrl+Q quit", classes="help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_screen_resume(self) -> None:
        self._refresh_content()

    def action_start_order(self) -> None:
        self.app.start_order()

    def _refresh_content(self) -> None:
        try:
            app_bar = self.query_one("#app-bar", Static)
            body_widget = self.query_one("#start-body", Static)
        except NoMatches:
            return
        app_bar.update(format_app_bar(self.step))
        body = Text()
        body.append("Start Order", style="bold")
        body.append("\nPick an entree, a side dish and an accompaniment.")
        if self.app.system_status:
            body.append(f"\n\n{self.app.system_status}", style="#5fbf72")
        body_widget.update(body)


class MenuScreen(Screen):
    """One wizard step listing catalog items for a single order slot."""

    BINDINGS = [
        ("j", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("up", "move_cursor(-1)", "Previous item"),
        ("enter", "select_current", "Select"),
        ("space", "select_current", "Select"),
        ("n", "next", "Next"),
        ("c", "cancel", "Cancel"),
        ("escape", "back", "Back"),
    ]

    def __init__(
        self,
        step: LunchTrayScreen,
        options: list[OrderItem],
        slot: str,
        on_selection_changed: Callable[[OrderItem], None],
    ) -> None:
        super().__init__(name=step.name)
        self.step = LunchTrayScreen.from_route(self.name)
        self.options = options
        self.slot = slot
        self.on_selection_changed = on_selection_changed
        self.cursor_index = 0
        self.selected: OrderItem | None = None
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="app-bar")
        with Vertical(classes="pane"):
            yield Static(id="menu-options")
            yield Static("J/K/↑/↓ move, Enter select, N next, C cancel, Esc back", classes="help")

    def on_mount(self) -> None:
        self.selected = getattr(self.app.order.state, self.slot)
        self._unsubscribe = self.app.order.subscribe(self._on_order_changed)
        self._refresh_content()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_select_current(self) -> None:
        if not self.options:
            return
        self.on_selection_changed(self.options[self.cursor_index])

    def action_next(self) -> None:
        self.app.navigate_next(self.step)

    def action_cancel(self) -> None:
        self.app.cancel_order()

    def action_back(self) -> None:
        self.app.navigate_up()

    def _on_order_changed(self, state: OrderState) -> None:
        self.selected = getattr(state, self.slot)
        self._refresh_content()

    def _refresh_content(self) -> None:
        try:
            app_bar = self.query_one("#app-bar", Static)
            options_widget = self.query_one("#menu-options", Static)
        except NoMatches:
            return
        app_bar.update(format_app_bar(self.step))
        lines = Text()
        for idx, item in enumerate(self.options):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_menu_option(item, selected=item == self.selected, focused=idx == self.cursor_index))
        options_widget.update(lines)


class CheckoutScreen(Screen):
    """Final wizard step summarizing the order."""

    BINDINGS = [
        ("s", "submit", "Submit"),
        ("enter", "submit", "Submit"),
        ("c", "cancel", "Cancel"),
        ("escape", "back", "Back"),
    ]

    def __init__(self) -> None:
        super().__init__(name=LunchTrayScreen.Checkout.name)
        self.step = LunchTrayScreen.from_route(self.name)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="app-bar")
        with Vertical(classes="pane"):
            yield Static(id="order-summary")
            yield Static("S/Enter submit, C cancel, Esc back", classes="help")

    def on_mount(self) -> None:
        self.query_one("#app-bar", Static).update(format_app_bar(self.step))
        self.refresh_summary(self.app.order.state)

    def refresh_summary(self, order: OrderState) -> None:
        self.query_one("#order-summary", Static).update(format_order_summary(order))

    def action_submit(self) -> None:
        self.app.submit_order()

    def action_cancel(self) -> None:
        self.app.cancel_order()

    def action_back(self) -> None:
        self.app.navigate_up()


_WIZARD_SCREENS = (StartOrderScreen, MenuScreen, CheckoutScreen)


class LunchTrayApp(App):
    """A Textual app walking through entree, side dish and accompaniment selection."""

    TITLE = "Lunch Tray"

    CSS = """
    Screen {
        layout: vertical;
    }

    #app-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #menu-options, #order-summary, #start-body {
        height: 1fr;
    }

    .help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, order: OrderController | None = None) -> None:
        super().__init__()
        self.order = order or OrderController()
        self.system_status = ""
        self._menu_steps: dict[LunchTrayScreen, tuple[list[OrderItem], str, Callable[[OrderItem], None]]] = {
            LunchTrayScreen.Entree: (ENTREE_MENU_ITEMS, "entree", self.order.update_entree),
            LunchTrayScreen.SideDish: (SIDE_DISH_MENU_ITEMS, "side_dish", self.order.update_side_dish),
            LunchTrayScreen.Accompaniment: (
                ACCOMPANIMENT_MENU_ITEMS,
                "accompaniment",
                self.order.update_accompaniment,
            ),
        }
        logger.debug("lunch_tray_app_init")

    @property
    def current_step(self) -> LunchTrayScreen:
        route = self.screen.name if isinstance(self.screen, _WIZARD_SCREENS) else None
        return LunchTrayScreen.from_route(route)

    def on_mount(self) -> None:
        self.push_screen(StartOrderScreen())

    def start_order(self) -> None:
        self.system_status = ""
        self.navigate_next(LunchTrayScreen.Start)

    def navigate_next(self, step: LunchTrayScreen) -> None:
        target = step.next_screen
        if target is None:
            return
        logger.debug("navigate from=%s to=%s", step.name, target.name)
        if target is LunchTrayScreen.Checkout:
            self.push_screen(CheckoutScreen())
            return
        options, slot, on_selection_changed = self._menu_steps[target]
        self.push_screen(MenuScreen(target, options, slot, on_selection_changed))

    def navigate_up(self) -> None:
        if not self.current_step.can_navigate_back:
            return
        logger.debug("navigate_up from=%s", self.current_step.name)
        self.pop_screen()

    def cancel_order(self) -> None:
        logger.debug("cancel_order from=%s", self.current_step.name)
        self.order.reset_order()
        self._pop_to_start()

    def submit_order(self) -> None:
        state = self.order.state
        logger.debug("submit_order items=%d total=%s", len(state.selected_items()), state.order_total)
        self.system_status = f"Order sent: {len(state.selected_items())} item(s), {format_price(state.order_total)}"
        self.order.reset_order()
        self._pop_to_start()

    def _pop_to_start(self) -> None:
        while not isinstance(self.screen, StartOrderScreen):
            self.pop_screen()
