"""Rendering helpers for the lunch tray and unscramble screens."""

from __future__ import annotations

from rich.text import Text

from animemoi.models import GameUiState, OrderItem, OrderState
from animemoi.order import format_price
from animemoi.screens import LunchTrayScreen


def format_app_bar(screen: LunchTrayScreen) -> Text:
    """Render the step title with a back hint when back navigation is possible."""
    text = Text()
    if screen.can_navigate_back:
        text.append("← Esc ", style="bold #ffffff on #2f6db5")
        text.append(" ")
    text.append(screen.title, style="bold")
    return text


def format_menu_option(item: OrderItem, selected: bool, focused: bool) -> Text:
    """Render one radio-style catalog row with its description and price."""
    pointer = "➤ " if focused else "  "
    marker = "(•)" if selected else "( )"
    text = Text()
    text.append(f"{pointer}{marker} ")
    text.append(item.name, style="bold" if selected else "")
    text.append(f"  {format_price(item.price)}", style="#5fbf72")
    text.append(f"\n      {item.description}", style="dim")
    return text


def format_order_summary(order: OrderState) -> Text:
    """Render the checkout summary of selected items and totals."""
    text = Text()
    text.append("Order Summary", style="bold")
    items = order.selected_items()
    if not items:
        text.append("\n(no items selected)", style="dim")
    for item in items:
        text.append(f"\n{item.name}")
        text.append(f"  {format_price(item.price)}", style="#5fbf72")

    text.append("\n\n")
    text.append(f"Subtotal: {format_price(order.item_total)}")
    text.append(f"\nTax: {format_price(order.order_tax)}")
    text.append(f"\nTotal: {format_price(order.order_total)}", style="bold")
    return text


def format_word_count(state: GameUiState, max_words: int) -> Text:
    """Render the `n/max` badge for the word in progress."""
    shown = min(state.current_word_count + 1, max_words)
    return Text(f" {shown}/{max_words} ", style="bold #ffffff on #2f6db5")


def format_guess_field(user_guess: str, is_guess_wrong: bool) -> Text:
    """Render the guess label and the typed text with a cursor."""
    text = Text()
    if is_guess_wrong:
        text.append("Wrong Guess!", style="bold #ffb3b3")
    else:
        text.append("Enter your word")
    text.append("\n")
    text.append(f"{user_guess}|", style="bold #ffb3b3" if is_guess_wrong else "bold white")
    return text


def format_score(score: int) -> Text:
    return Text(f"Score: {score}", style="bold")
