"""Domain models for the lunch tray and the unscramble game."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

_ZERO = Decimal("0")


@dataclass(frozen=True)
class OrderItem:
    """A catalog entry that can fill one order slot."""

    name: str
    description: str
    price: Decimal
    image: str | None = None


@dataclass(frozen=True)
class OrderState:
    """Snapshot of the lunch tray selections and derived totals."""

    entree: OrderItem | None = None
    side_dish: OrderItem | None = None
    accompaniment: OrderItem | None = None
    item_total: Decimal = _ZERO
    order_tax: Decimal = _ZERO
    order_total: Decimal = _ZERO

    def selected_items(self) -> list[OrderItem]:
        """Return filled slots in wizard order."""
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]


@dataclass(frozen=True)
class GameUiState:
    """Snapshot of one unscramble session as shown to the player."""

    current_scrambled_word: str = ""
    current_word_count: int = 0
    score: int = 0
    is_guessed_word_wrong: bool = False
    is_game_over: bool = False
    used_words: frozenset[str] = field(default_factory=frozenset)
