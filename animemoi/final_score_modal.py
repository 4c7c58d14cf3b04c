"""Final score modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class FinalScoreModal(ModalScreen[bool]):
    """Announce the final score and ask whether to play again."""

    CSS = """
    FinalScoreModal {
        align: center middle;
        background: $background 60%;
    }

    #final-score-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #final-score-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #final-score-body {
        color: white;
        margin-bottom: 1;
    }

    #final-score-help {
        color: #dddddd;
    }
    """

    def __init__(self, score: int, ended_early: bool = False) -> None:
        super().__init__()
        self.score = score
        self.ended_early = ended_early

    def compose(self) -> ComposeResult:
        with Container(id="final-score-dialog"):
            yield Static("Game Over" if self.ended_early else "Congratulations!", id="final-score-title")
            yield Static(f"You scored: {self.score}", id="final-score-body")
            yield Static("P/Enter play again. Q/Esc exit.", id="final-score-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"p", "enter"}:
            self.dismiss(True)
            event.stop()
            return

        if event.key in {"q", "escape", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
            return

        # Nothing else reaches the game underneath.
        event.stop()
