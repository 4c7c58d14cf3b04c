"""Unscramble word game as a Textual app."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.widgets import Header, Static

from animemoi.final_score_modal import FinalScoreModal
from animemoi.game import GameController, WordSourceExhausted
from animemoi.models import GameUiState
from animemoi.rendering import format_guess_field, format_score, format_word_count

logger = logging.getLogger(__name__)

_HELP_TEXT = "Type your guess. Enter submit, Ctrl+K skip, Ctrl+Q quit."


class UnscrambleApp(App):
    """Guess the unscrambled word, ten words per game."""

    TITLE = "Unscramble"

    CSS = """
    Screen {
        layout: vertical;
        align: center top;
    }

    #game-card {
        width: 60;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    #word-count {
        width: 100%;
        text-align: right;
    }

    #scrambled-word {
        text-style: bold;
        text-align: center;
        width: 100%;
        margin: 1 0;
    }

    #instructions {
        text-align: center;
        width: 100%;
        margin-bottom: 1;
    }

    #guess-field {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    #score {
        width: 60;
        border: round $secondary;
        padding: 0 2;
        margin-top: 1;
    }

    #status {
        width: 60;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+k", "skip_word", "Skip", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, game: GameController | None = None) -> None:
        super().__init__()
        self.game = game or GameController()
        self.system_status = ""
        self.game.subscribe(self._on_game_changed)
        logger.debug("unscramble_app_init max_words=%d", self.game.max_words)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="game-card"):
            yield Static(id="word-count")
            yield Static(id="scrambled-word")
            yield Static("Unscramble the word using all the letters.", id="instructions")
            yield Static(id="guess-field")
        yield Static(id="score")
        yield Static(_HELP_TEXT, id="status")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, FinalScoreModal):
            return
        if self.game.state.is_game_over:
            return

        if event.key == "enter":
            self.action_submit_guess()
            event.stop()
            return

        if event.key == "backspace":
            if self.game.user_guess:
                self.game.update_user_guess(self.game.user_guess[:-1])
                self._refresh_guess()
            event.stop()
            return

        if not event.is_printable or not event.character or not event.character.isalpha():
            return

        self.game.update_user_guess(self.game.user_guess + event.character)
        self._refresh_guess()
        event.stop()

    def action_submit_guess(self) -> None:
        logger.debug("submit_guess guess=%r", self.game.user_guess)
        try:
            self.game.check_user_guess()
        except WordSourceExhausted as exc:
            self._report_exhausted(exc)
        self._refresh_guess()

    def action_skip_word(self) -> None:
        if isinstance(self.screen, FinalScoreModal):
            return
        try:
            self.game.skip_word()
        except WordSourceExhausted as exc:
            self._report_exhausted(exc)
        self._refresh_guess()

    def _report_exhausted(self, exc: WordSourceExhausted) -> None:
        self.system_status = f"Game ended early: {exc}"
        logger.debug("word_source_exhausted error=%r", exc)
        self._refresh_status()

    def _on_game_changed(self, state: GameUiState) -> None:
        self._refresh_all()
        if state.is_game_over and not isinstance(self.screen, FinalScoreModal):
            logger.debug("show_final_score score=%d", state.score)
            ended_early = state.current_word_count < self.game.max_words
            self.push_screen(FinalScoreModal(state.score, ended_early), self._on_final_score_closed)

    def _on_final_score_closed(self, play_again: bool | None) -> None:
        if not play_again:
            logger.debug("exit_after_game_over")
            self.exit()
            return
        try:
            self.game.reset_game()
        except WordSourceExhausted as exc:
            self._report_exhausted(exc)
            self.call_after_refresh(self._refresh_status)
            return
        self.system_status = ""
        self.call_after_refresh(self._refresh_all)

    def _refresh_all(self) -> None:
        try:
            state = self.game.state
            self.query_one("#word-count", Static).update(format_word_count(state, self.game.max_words))
            self.query_one("#scrambled-word", Static).update(state.current_scrambled_word)
            self.query_one("#score", Static).update(format_score(state.score))
        except NoMatches:
            return
        self._refresh_guess()
        self._refresh_status()

    def _refresh_guess(self) -> None:
        try:
            guess_widget = self.query_one("#guess-field", Static)
        except NoMatches:
            return
        guess_widget.update(format_guess_field(self.game.user_guess, self.game.state.is_guessed_word_wrong))

    def _refresh_status(self) -> None:
        try:
            self.query_one("#status", Static).update(self.system_status or _HELP_TEXT)
        except NoMatches:
            return
