"""Unscramble game session state holder."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, Iterable

from animemoi.config import MAX_NO_OF_WORDS, SCORE_INCREASE, SHUFFLE_MAX_ATTEMPTS
from animemoi.data import WORD_SOURCE
from animemoi.models import GameUiState

logger = logging.getLogger(__name__)

GameListener = Callable[[GameUiState], None]


class WordSourceExhausted(Exception):
    """The word source cannot supply another unused, scramblable word."""


def can_scramble(word: str) -> bool:
    """A word can be scrambled only if it has at least two distinct characters."""
    return len(set(word)) > 1


class GameController:
    """
    Drives a single unscramble session of `max_words` words.

    The session is either playing or over. Correct guesses and skips advance to
    the next word; advancing past the last word ends the session until
    `reset_game` starts a new one. Wrong guesses only raise the wrong-guess flag.
    """

    def __init__(
        self,
        words: Iterable[str] = WORD_SOURCE,
        *,
        max_words: int = MAX_NO_OF_WORDS,
        score_increase: int = SCORE_INCREASE,
        shuffle_max_attempts: int = SHUFFLE_MAX_ATTEMPTS,
        rng: random.Random | None = None,
    ) -> None:
        if max_words < 1:
            raise ValueError("max_words must be at least 1")

        self.words = tuple(dict.fromkeys(word.strip().lower() for word in words if word.strip()))
        self.max_words = max_words
        self.score_increase = score_increase
        self.shuffle_max_attempts = shuffle_max_attempts
        self.rng = rng or random.Random()

        playable = sum(1 for word in self.words if can_scramble(word))
        if playable < max_words:
            raise WordSourceExhausted(
                f"word source has {playable} scramblable words, a session needs {max_words}"
            )

        self.user_guess = ""
        self._used_words: set[str] = set()
        self._current_word = ""
        self._state = GameUiState()
        self._listeners: list[GameListener] = []
        self.reset_game()

    @property
    def state(self) -> GameUiState:
        return self._state

    @property
    def current_word(self) -> str:
        """The unscrambled answer for the word on screen."""
        return self._current_word

    @property
    def used_words(self) -> frozenset[str]:
        return frozenset(self._used_words)

    def subscribe(self, listener: GameListener) -> Callable[[], None]:
        """Call `listener` with the new state after every state change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def reset_game(self) -> None:
        # Nothing changes unless a fresh first word is available.
        word, scrambled = self._pick_random_word_and_shuffle(frozenset())
        self._used_words.clear()
        self._current_word = word
        self.user_guess = ""
        logger.debug("reset_game word_count=0")
        self._publish(GameUiState(current_scrambled_word=scrambled))

    def update_user_guess(self, guessed_word: str) -> None:
        self.user_guess = guessed_word

    def clear_user_guess(self) -> None:
        self.user_guess = ""

    def check_user_guess(self) -> None:
        if self._state.is_game_over:
            return

        if self.user_guess.strip().lower() == self._current_word:
            logger.debug("check_user_guess correct word_count=%d", self._state.current_word_count)
            self._advance(self._state.score + self.score_increase)
            return

        logger.debug("check_user_guess wrong guess=%r", self.user_guess)
        self._publish(replace(self._state, is_guessed_word_wrong=True))

    def skip_word(self) -> None:
        if self._state.is_game_over:
            return
        logger.debug("skip_word word_count=%d", self._state.current_word_count)
        self._advance(self._state.score)

    def _advance(self, score: int) -> None:
        self._used_words.add(self._current_word)
        self.user_guess = ""
        word_count = len(self._used_words)
        used_words = frozenset(self._used_words)

        if word_count >= self.max_words:
            logger.debug("game_over score=%d", score)
            self._publish(
                replace(
                    self._state,
                    current_word_count=word_count,
                    score=score,
                    is_guessed_word_wrong=False,
                    is_game_over=True,
                    used_words=used_words,
                )
            )
            return

        try:
            self._current_word, scrambled = self._pick_random_word_and_shuffle(self._used_words)
        except WordSourceExhausted:
            logger.debug("word_source_exhausted word_count=%d score=%d", word_count, score)
            self._publish(
                replace(
                    self._state,
                    current_word_count=word_count,
                    score=score,
                    is_guessed_word_wrong=False,
                    is_game_over=True,
                    used_words=used_words,
                )
            )
            raise

        self._publish(
            GameUiState(
                current_scrambled_word=scrambled,
                current_word_count=word_count,
                score=score,
                used_words=used_words,
            )
        )

    def _pick_random_word_and_shuffle(self, used_words: set[str] | frozenset[str]) -> tuple[str, str]:
        """Return an unused word and a scramble of it that differs from the word."""
        candidates = [word for word in self.words if word not in used_words and can_scramble(word)]
        while candidates:
            word = self.rng.choice(candidates)
            scrambled = self._shuffle(word)
            if scrambled is not None:
                return word, scrambled
            candidates.remove(word)
        raise WordSourceExhausted(f"no unused words left after {len(used_words)} words")

    def _shuffle(self, word: str) -> str | None:
        letters = list(word)
        for _ in range(self.shuffle_max_attempts):
            self.rng.shuffle(letters)
            scrambled = "".join(letters)
            if scrambled != word:
                return scrambled
        return None

    def _publish(self, state: GameUiState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
