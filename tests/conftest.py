import random

import pytest

from animemoi.game import GameController


class StuckRandom(random.Random):
    """Random source whose shuffle can be switched off to simulate unscramblable words."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.stuck = False

    def shuffle(self, x):
        if self.stuck:
            return
        super().shuffle(x)


@pytest.fixture()
def two_word_game():
    return GameController(["cat", "dog"], max_words=2, rng=random.Random(7))


@pytest.fixture()
def stuck_random():
    return StuckRandom(3)
