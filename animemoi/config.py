"""Runtime configuration defaults for ordering, the word game and debug logging."""

from __future__ import annotations

import os
from decimal import Decimal

TAX_RATE = Decimal("0.08")

# Word game tuning values.
MAX_NO_OF_WORDS = 10
SCORE_INCREASE = 20
# Upper bound on reshuffles before a word is treated as unscramblable.
SHUFFLE_MAX_ATTEMPTS = 100

DEBUG_LOG_ENV = "ANIMEMOI_DEBUG_LOG"
DEBUG_LOG_PATH = os.environ.get(DEBUG_LOG_ENV, "/tmp/animemoi-debug.log")
