from __future__ import annotations

import logging
import random
import time
from enum import Enum
from typing import List, Optional

from .config import Config, RoundTime, TextTheme
from .leaderboard import LeaderboardStore, ScoreEntry
from .scoring import RoundResult, scale_wpm, score_round
from .words import EXTEND_WORDS, INITIAL_WORDS, extend_words, generate_words, needs_extension, vocabulary_for

logger = logging.getLogger(__name__)

# Keys arriving this soon after a round ends are dropped.
COOLDOWN_SEC = 0.05

OPTION_ROUND_TIME = 0
OPTION_TEXT_THEME = 1
OPTION_SAVE = 2
OPTION_COUNT = 3


class Screen(Enum):
    MAIN = "main"
    END_ROUND = "end_round"
    SHOW_OPTIONS = "show_options"


def _now(now: Optional[float]) -> float:
    return time.monotonic() if now is None else now


class TypingSession:
    """
    All mutable state of one round, from the first keystroke to the summary.

    ``typed_words`` is index-aligned with ``target_words`` and always has a
    slot for ``word_index``. ``target_words`` only ever grows during a round.
    The round length and word theme are fixed at construction; edits made on
    the options screen go to ``config`` and only take effect on restart.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[LeaderboardStore] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = (config or Config()).copy()
        self.store = store or LeaderboardStore()
        self.rng = rng or random.Random()

        self.round_time: RoundTime = self.config.round_time
        self.text_theme: TextTheme = self.config.text_theme

        self.screen = Screen.MAIN
        self.word_index = 0
        self.char_index = 0
        self.typed_words: List[str] = [""]
        self.target_words: List[str] = generate_words(
            vocabulary_for(self.text_theme), INITIAL_WORDS, self.rng
        )
        self.start_time: Optional[float] = None
        self.time_remaining = self.round_time.seconds
        self.cooldown_start: Optional[float] = None
        self.exit = False
        self.choice_index = OPTION_ROUND_TIME

        self.top_scores: Optional[List[ScoreEntry]] = None
        self.result: Optional[RoundResult] = None
        self.wpm = 0
        self.raw_wpm = 0

    @property
    def round_seconds(self) -> int:
        return self.round_time.seconds

    @property
    def current_word(self) -> str:
        return self.typed_words[self.word_index]

    # ---------------------------
    # Typing
    # ---------------------------

    def start_timer(self, now: Optional[float] = None) -> None:
        if self.start_time is None:
            self.start_time = _now(now)

    def type_char(self, char: str) -> None:
        self.typed_words[self.word_index] += char
        self.char_index += 1

    def backspace(self) -> None:
        if self.char_index > 0:
            self.char_index -= 1
            self.typed_words[self.word_index] = self.current_word[:-1]
        else:
            self.prev_word()

    def next_word(self) -> None:
        """Submit the current word. A bare space on an empty word does nothing."""
        if self.char_index == 0:
            return
        self.word_index += 1
        self.char_index = 0
        if len(self.typed_words) <= self.word_index:
            self.typed_words.append("")
        if needs_extension(len(self.typed_words), len(self.target_words)):
            self.extend_target_words()

    def prev_word(self) -> None:
        if self.word_index == 0:
            return
        self.typed_words.pop()
        self.word_index -= 1
        self.char_index = len(self.current_word)

    def extend_target_words(self) -> None:
        self.target_words.extend(
            extend_words(vocabulary_for(self.text_theme), self.target_words, EXTEND_WORDS, self.rng)
        )

    def request_exit(self) -> None:
        self.exit = True

    # ---------------------------
    # Round timer
    # ---------------------------

    def tick(self, now: Optional[float] = None) -> None:
        """Refresh the countdown and end the round once its time is up."""
        if self.screen is not Screen.MAIN or self.start_time is None:
            return
        now = _now(now)
        elapsed = now - self.start_time
        if elapsed >= self.round_seconds:
            self.finish_round(now)
        else:
            self.time_remaining = self.round_seconds - int(elapsed)

    def finish_round(self, now: Optional[float] = None) -> None:
        self.result = score_round(self.typed_words, self.target_words, self.word_index)
        self.wpm = scale_wpm(self.result.words_correct, self.round_seconds)
        self.raw_wpm = scale_wpm(self.word_index, self.round_seconds)
        logger.info(
            "Round over: %d wpm (raw %d) over %s, %.1f%% char accuracy",
            self.wpm, self.raw_wpm, self.round_time.label, self.result.char_accuracy,
        )

        updated = self.store.record(self.top_scores or [], ScoreEntry.today(self.wpm))
        if updated is not None:
            self.top_scores = updated

        self.time_remaining = 0
        self.start_time = None
        self.enter_end_round(now)

    # ---------------------------
    # End of round
    # ---------------------------

    def enter_end_round(self, now: Optional[float] = None) -> None:
        self.screen = Screen.END_ROUND
        self.cooldown_start = _now(now)

    def accepts_input(self, now: Optional[float] = None) -> bool:
        """False while the post-round cooldown is running."""
        now = _now(now)
        if self.cooldown_start is None:
            self.cooldown_start = now
            return False
        return now - self.cooldown_start >= COOLDOWN_SEC

    def restart(self) -> "TypingSession":
        return TypingSession(self.config.copy(), self.store, self.rng)

    def refresh_leaderboard(self) -> None:
        """Reload scores from disk; an empty or failed load keeps what we have."""
        entries = self.store.load()
        if entries:
            self.top_scores = entries

    # ---------------------------
    # Options
    # ---------------------------

    def open_options(self) -> None:
        self.cooldown_start = None
        self.screen = Screen.SHOW_OPTIONS

    def move_choice(self, step: int) -> None:
        self.choice_index = (self.choice_index + step) % OPTION_COUNT

    def cycle_choice(self, step: int) -> None:
        if self.choice_index == OPTION_ROUND_TIME:
            self.config.cycle_round_time(step)
        elif self.choice_index == OPTION_TEXT_THEME:
            self.config.cycle_text_theme(step)

    def confirm_choice(self, now: Optional[float] = None) -> None:
        if self.choice_index == OPTION_SAVE:
            self.enter_end_round(now)
        else:
            self.choice_index = OPTION_SAVE
