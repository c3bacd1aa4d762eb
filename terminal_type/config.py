from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

APP_NAME = "TerminalType"


# ---------------------------
# Paths
# ---------------------------

def default_data_dir() -> Path:
    """
    Local-only storage:
    - macOS: ~/Library/Application Support/TerminalType
    - Linux: $XDG_DATA_HOME/TerminalType or ~/.local/share/TerminalType
    """
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / APP_NAME
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return home / ".local" / "share" / APP_NAME


def leaderboard_path() -> Path:
    return default_data_dir() / "leaderboard.txt"


def config_path() -> Path:
    return default_data_dir() / "config.json"


def log_path() -> Path:
    return default_data_dir() / "terminal-type.log"


# ---------------------------
# Enumerated choices
# ---------------------------

class RoundTime(Enum):
    THIRTY = 30
    MINUTE = 60
    TWO_MINUTES = 120
    FIVE_MINUTES = 300

    @property
    def seconds(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return _ROUND_TIME_LABELS[self]


_ROUND_TIME_LABELS = {
    RoundTime.THIRTY: "30 Seconds",
    RoundTime.MINUTE: "1 Minute",
    RoundTime.TWO_MINUTES: "2 Minutes",
    RoundTime.FIVE_MINUTES: "5 Minutes",
}


class TextTheme(Enum):
    DEFAULT = "default"
    LOREM = "lorem"
    TECH = "tech"
    FOOD = "food"

    @property
    def label(self) -> str:
        return _TEXT_THEME_LABELS[self]


_TEXT_THEME_LABELS = {
    TextTheme.DEFAULT: "Default",
    TextTheme.LOREM: "Lorem Ipsum",
    TextTheme.TECH: "Technology",
    TextTheme.FOOD: "Food",
}

ROUND_TIMES: List[RoundTime] = list(RoundTime)
TEXT_THEMES: List[TextTheme] = list(TextTheme)


def _check_index(name: str, index: int, options: list) -> None:
    if not isinstance(index, int) or isinstance(index, bool):
        raise ValueError(f"Invalid {name} {index!r}")
    if not 0 <= index < len(options):
        raise ValueError(f"Invalid {name} {index}")


@dataclass
class Config:
    """User choices carried from one round to the next.

    Indices point into ``ROUND_TIMES`` and ``TEXT_THEMES``. An index outside
    those tables is a programming error and raises ``ValueError``.
    """

    round_time_index: int = 0
    text_theme_index: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        _check_index("round_time_index", self.round_time_index, ROUND_TIMES)
        _check_index("text_theme_index", self.text_theme_index, TEXT_THEMES)

    @property
    def round_time(self) -> RoundTime:
        self.validate()
        return ROUND_TIMES[self.round_time_index]

    @property
    def text_theme(self) -> TextTheme:
        self.validate()
        return TEXT_THEMES[self.text_theme_index]

    def cycle_round_time(self, step: int) -> None:
        self.validate()
        self.round_time_index = (self.round_time_index + step) % len(ROUND_TIMES)

    def cycle_text_theme(self, step: int) -> None:
        self.validate()
        self.text_theme_index = (self.text_theme_index + step) % len(TEXT_THEMES)

    def copy(self) -> "Config":
        return replace(self)

    @classmethod
    def from_choices(cls, round_time: RoundTime, text_theme: TextTheme) -> "Config":
        return cls(ROUND_TIMES.index(round_time), TEXT_THEMES.index(text_theme))


# ---------------------------
# Config file
# ---------------------------

def _lookup_round_time(value: object) -> Optional[RoundTime]:
    # exact ints only: 30.9 or "60" are not durations
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    try:
        return RoundTime(value)
    except ValueError:
        return None


def _lookup_text_theme(value: object) -> Optional[TextTheme]:
    if not isinstance(value, str):
        return None
    wanted = value.strip().lower()
    for theme in TEXT_THEMES:
        if wanted in (theme.value, theme.label.lower()):
            return theme
    return None


def load_config(path: Optional[Path] = None) -> Config:
    """Read starting choices from a JSON file, e.g.
    ``{"duration_sec": 60, "word_theme": "tech"}``.

    A missing file gives the defaults. Unknown values are reported and the
    default is used for that field only.
    """
    path = path or config_path()
    if not path.exists():
        return Config()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return Config()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return Config()

    round_time = RoundTime.THIRTY
    if "duration_sec" in data:
        found = _lookup_round_time(data["duration_sec"])
        if found is None:
            logger.warning("Unsupported duration_sec %r, using %s", data["duration_sec"], round_time.label)
        else:
            round_time = found

    text_theme = TextTheme.DEFAULT
    if "word_theme" in data:
        found_theme = _lookup_text_theme(data["word_theme"])
        if found_theme is None:
            logger.warning("Unknown word_theme %r, using %s", data["word_theme"], text_theme.label)
        else:
            text_theme = found_theme

    return Config.from_choices(round_time, text_theme)
