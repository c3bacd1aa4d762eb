"""Timed typing-speed exercise for the terminal."""

from .config import Config, RoundTime, TextTheme
from .leaderboard import LeaderboardStore, ScoreEntry
from .scoring import RoundResult, score_round
from .session import Screen, TypingSession

__version__ = "0.1.0"

__all__ = [
    "Config",
    "LeaderboardStore",
    "RoundResult",
    "RoundTime",
    "Screen",
    "ScoreEntry",
    "TextTheme",
    "TypingSession",
    "score_round",
]
