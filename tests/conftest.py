import random

import pytest

from terminal_type.config import Config
from terminal_type.leaderboard import LeaderboardStore
from terminal_type.session import TypingSession


@pytest.fixture
def store(tmp_path):
    return LeaderboardStore(tmp_path / "leaderboard.txt")


@pytest.fixture
def session(store):
    return TypingSession(Config(), store, random.Random(42))
