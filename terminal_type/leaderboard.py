from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from .config import leaderboard_path

logger = logging.getLogger(__name__)

MAX_ENTRIES = 10
DATE_FORMAT = "%d-%m-%Y"


@dataclass
class ScoreEntry:
    date: str
    wpm: int

    def to_line(self) -> str:
        return f"{self.date} {self.wpm}"

    @classmethod
    def parse(cls, line: str) -> "ScoreEntry":
        """Parse a ``"<date> <wpm>"`` line; raises ``ValueError`` when malformed."""
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"expected '<date> <wpm>', got {line!r}")
        day, wpm_str = parts
        if not wpm_str.isdigit():
            raise ValueError(f"wpm must be a non-negative integer, got {wpm_str!r}")
        return cls(date=day, wpm=int(wpm_str))

    @classmethod
    def today(cls, wpm: int) -> "ScoreEntry":
        return cls(date=date.today().strftime(DATE_FORMAT), wpm=wpm)


def qualifies(entries: Optional[Sequence[ScoreEntry]], wpm: int) -> bool:
    """A score makes the board while it has room, or by beating its lowest entry."""
    if not entries or len(entries) < MAX_ENTRIES:
        return True
    return wpm > min(e.wpm for e in entries)


def merge_score(entries: Sequence[ScoreEntry], new: ScoreEntry) -> List[ScoreEntry]:
    """Insert ``new``, sort by wpm descending (ties keep insertion order), keep the top 10."""
    merged = list(entries) + [new]
    merged.sort(key=lambda e: e.wpm, reverse=True)
    return merged[:MAX_ENTRIES]


class LeaderboardStore:
    """
    Flat text top-10 list, one ``"<date> <wpm>"`` line per entry.

    Missing or empty files mean "no scores yet". I/O problems are logged and
    never raised, so a broken data directory only costs the round's score.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else leaderboard_path()

    def load(self) -> List[ScoreEntry]:
        try:
            contents = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            logger.warning("Could not read leaderboard %s: %s", self.path, exc)
            return []

        entries: List[ScoreEntry] = []
        for lineno, raw in enumerate(contents.splitlines(), start=1):
            try:
                line = raw.decode("utf-8")
                if not line.strip():
                    continue
                entries.append(ScoreEntry.parse(line))
            except ValueError as exc:
                # UnicodeDecodeError is a ValueError too
                logger.warning("Skipping leaderboard line %d: %s", lineno, exc)
        entries.sort(key=lambda e: e.wpm, reverse=True)
        return entries[:MAX_ENTRIES]

    def submit(self, existing: Sequence[ScoreEntry], new: ScoreEntry) -> List[ScoreEntry]:
        return merge_score(existing, new)

    def persist(self, entries: Sequence[ScoreEntry]) -> bool:
        """Overwrite the file with ``entries``. Returns False when nothing was written."""
        lines = [e.to_line() for e in list(entries)[:MAX_ENTRIES]]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write leaderboard %s: %s", self.path, exc)
            return False
        return True

    def record(self, existing: Sequence[ScoreEntry], new: ScoreEntry) -> Optional[List[ScoreEntry]]:
        """Submit ``new`` and persist it if it earns a place.

        Returns the updated board, or None when the score did not qualify
        or could not be written.
        """
        if not qualifies(existing, new.wpm):
            return None
        entries = self.submit(existing, new)
        if not self.persist(entries):
            return None
        logger.info("Recorded %d wpm on the leaderboard", new.wpm)
        return entries
