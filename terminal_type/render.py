from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from rich.text import Text

from .config import ROUND_TIMES, TEXT_THEMES
from .leaderboard import ScoreEntry
from .session import OPTION_ROUND_TIME, OPTION_SAVE, OPTION_TEXT_THEME, Screen, TypingSession

PALETTE: Dict[str, str] = {
    "title": "#e5e7eb",
    "muted": "#64748b",
    "hint": "#93c5fd",
    "ok": "#e5e7eb",
    "bad": "#fca5a5",
    "cursor": "#fde68a",
    "upcoming": "#475569",
    "label": "#fbbf24",
    "value": "#86efac",
    "selected_bg": "#60a5fa",
    "save_bg": "#34d399",
    "selected_fg": "#0b0f14",
}

# Visible slice of the word stream, so the prompt doesn't scroll every word.
WINDOW_SIZE = 90
WINDOW_STEP = 40
WINDOW_BUFFER = 20


class CharState(Enum):
    CURSOR = "cursor"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNTYPED = "untyped"


def char_state(session: TypingSession, word_i: int, char_i: int) -> CharState:
    """Classify target character ``char_i`` of word ``word_i``."""
    if word_i == session.word_index and char_i == session.char_index:
        return CharState.CURSOR
    if word_i >= len(session.typed_words):
        return CharState.UNTYPED
    typed = session.typed_words[word_i]
    if char_i >= len(typed):
        return CharState.UNTYPED
    if typed[char_i] == session.target_words[word_i][char_i]:
        return CharState.CORRECT
    return CharState.INCORRECT


def cursor_after_word(session: TypingSession, word_i: int) -> bool:
    """True when the cursor sits past the last target character of ``word_i``."""
    return word_i == session.word_index and session.char_index >= len(session.target_words[word_i])


def visible_range(word_index: int, total: int) -> Tuple[int, int]:
    start = 0
    threshold = WINDOW_SIZE - WINDOW_BUFFER
    if word_index >= threshold:
        start = ((word_index - threshold) // WINDOW_STEP + 1) * WINDOW_STEP
    start = min(start, max(0, total - WINDOW_SIZE))
    return start, min(total, start + WINDOW_SIZE)


# ---------------------------
# Main screen
# ---------------------------

def _char_style(state: CharState, theme: Dict[str, str]) -> str:
    if state is CharState.CURSOR:
        return f"bold {theme['cursor']} underline"
    if state is CharState.CORRECT:
        return theme["ok"]
    if state is CharState.INCORRECT:
        return f"bold {theme['bad']}"
    return theme["upcoming"]


def render_prompt(session: TypingSession, theme: Dict[str, str] = PALETTE) -> Text:
    text = Text()
    start, end = visible_range(session.word_index, len(session.target_words))
    for i in range(start, end):
        word = session.target_words[i]
        for j in range(len(word)):
            text.append(word[j], style=_char_style(char_state(session, i, j), theme))
        # typed past the end of the target word
        if i < len(session.typed_words) and len(session.typed_words[i]) > len(word):
            text.append(session.typed_words[i][len(word):], style=f"bold {theme['bad']} strike")
        if cursor_after_word(session, i):
            text.append(" ", style=_char_style(CharState.CURSOR, theme))
        else:
            text.append(" ", style="")
    return text


def render_stats(session: TypingSession, theme: Dict[str, str] = PALETTE) -> Text:
    text = Text()
    if session.start_time is None:
        text.append("Type to begin", style=f"bold {theme['label']}")
        text.append("  |  ", style=theme["muted"])
    text.append("Time Remaining ", style=theme["muted"])
    text.append(f"{session.time_remaining}", style=f"bold {theme['label']}")
    text.append("  |  ", style=theme["muted"])
    text.append("Words Typed ", style=theme["muted"])
    text.append(f"{session.word_index}", style=f"bold {theme['value']}")
    text.append("  |  ", style=theme["muted"])
    text.append(f"{session.round_time.label} • {session.text_theme.label}", style=theme["muted"])
    return text


# ---------------------------
# End of round
# ---------------------------

def _stat_line(text: Text, label: str, value: str, theme: Dict[str, str]) -> None:
    text.append(f"{label}: ", style=theme["label"])
    text.append(f"{value}\n", style=f"bold {theme['title']}")


def render_summary(session: TypingSession, theme: Dict[str, str] = PALETTE) -> Text:
    text = Text()
    result = session.result
    text.append("Round Results\n\n", style=f"bold {theme['title']}")
    if result is None:
        text.append("No round finished yet.\n", style=theme["muted"])
        return text
    _stat_line(text, "WPM", f"{session.wpm}", theme)
    _stat_line(text, "RAW WPM", f"{session.raw_wpm}", theme)
    _stat_line(text, "WORD ACCURACY", f"{result.word_accuracy:.1f} %", theme)
    _stat_line(text, "CHAR ACCURACY", f"{result.char_accuracy:.1f} %", theme)
    _stat_line(text, "WORDS TYPED", f"{result.words_typed}", theme)
    _stat_line(text, "WORDS CORRECT", f"{result.words_correct}", theme)
    _stat_line(text, "CHARS TYPED", f"{result.total_chars}", theme)
    _stat_line(text, "CORRECT CHARS", f"{result.correct_chars}", theme)
    _stat_line(text, "INCORRECT CHARS", f"{result.incorrect_chars}", theme)
    _stat_line(text, "TYPE", f"{session.round_time.label} round", theme)
    return text


def render_leaderboard(scores: Optional[List[ScoreEntry]], theme: Dict[str, str] = PALETTE) -> Text:
    text = Text()
    text.append("Top Scores\n", style=f"bold {theme['title']}")
    if not scores:
        text.append("No saved runs yet.\n", style=theme["muted"])
        return text
    for i, s in enumerate(scores, start=1):
        text.append(f"{i:>2}. ", style=theme["hint"])
        text.append(f"{s.wpm:>4} wpm", style=f"bold {theme['title']}")
        text.append("  ", style=theme["muted"])
        text.append(f"{s.date}\n", style=theme["muted"])
    return text


# ---------------------------
# Options
# ---------------------------

def _choice(text: Text, label: str, selected: bool, theme: Dict[str, str], bg_key: str = "selected_bg") -> None:
    if selected:
        text.append(label, style=f"bold {theme['selected_fg']} on {theme[bg_key]}")
    else:
        text.append(label, style=f"bold {theme['title']}")


def render_options(session: TypingSession, theme: Dict[str, str] = PALETTE) -> Text:
    config = session.config
    text = Text(justify="center")
    text.append("User Config\n\n", style=f"bold {theme['hint']}")

    text.append("Round Time\n", style=f"{theme['label']} underline")
    text.append("< ", style=theme["muted"])
    _choice(text, ROUND_TIMES[config.round_time_index].label, session.choice_index == OPTION_ROUND_TIME, theme)
    text.append(" >\n\n", style=theme["muted"])

    text.append("Word Theme\n", style=f"{theme['label']} underline")
    text.append("< ", style=theme["muted"])
    _choice(text, TEXT_THEMES[config.text_theme_index].label, session.choice_index == OPTION_TEXT_THEME, theme)
    text.append(" >\n\n", style=theme["muted"])

    _choice(text, "Save", session.choice_index == OPTION_SAVE, theme, bg_key="save_bg")
    return text


# ---------------------------
# Help
# ---------------------------

def render_help(session: TypingSession, theme: Dict[str, str] = PALETTE) -> Text:
    text = Text()
    if session.screen is Screen.MAIN:
        text.append("Space next word", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("Backspace correct", style=theme["hint"])
    elif session.screen is Screen.END_ROUND:
        text.append("r restart", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("e options", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("q quit", style=theme["hint"])
    else:
        text.append("↑/↓ select", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("←/→ change", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("Enter save", style=theme["hint"])
    text.append("  ", style=theme["muted"])
    text.append("Ctrl+C quit", style=theme["hint"])
    return text
