from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class RoundResult:
    words_typed: int
    words_correct: int
    total_chars: int
    correct_chars: int
    incorrect_chars: int
    word_accuracy: float
    char_accuracy: float


# ---------------------------
# Typing math
# ---------------------------

def char_match_count(typed: str, target: str) -> int:
    n = min(len(typed), len(target))
    good = 0
    for i in range(n):
        if typed[i] == target[i]:
            good += 1
    return good


def percentage(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return 100.0 * part / whole


def score_round(
    typed_words: Sequence[str],
    target_words: Sequence[str],
    words_typed: int,
) -> RoundResult:
    """
    Compare the first ``words_typed`` slots of ``typed_words`` with
    ``target_words``.

    An exact match credits every character; otherwise characters are
    credited position by position up to the shorter word. ``total_chars``
    counts typed characters, not target characters. Both percentages are
    0.0 when nothing was typed.
    """
    if words_typed < 0:
        raise ValueError(f"words_typed must be non-negative, got {words_typed}")
    words_typed = min(words_typed, len(typed_words), len(target_words))

    total_chars = 0
    correct_chars = 0
    words_correct = 0
    for typed, target in zip(typed_words[:words_typed], target_words[:words_typed]):
        total_chars += len(typed)
        if typed == target:
            words_correct += 1
            correct_chars += len(typed)
        else:
            correct_chars += char_match_count(typed, target)

    return RoundResult(
        words_typed=words_typed,
        words_correct=words_correct,
        total_chars=total_chars,
        correct_chars=correct_chars,
        incorrect_chars=total_chars - correct_chars,
        word_accuracy=percentage(words_correct, words_typed),
        char_accuracy=percentage(correct_chars, total_chars),
    )


def scale_wpm(words: int, round_seconds: int) -> int:
    """Word count over a round of ``round_seconds``, normalised to a 60s rate."""
    if round_seconds <= 0:
        return 0
    return int(words * 60 / round_seconds)
