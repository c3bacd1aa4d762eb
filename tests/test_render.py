from terminal_type.leaderboard import ScoreEntry
from terminal_type.render import (
    CharState,
    char_state,
    render_leaderboard,
    render_options,
    render_prompt,
    render_summary,
    visible_range,
)


def setup_words(session, targets, typed, word_index):
    session.target_words = list(targets)
    session.typed_words = list(typed)
    session.word_index = word_index
    session.char_index = len(typed[word_index])


def test_char_classification(session):
    setup_words(session, ["cat", "dog", "owl"], ["cut", "d"], 1)
    assert char_state(session, 0, 0) is CharState.CORRECT
    assert char_state(session, 0, 1) is CharState.INCORRECT
    assert char_state(session, 0, 2) is CharState.CORRECT
    assert char_state(session, 1, 0) is CharState.CORRECT
    assert char_state(session, 1, 1) is CharState.CURSOR
    assert char_state(session, 1, 2) is CharState.UNTYPED
    assert char_state(session, 2, 0) is CharState.UNTYPED


def test_short_submitted_word_leaves_rest_untyped(session):
    setup_words(session, ["river", "flag"], ["ri", ""], 1)
    assert char_state(session, 0, 1) is CharState.CORRECT
    assert char_state(session, 0, 2) is CharState.UNTYPED
    assert char_state(session, 1, 0) is CharState.CURSOR


def test_prompt_shows_overflow(session):
    setup_words(session, ["cat", "dog"], ["catty", ""], 1)
    assert render_prompt(session).plain == "catty dog "


def test_visible_range_slides():
    assert visible_range(0, 60) == (0, 60)
    assert visible_range(69, 200) == (0, 90)
    assert visible_range(70, 200) == (40, 130)
    assert visible_range(110, 200) == (80, 170)
    assert visible_range(199, 200) == (110, 200)


def test_summary_before_and_after_round(session):
    assert "No round finished yet" in render_summary(session).plain
    session.start_timer(now=0.0)
    session.tick(now=30.0)
    plain = render_summary(session).plain
    assert "WPM: 0" in plain
    assert "CHAR ACCURACY: 0.0 %" in plain
    assert "30 Seconds round" in plain


def test_leaderboard_panel():
    assert "No saved runs yet." in render_leaderboard(None).plain
    plain = render_leaderboard([ScoreEntry("01-02-2025", 77)]).plain
    assert " 1." in plain
    assert "77 wpm" in plain
    assert "01-02-2025" in plain


def test_options_panel(session):
    session.config.cycle_text_theme(2)
    plain = render_options(session).plain
    assert "30 Seconds" in plain
    assert "Technology" in plain
    assert "Save" in plain


def _style_at(text, offset):
    return " ".join(str(span.style) for span in text.spans if span.start <= offset < span.end)


def test_cursor_after_completed_word(session):
    setup_words(session, ["cat", "dog"], ["cat"], 0)
    text = render_prompt(session)
    assert text.plain.startswith("cat ")
    assert "underline" in _style_at(text, 3)
    assert "underline" not in _style_at(text, 2)


def test_cursor_after_overflow(session):
    setup_words(session, ["cat", "dog"], ["catty"], 0)
    text = render_prompt(session)
    assert text.plain.startswith("catty ")
    assert "underline" in _style_at(text, 5)


def test_no_trailing_cursor_mid_word(session):
    setup_words(session, ["cat", "dog"], ["c"], 0)
    text = render_prompt(session)
    assert "underline" in _style_at(text, 1)
    assert "underline" not in _style_at(text, 3)
