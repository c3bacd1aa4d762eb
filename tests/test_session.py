from terminal_type.config import Config, RoundTime
from terminal_type.leaderboard import ScoreEntry
from terminal_type.session import COOLDOWN_SEC, Screen, TypingSession
from terminal_type.words import INITIAL_WORDS


def type_word(session, word):
    for ch in word:
        session.type_char(ch)
    session.next_word()


def test_fresh_session(session):
    assert session.screen is Screen.MAIN
    assert session.word_index == 0
    assert session.char_index == 0
    assert session.typed_words == [""]
    assert len(session.target_words) == INITIAL_WORDS
    assert session.start_time is None
    assert session.time_remaining == 30


def test_typing_and_space(session):
    session.type_char("a")
    session.type_char("b")
    assert session.typed_words == ["ab"]
    assert session.char_index == 2
    session.next_word()
    assert session.word_index == 1
    assert session.char_index == 0
    assert session.typed_words == ["ab", ""]


def test_space_on_empty_word_does_nothing(session):
    session.next_word()
    assert session.word_index == 0
    assert session.typed_words == [""]


def test_backspace_at_start_is_noop(session):
    session.backspace()
    assert session.word_index == 0
    assert session.char_index == 0
    assert session.typed_words == [""]


def test_backspace_returns_to_previous_word(session):
    type_word(session, "abc")
    session.backspace()
    assert session.word_index == 0
    assert session.char_index == 3
    assert session.typed_words == ["abc"]
    session.backspace()
    assert session.typed_words == ["ab"]
    assert session.char_index == 2


def test_stream_extends_before_running_dry(session):
    for _ in range(45):
        type_word(session, "x")
    assert len(session.target_words) > INITIAL_WORDS
    assert len(session.typed_words) <= len(session.target_words) - 10
    assert len(session.typed_words) == session.word_index + 1


def test_timer_counts_down_then_ends_round(session):
    session.start_timer(now=100.0)
    session.start_timer(now=105.0)
    assert session.start_time == 100.0

    session.tick(now=112.4)
    assert session.screen is Screen.MAIN
    assert session.time_remaining == 18

    session.tick(now=130.0)
    assert session.screen is Screen.END_ROUND
    assert session.start_time is None
    assert session.cooldown_start == 130.0
    assert session.time_remaining == 0

    session.tick(now=200.0)
    assert session.time_remaining == 0
    assert session.screen is Screen.END_ROUND


def test_tick_before_first_key_does_nothing(session):
    session.tick(now=1000.0)
    assert session.screen is Screen.MAIN
    assert session.time_remaining == 30


def test_round_end_scores_and_records(session, store):
    session.start_timer(now=0.0)
    for target in session.target_words[:4]:
        type_word(session, target)
    type_word(session, "zzz")
    session.type_char("q")
    session.tick(now=30.0)

    result = session.result
    assert result.words_typed == 5
    assert result.words_correct == 4
    assert session.wpm == 8
    assert session.raw_wpm == 10
    assert session.top_scores == store.load()
    assert [e.wpm for e in store.load()] == [8]


def test_wpm_scales_with_round_length(store):
    session = TypingSession(Config(round_time_index=1), store)
    assert session.round_time is RoundTime.MINUTE
    session.start_timer(now=0.0)
    for target in session.target_words[:6]:
        type_word(session, target)
    session.tick(now=60.0)
    assert session.wpm == 6


def test_full_board_only_takes_a_better_score(session, store):
    board = [ScoreEntry("01-01-2025", w) for w in range(19, 9, -1)]
    store.persist(board)
    session.refresh_leaderboard()
    session.start_timer(now=0.0)
    session.tick(now=31.0)
    assert session.wpm == 0
    assert store.load() == board


def test_refresh_keeps_cache_on_empty_load(session, store):
    session.top_scores = [ScoreEntry("01-01-2025", 33)]
    session.refresh_leaderboard()
    assert session.top_scores == [ScoreEntry("01-01-2025", 33)]
    store.path.write_text("broken line here\n", encoding="utf-8")
    session.refresh_leaderboard()
    assert session.top_scores == [ScoreEntry("01-01-2025", 33)]
    store.persist([ScoreEntry("02-02-2025", 44)])
    session.refresh_leaderboard()
    assert session.top_scores == [ScoreEntry("02-02-2025", 44)]


def test_unwritable_store_keeps_session_usable(tmp_path):
    from terminal_type.leaderboard import LeaderboardStore

    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    session = TypingSession(store=LeaderboardStore(blocker / "leaderboard.txt"))
    session.start_timer(now=0.0)
    session.tick(now=30.0)
    assert session.screen is Screen.END_ROUND


def test_cooldown(session):
    session.enter_end_round(now=10.0)
    assert not session.accepts_input(now=10.0 + COOLDOWN_SEC / 2)
    assert session.accepts_input(now=10.0 + COOLDOWN_SEC)


def test_restart_preserves_config(session):
    session.config.cycle_text_theme(1)
    old_words = list(session.target_words)
    type_word(session, "abc")
    fresh = session.restart()
    assert fresh is not session
    assert fresh.word_index == 0
    assert fresh.char_index == 0
    assert fresh.typed_words == [""]
    assert fresh.top_scores is None
    assert fresh.config == session.config
    assert fresh.config is not session.config
    assert fresh.target_words != old_words


def test_options_edit_only_applies_on_restart(session):
    session.open_options()
    session.cycle_choice(1)
    assert session.round_time is RoundTime.THIRTY
    assert session.config.round_time is RoundTime.MINUTE
    assert session.restart().round_time is RoundTime.MINUTE


def test_round_after_corrupt_line_keeps_existing_scores(session, store):
    good = b"".join(b"0%d-01-2025 %d\n" % (i, 50 + i) for i in range(1, 10))
    store.path.write_bytes(good + b"\xff\xfe-01-2025 5\n")
    session.refresh_leaderboard()
    assert len(session.top_scores) == 9

    session.start_timer(now=0.0)
    session.tick(now=30.0)
    saved = store.load()
    assert len(saved) == 10
    assert [e.wpm for e in saved[:9]] == list(range(59, 50, -1))
    assert saved[-1].wpm == 0


def test_failed_write_does_not_show_unsaved_score(tmp_path):
    from terminal_type.leaderboard import LeaderboardStore

    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    session = TypingSession(store=LeaderboardStore(blocker / "leaderboard.txt"))
    session.start_timer(now=0.0)
    session.tick(now=30.0)
    assert session.top_scores is None
