import json

import pytest

from terminal_type.config import ROUND_TIMES, TEXT_THEMES, Config, RoundTime, TextTheme, load_config


def test_defaults():
    config = Config()
    assert config.round_time is RoundTime.THIRTY
    assert config.text_theme is TextTheme.DEFAULT


@pytest.mark.parametrize("kwargs", [
    {"round_time_index": len(ROUND_TIMES)},
    {"round_time_index": -1},
    {"text_theme_index": len(TEXT_THEMES)},
    {"text_theme_index": "1"},
])
def test_out_of_range_index_fails_fast(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_corrupted_index_fails_on_use():
    config = Config()
    config.text_theme_index = 9
    with pytest.raises(ValueError):
        config.text_theme


def test_cycle_wraps_both_ways():
    config = Config()
    config.cycle_round_time(-1)
    assert config.round_time is RoundTime.FIVE_MINUTES
    config.cycle_round_time(1)
    assert config.round_time is RoundTime.THIRTY
    config.cycle_text_theme(-1)
    assert config.text_theme is TextTheme.FOOD
    config.cycle_text_theme(1)
    assert config.text_theme is TextTheme.DEFAULT


def test_copy_is_independent():
    config = Config(1, 2)
    clone = config.copy()
    clone.cycle_round_time(1)
    assert config.round_time_index == 1
    assert clone.round_time_index == 2


def test_load_config_missing_file(tmp_path):
    assert load_config(tmp_path / "config.json") == Config()


def test_load_config_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"duration_sec": 120, "word_theme": "Tech"}), encoding="utf-8")
    config = load_config(path)
    assert config.round_time is RoundTime.TWO_MINUTES
    assert config.text_theme is TextTheme.TECH


def test_load_config_unknown_values_use_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"duration_sec": 45, "word_theme": "food"}), encoding="utf-8")
    config = load_config(path)
    assert config.round_time is RoundTime.THIRTY
    assert config.text_theme is TextTheme.FOOD


def test_load_config_broken_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == Config()


@pytest.mark.parametrize("duration", [30.9, "60", True, 60.0])
def test_load_config_rejects_inexact_durations(tmp_path, duration):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"duration_sec": duration}), encoding="utf-8")
    assert load_config(path).round_time is RoundTime.THIRTY
