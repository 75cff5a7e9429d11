import pytest

from moodtracker.core.config import AnalysisConfig, load_config, normalize_strategy
from moodtracker.exceptions import ConfigError

_ENV = (
    "MOOD_THEME_STRATEGY",
    "MOOD_MIN_ENTRIES",
    "MOOD_FREQUENCY_MAX_THEMES",
    "MOOD_FREQUENCY_MIN_COUNT",
    "MOOD_THEME_CATALOG_PATH",
    "MOOD_STOPWORDS_PATH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_config() == AnalysisConfig()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MOOD_THEME_STRATEGY", "Frequency")
    monkeypatch.setenv("MOOD_MIN_ENTRIES", "5")
    monkeypatch.setenv("MOOD_FREQUENCY_MIN_COUNT", "3")
    monkeypatch.setenv("MOOD_THEME_CATALOG_PATH", "/tmp/catalog.yaml")
    monkeypatch.setenv("MOOD_STOPWORDS_PATH", "  ")

    cfg = load_config()
    assert cfg.strategy == "frequency"
    assert cfg.min_entries == 5
    assert cfg.frequency_min_count == 3
    assert cfg.catalog_path == "/tmp/catalog.yaml"
    assert cfg.stopwords_path is None


def test_bad_int_falls_back(monkeypatch):
    monkeypatch.setenv("MOOD_MIN_ENTRIES", "abc")
    assert load_config().min_entries == 15


def test_unknown_strategy(monkeypatch):
    monkeypatch.setenv("MOOD_THEME_STRATEGY", "llm")
    with pytest.raises(ConfigError):
        load_config()


@pytest.mark.parametrize("raw,expected", [(None, "catalog"), ("", "catalog"), (" Frequency ", "frequency")])
def test_normalize_strategy(raw, expected):
    assert normalize_strategy(raw) == expected
