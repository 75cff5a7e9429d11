# moodtracker/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from moodtracker.exceptions import ConfigError

# Project root (the directory holding pyproject.toml)
BASE_DIR = Path(__file__).resolve().parents[2]

# .env loading
ENV_PATH = BASE_DIR / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

# Log level (LOG_LEVEL in .env, default INFO)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS
# - CORS_ORIGINS="http://localhost:3000,http://127.0.0.1:8000" in .env uses that list
# - otherwise everything is allowed (["*"])
_cors_raw = os.getenv("CORS_ORIGINS", "")
if _cors_raw:
    CORS_ORIGINS = [o.strip() for o in _cors_raw.split(",") if o.strip()]
else:
    CORS_ORIGINS = ["*"]

STRATEGY_CATALOG = "catalog"
STRATEGY_FREQUENCY = "frequency"
STRATEGIES = (STRATEGY_CATALOG, STRATEGY_FREQUENCY)


@dataclass(frozen=True)
class AnalysisConfig:
    """Thematic analysis settings.

    - strategy: "catalog" (fixed theme catalog) or "frequency" (themes discovered from word counts)
    - min_entries: entry count below which the result is flagged as sparse
    - frequency_max_themes: how many discovered themes the frequency strategy keeps
    - frequency_min_count: minimum word count for a discovered theme
    - catalog_path: theme catalog YAML override (None = bundled catalog)
    - stopwords_path: YAML list replacing the default stopword set (None = defaults)
    """

    strategy: str = STRATEGY_CATALOG
    min_entries: int = 15
    frequency_max_themes: int = 15
    frequency_min_count: int = 2
    catalog_path: Optional[str] = None
    stopwords_path: Optional[str] = None


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[str]:
    v = (os.getenv(name) or "").strip()
    return v or None


def normalize_strategy(value: Optional[str]) -> str:
    """Validate a strategy name; None/empty means the catalog strategy."""
    s = (value or STRATEGY_CATALOG).strip().lower()
    if s not in STRATEGIES:
        raise ConfigError(
            f"Unknown theme strategy '{value}'. Expected one of: {', '.join(STRATEGIES)}"
        )
    return s


def load_config() -> AnalysisConfig:
    """
    Load analysis settings from environment variables.

    Environment variables
    - MOOD_THEME_STRATEGY (default: catalog)
    - MOOD_MIN_ENTRIES (default: 15)
    - MOOD_FREQUENCY_MAX_THEMES (default: 15)
    - MOOD_FREQUENCY_MIN_COUNT (default: 2)
    - MOOD_THEME_CATALOG_PATH (default: bundled moodtracker/data/theme_catalog.yaml)
    - MOOD_STOPWORDS_PATH (default: built-in stopword set)
    """
    return AnalysisConfig(
        strategy=normalize_strategy(os.getenv("MOOD_THEME_STRATEGY")),
        min_entries=_env_int("MOOD_MIN_ENTRIES", 15),
        frequency_max_themes=_env_int("MOOD_FREQUENCY_MAX_THEMES", 15),
        frequency_min_count=_env_int("MOOD_FREQUENCY_MIN_COUNT", 2),
        catalog_path=_env_path("MOOD_THEME_CATALOG_PATH"),
        stopwords_path=_env_path("MOOD_STOPWORDS_PATH"),
    )
