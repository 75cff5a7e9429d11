"""
Service entry points used by the FastAPI routes and the CLI.

Raw entry payloads are validated here, the shared analyzer is built once per
process, and anything unexpected from the lower layers becomes AnalysisError.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Optional, Sequence

from moodtracker.core.config import AnalysisConfig, load_config
from moodtracker.domain.analyzer import ThematicAnalyzer
from moodtracker.exceptions import AnalysisError, ConfigError, EntryDataError
from moodtracker.infra.entry_repo import parse_entries
from moodtracker.usecases.analyze_journal import (
    run_context_analysis_usecase,
    run_theme_analysis_usecase,
)

logger = logging.getLogger(__name__)


@lru_cache
def get_config() -> AnalysisConfig:
    return load_config()


# catalog/stopwords are loaded once per process (never per request)
@lru_cache
def get_analyzer() -> ThematicAnalyzer:
    analyzer = ThematicAnalyzer.from_config(get_config())
    logger.info(
        "ThematicAnalyzer ready (strategy=%s, themes=%d)",
        analyzer.strategy, len(analyzer.catalog),
    )
    return analyzer


def analyze_journal(
    entries: Sequence[Any],
    strategy: Optional[str] = None,
    time_range: str = "all",
) -> Dict[str, Any]:
    """
    Thematic analysis for a list of entries (dicts or JournalEntry).

    Returns a JSON-ready dict: result (camelCase keys), charts, summary and
    the entry-count gate.
    """
    parsed = parse_entries(entries)

    try:
        out = run_theme_analysis_usecase(
            parsed,
            get_analyzer(),
            strategy=strategy,
            time_range=time_range,
            min_entries=get_config().min_entries,
        )
    except (EntryDataError, ConfigError):
        raise
    except Exception as e:
        raise AnalysisError(f"Thematic analysis failed: {e}") from e

    logger.info(
        "Thematic analysis done: %d entries, %d themes (sufficient=%s)",
        out["entry_count"], len(out["result"].theme_frequency), out["sufficient_entries"],
    )

    out["result"] = out["result"].model_dump(by_alias=True)
    return out


def analyze_context(entries: Sequence[Any], time_range: str = "all") -> Dict[str, Any]:
    """Location context analysis for a list of entries."""
    parsed = parse_entries(entries)

    try:
        out = run_context_analysis_usecase(
            parsed,
            time_range=time_range,
            min_entries=get_config().min_entries,
        )
    except EntryDataError:
        raise
    except Exception as e:
        raise AnalysisError(f"Context analysis failed: {e}") from e

    out["summary"] = out["summary"].model_dump(by_alias=True)
    return out
