from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from moodtracker.domain.analyzer import ThematicAnalyzer
from moodtracker.domain.chart_data import build_chart_payload, top_theme_names
from moodtracker.domain.context import analyze_locations
from moodtracker.domain.filters import filter_by_time_range
from moodtracker.domain.models import AnalysisResult, JournalEntry


def _build_insight_summary(
    result: AnalysisResult,
    entry_count: int,
    min_entries: int,
) -> str:
    """Short plain-text insight shown above the theme charts."""
    if entry_count < min_entries:
        noun = "entry" if entry_count == 1 else "entries"
        return (
            f"You need at least {min_entries} entries for thematic analysis. "
            f"You currently have {entry_count} {noun}."
        )

    top = top_theme_names(result, 3)
    if not top:
        return f"No recurring themes were found in your {entry_count} entries yet."

    parts: List[str] = [
        f"Based on your {entry_count} entries, the most common themes in your "
        f"emotional state are {', '.join(top)}."
    ]

    negative = result.words_by_function_level.get("negative") or {}
    if negative:
        word = max(negative.items(), key=lambda kv: kv[1])[0]
        parts.append(f"The word you use most on low-function days is '{word}'.")

    return " ".join(parts)


def run_theme_analysis_usecase(
    entries: Sequence[JournalEntry],
    analyzer: ThematicAnalyzer,
    *,
    strategy: Optional[str] = None,
    time_range: str = "all",
    min_entries: int = 15,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Thematic analysis of a journal: filter -> analyze -> charts + insight."""
    # 1) time range
    selected = filter_by_time_range(entries, time_range, now=now)

    # 2) analysis (computed even below min_entries, the caller decides what to show)
    result = analyzer.analyze(selected, strategy=strategy)

    # 3) presentation helpers
    charts = build_chart_payload(result)
    summary = _build_insight_summary(result, len(selected), min_entries)

    return {
        "result": result,
        "charts": charts,
        "summary": summary,
        "entry_count": len(selected),
        "min_entries": min_entries,
        "sufficient_entries": len(selected) >= min_entries,
    }


def run_context_analysis_usecase(
    entries: Sequence[JournalEntry],
    *,
    time_range: str = "all",
    min_entries: int = 15,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Location context analysis of a journal."""
    selected = filter_by_time_range(entries, time_range, now=now)
    return {
        "summary": analyze_locations(selected),
        "entry_count": len(selected),
        "min_entries": min_entries,
        "sufficient_entries": len(selected) >= min_entries,
    }
