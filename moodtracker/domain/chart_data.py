# moodtracker/domain/chart_data.py
"""
Chart-ready series built from an AnalysisResult.

Colors come from theme_color, so a theme keeps its color in every chart.
"""
from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from moodtracker.domain.aggregation import theme_color, top_items
from moodtracker.domain.models import AnalysisResult

TOP_THEMES_BAR = 10
TOP_WORDS_PIE = 8
TOP_THEMES_TIMELINE = 5
TOP_WORDS_BY_LEVEL = 7


def build_frequency_series(record: Dict[str, float], n: int, label: str = "") -> Dict[str, Any]:
    """Top-N labels/values with fill (0.7) and border (1) colors."""
    top = top_items(record, n)
    return {
        "label": label,
        "labels": [k for k, _ in top],
        "data": [v for _, v in top],
        "backgroundColor": [theme_color(k, 0.7) for k, _ in top],
        "borderColor": [theme_color(k) for k, _ in top],
    }


def build_theme_timeline(result: AnalysisResult, top_n: int = TOP_THEMES_TIMELINE) -> pd.DataFrame:
    """
    Dates x top-N themes table.

    Rows: every date on which any theme appeared (ascending).
    Columns: top-N themes by total frequency. Missing cells are 0.
    """
    themes = [t for t, _ in top_items(result.theme_frequency, top_n)]
    dates = sorted({dc.date for series in result.themes_over_time.values() for dc in series})

    frame = pd.DataFrame(0.0, index=pd.Index(dates, name="date"), columns=themes)
    for theme in themes:
        for dc in result.themes_over_time.get(theme, []):
            frame.at[dc.date, theme] = dc.count
    return frame


def _timeline_series(frame: pd.DataFrame) -> Dict[str, Any]:
    return {
        "labels": [str(d) for d in frame.index],
        "datasets": [
            {
                "label": theme,
                "data": [float(v) for v in frame[theme].tolist()],
                "borderColor": theme_color(theme),
                "backgroundColor": theme_color(theme, 0.1),
            }
            for theme in frame.columns
        ],
    }


def build_chart_payload(result: AnalysisResult) -> Dict[str, Any]:
    """Everything the thematic charts need, in one dict."""
    level_words = result.words_by_function_level
    return {
        "themeFrequency": build_frequency_series(result.theme_frequency, TOP_THEMES_BAR, "Theme Frequency"),
        "wordFrequency": build_frequency_series(result.word_frequency, TOP_WORDS_PIE, "Word Frequency"),
        "themesOverTime": _timeline_series(build_theme_timeline(result)),
        "wordsByFunctionLevel": {
            "positive": build_frequency_series(
                level_words.get("positive", {}), TOP_WORDS_BY_LEVEL, "Positive Function Level"
            ),
            "negative": build_frequency_series(
                level_words.get("negative", {}), TOP_WORDS_BY_LEVEL, "Negative Function Level"
            ),
        },
    }


def top_theme_names(result: AnalysisResult, n: int = 3) -> List[str]:
    return [t for t, _ in top_items(result.theme_frequency, n)]
