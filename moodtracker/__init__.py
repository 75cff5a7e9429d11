"""Thematic analysis core for mood journal entries.

Public entrypoints:
- ThematicAnalyzer(catalog, ...).analyze(entries)
- extract_keywords(text)
- top_items(record, n), theme_color(label, opacity)
"""

from .domain.aggregation import theme_color, top_items
from .domain.analyzer import ThematicAnalyzer
from .domain.keywords import extract_keywords
from .domain.models import AnalysisResult, JournalEntry
from .domain.themes import ThemeCatalog

__version__ = "0.1.0"

__all__ = [
    "ThematicAnalyzer",
    "ThemeCatalog",
    "AnalysisResult",
    "JournalEntry",
    "extract_keywords",
    "top_items",
    "theme_color",
]
