# moodtracker/domain/analyzer.py
from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import AbstractSet, DefaultDict, Dict, Iterable, List, Optional

from moodtracker.core.config import (
    AnalysisConfig,
    STRATEGY_CATALOG,
    normalize_strategy,
)
from moodtracker.domain.keywords import extract_keywords
from moodtracker.domain.models import AnalysisResult, DateCount, JournalEntry, LevelCount
from moodtracker.domain.stopwords import DEFAULT_STOPWORDS, load_stopwords
from moodtracker.domain.themes import (
    ThemeCatalog,
    ThemeScorer,
    catalog_scorer,
    frequency_scorer,
)

logger = logging.getLogger(__name__)


class ThematicAnalyzer:
    def __init__(
        self,
        catalog: ThemeCatalog,
        *,
        strategy: str = STRATEGY_CATALOG,
        stopwords: Optional[AbstractSet[str]] = None,
        frequency_max_themes: int = 15,
        frequency_min_count: int = 2,
    ):
        """
        Thematic analyzer over a static collection of journal entries.

        Args:
            catalog: theme catalog used by the "catalog" strategy
            strategy: default strategy ("catalog" or "frequency")
            stopwords: stopword set (None = built-in defaults)
            frequency_max_themes / frequency_min_count: "frequency" strategy limits
        """
        self.catalog = catalog
        self.strategy = normalize_strategy(strategy)
        self.stopwords = DEFAULT_STOPWORDS if stopwords is None else stopwords
        self.frequency_max_themes = frequency_max_themes
        self.frequency_min_count = frequency_min_count

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> "ThematicAnalyzer":
        """Build the analyzer from settings (catalog file, stopwords, strategy)."""
        from moodtracker.infra.paths import THEME_CATALOG_PATH

        catalog_path = Path(config.catalog_path) if config.catalog_path else THEME_CATALOG_PATH
        return cls(
            ThemeCatalog.from_yaml(catalog_path),
            strategy=config.strategy,
            stopwords=load_stopwords(config.stopwords_path),
            frequency_max_themes=config.frequency_max_themes,
            frequency_min_count=config.frequency_min_count,
        )

    def _build_scorer(self, strategy: str, keyword_lists: List[List[str]]) -> ThemeScorer:
        if strategy == STRATEGY_CATALOG:
            return catalog_scorer(self.catalog)
        return frequency_scorer(
            keyword_lists,
            max_themes=self.frequency_max_themes,
            min_count=self.frequency_min_count,
        )

    def analyze(
        self, entries: Iterable[JournalEntry], strategy: Optional[str] = None
    ) -> AnalysisResult:
        """
        Fold every entry into theme / word statistics.

        Returns:
            AnalysisResult. Empty input gives all-empty maps.
        """
        entries = list(entries)
        strategy = normalize_strategy(strategy) if strategy else self.strategy

        keyword_lists = [extract_keywords(e.reason, self.stopwords) for e in entries]
        scorer = self._build_scorer(strategy, keyword_lists)

        theme_frequency: Dict[str, float] = {}
        over_time: DefaultDict[str, Dict[str, float]] = defaultdict(dict)   # theme -> {date: count}
        by_level: DefaultDict[str, Dict[int, float]] = defaultdict(dict)    # theme -> {level: count}
        by_feeling: DefaultDict[str, Dict[str, float]] = defaultdict(dict)  # theme -> {feeling: count}
        word_frequency: Dict[str, int] = {}
        positive_words: Dict[str, int] = {}
        negative_words: Dict[str, int] = {}

        for entry, words in zip(entries, keyword_lists):
            date = entry.date_key
            level = entry.function_level
            feeling = entry.feeling_label

            for word in words:
                word_frequency[word] = word_frequency.get(word, 0) + 1
                if level > 0:
                    positive_words[word] = positive_words.get(word, 0) + 1
                elif level < 0:
                    negative_words[word] = negative_words.get(word, 0) + 1

            for theme, score in scorer(words).items():
                if score <= 0:
                    continue
                theme_frequency[theme] = theme_frequency.get(theme, 0.0) + score

                dates = over_time[theme]
                dates[date] = dates.get(date, 0.0) + score

                levels = by_level[theme]
                levels[level] = levels.get(level, 0.0) + score

                feelings = by_feeling[theme]
                feelings[feeling] = feelings.get(feeling, 0.0) + score

        result = AnalysisResult(
            theme_frequency=theme_frequency,
            themes_over_time={
                theme: [DateCount(date=d, count=c) for d, c in sorted(dates.items())]
                for theme, dates in over_time.items()
            },
            themes_by_function_level={
                theme: [LevelCount(level=lv, count=c) for lv, c in sorted(levels.items())]
                for theme, levels in by_level.items()
            },
            themes_by_feeling={theme: dict(f) for theme, f in by_feeling.items()},
            word_frequency=word_frequency,
            words_by_function_level={"positive": positive_words, "negative": negative_words},
            strategy=strategy,
            entry_count=len(entries),
        )

        logger.debug(
            "Analyzed %d entries (strategy=%s): %d themes, %d distinct words",
            len(entries), strategy, len(theme_frequency), len(word_frequency),
        )
        return result
