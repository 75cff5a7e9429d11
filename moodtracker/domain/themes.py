# moodtracker/domain/themes.py
"""
Theme catalog and per-entry theme scoring.

Two strategies produce a ThemeScorer (keywords -> {theme: score}):

- catalog  : fixed catalog of named themes, exact match 1.0 / partial match 0.5
- frequency: themes discovered from the most frequent words of the whole collection
"""
from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Sequence, Tuple

import yaml

from moodtracker.exceptions import CatalogLoadError

logger = logging.getLogger(__name__)

EXACT_MATCH_SCORE = 1.0
PARTIAL_MATCH_SCORE = 0.5

# keywords of one entry -> {theme: score}, zero-score themes left out
ThemeScorer = Callable[[Sequence[str]], Dict[str, float]]


class ThemeCatalog:
    """Read-only mapping theme name -> ordered lowercase keywords."""

    def __init__(self, themes: Dict[str, Sequence[str]]):
        self._themes: Dict[str, Tuple[str, ...]] = {}
        self._keyword_sets: Dict[str, frozenset] = {}

        for name, keywords in themes.items():
            # dedup (order kept)
            words = tuple(dict.fromkeys(k.strip().lower() for k in keywords if k and k.strip()))
            if not words:
                raise CatalogLoadError(f"Theme '{name}' has no keywords")
            self._themes[name] = words
            self._keyword_sets[name] = frozenset(words)

    @classmethod
    def from_yaml(cls, path: Path) -> "ThemeCatalog":
        """Load the catalog from YAML (theme_catalog.entries[].theme / keywords)."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise CatalogLoadError(f"Cannot read theme catalog {path}: {e}") from e

        entries = (data.get("theme_catalog") or {}).get("entries") if isinstance(data, dict) else None
        if not isinstance(entries, list) or not entries:
            raise CatalogLoadError(f"Theme catalog {path} has no theme_catalog.entries list")

        themes: Dict[str, List[str]] = {}
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise CatalogLoadError(f"Theme catalog entry #{i} is not a mapping")
            name = str(entry.get("theme") or "").strip()
            keywords = entry.get("keywords")
            if not name or not isinstance(keywords, list):
                raise CatalogLoadError(f"Theme catalog entry #{i} needs 'theme' and a 'keywords' list")
            if name in themes:
                raise CatalogLoadError(f"Duplicate theme in catalog: {name}")
            themes[name] = [str(k) for k in keywords]

        catalog = cls(themes)
        logger.info("Loaded theme catalog: %d themes (%s)", len(catalog), path)
        return catalog

    @property
    def names(self) -> List[str]:
        return list(self._themes)

    def keywords(self, theme: str) -> Tuple[str, ...]:
        return self._themes[theme]

    def is_exact(self, theme: str, keyword: str) -> bool:
        return keyword in self._keyword_sets[theme]

    def __iter__(self) -> Iterator[str]:
        return iter(self._themes)

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, theme: object) -> bool:
        return theme in self._themes


def _is_partial_match(keyword: str, theme_words: Iterable[str]) -> bool:
    # symmetric: "art" matches "start" and "running" matches "run"
    return any(keyword in tw or tw in keyword for tw in theme_words)


def score_catalog_themes(keywords: Sequence[str], catalog: ThemeCatalog) -> Dict[str, float]:
    """
    Score one entry's keywords against the catalog.

    Per keyword and theme: 1.0 on exact match, else 0.5 if the keyword is a
    substring of (or contains) any theme keyword. A keyword adds at most one
    partial score per theme.
    """
    scores: Dict[str, float] = {}

    for keyword in keywords:
        for theme in catalog:
            if catalog.is_exact(theme, keyword):
                scores[theme] = scores.get(theme, 0.0) + EXACT_MATCH_SCORE
            elif _is_partial_match(keyword, catalog.keywords(theme)):
                scores[theme] = scores.get(theme, 0.0) + PARTIAL_MATCH_SCORE

    # catalog order, so the aggregate maps are stable
    return {theme: scores[theme] for theme in catalog if theme in scores}


def catalog_scorer(catalog: ThemeCatalog) -> ThemeScorer:
    def score(keywords: Sequence[str]) -> Dict[str, float]:
        return score_catalog_themes(keywords, catalog)

    return score


def theme_label(word: str) -> str:
    """First letter upper-cased, the rest untouched ("work" -> "Work")."""
    return word[:1].upper() + word[1:]


def _frequent_words(
    keyword_lists: Iterable[Sequence[str]], max_themes: int, min_count: int
) -> List[Tuple[str, int]]:
    counts: Counter = Counter()
    for keywords in keyword_lists:
        counts.update(keywords)

    frequent = [(w, c) for w, c in counts.items() if c >= min_count]
    frequent.sort(key=lambda wc: wc[1], reverse=True)  # stable
    return frequent[:max(0, max_themes)]


def discover_frequency_themes(
    keyword_lists: Iterable[Sequence[str]],
    *,
    max_themes: int = 15,
    min_count: int = 2,
) -> Dict[str, int]:
    """
    Discover themes from word frequency over the whole collection.

    Words seen at least min_count times, top max_themes by count (ties keep
    first-seen order). Returns {label: collection count}.
    """
    return {theme_label(w): c for w, c in _frequent_words(keyword_lists, max_themes, min_count)}


def frequency_scorer(
    keyword_lists: Iterable[Sequence[str]],
    *,
    max_themes: int = 15,
    min_count: int = 2,
) -> ThemeScorer:
    """Scorer counting exact occurrences of each discovered theme word."""
    # label -> the word itself; lower() does not invert upper() for every character
    theme_words = {
        theme_label(w): w for w, _ in _frequent_words(keyword_lists, max_themes, min_count)
    }
    logger.debug("Frequency themes discovered: %s", list(theme_words))

    def score(keywords: Sequence[str]) -> Dict[str, float]:
        out: Dict[str, float] = {}
        for theme, word in theme_words.items():
            count = sum(1 for k in keywords if k == word)
            if count > 0:
                out[theme] = float(count)
        return out

    return score
