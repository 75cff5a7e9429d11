# moodtracker/domain/keywords.py
from __future__ import annotations

import re
from typing import AbstractSet, List, Optional

from moodtracker.domain.stopwords import DEFAULT_STOPWORDS

# word characters are ASCII only, so "café" -> "caf"
_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")
MIN_KEYWORD_LENGTH = 3


def extract_keywords(
    text: Optional[str], stopwords: Optional[AbstractSet[str]] = None
) -> List[str]:
    """
    Turn free text into candidate keywords.

    lowercase -> strip punctuation -> split on whitespace -> drop tokens of
    2 chars or less -> drop stopwords. Word order and duplicates are kept,
    since frequency counting depends on them.

    >>> extract_keywords("I feel so sad and sad today")
    ['sad', 'sad']
    """
    if not text:
        return []

    stop = DEFAULT_STOPWORDS if stopwords is None else stopwords
    normalized = _NON_WORD.sub("", text.lower())

    return [
        word
        for word in normalized.split()
        if len(word) >= MIN_KEYWORD_LENGTH and word not in stop
    ]
