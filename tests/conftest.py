import itertools

import pytest

from moodtracker.domain.analyzer import ThematicAnalyzer
from moodtracker.domain.models import JournalEntry
from moodtracker.domain.themes import ThemeCatalog
from moodtracker.infra.paths import THEME_CATALOG_PATH

_ids = itertools.count(1)


def entry_dict(
    reason="",
    level=0,
    feeling="Happy",
    timestamp="2024-03-01T10:00:00Z",
    **extra,
):
    d = {
        "id": f"e{next(_ids)}",
        "functionLevel": level,
        "feeling": feeling,
        "reason": reason,
        "timestamp": timestamp,
    }
    d.update(extra)
    return d


@pytest.fixture
def make_entry():
    def _make(*args, **kwargs):
        return JournalEntry.model_validate(entry_dict(*args, **kwargs))

    return _make


@pytest.fixture(scope="session")
def catalog():
    return ThemeCatalog.from_yaml(THEME_CATALOG_PATH)


@pytest.fixture(scope="session")
def analyzer(catalog):
    return ThematicAnalyzer(catalog)


@pytest.fixture
def small_catalog():
    return ThemeCatalog({
        "Work": ["work", "boss"],
        "Family": ["mom", "dad"],
        "Sleep": ["sleep", "tired"],
    })


@pytest.fixture
def small_analyzer(small_catalog):
    return ThematicAnalyzer(small_catalog)


@pytest.fixture
def entry_payload():
    return entry_dict
