import pytest

from moodtracker.domain.analyzer import ThematicAnalyzer
from moodtracker.domain.models import AnalysisResult
from moodtracker.exceptions import ConfigError


def test_empty_input_gives_empty_maps(analyzer):
    result = analyzer.analyze([])

    assert isinstance(result, AnalysisResult)
    assert result.theme_frequency == {}
    assert result.themes_over_time == {}
    assert result.themes_by_function_level == {}
    assert result.themes_by_feeling == {}
    assert result.word_frequency == {}
    assert result.words_by_function_level == {"positive": {}, "negative": {}}
    assert result.entry_count == 0


def test_single_work_entry(analyzer, make_entry):
    result = analyzer.analyze([make_entry("My boss gave me a huge project deadline at work", level=-3)])

    assert result.theme_frequency["Work & Career"] == 4.0
    assert [(d.date, d.count) for d in result.themes_over_time["Work & Career"]] == [("2024-03-01", 4.0)]
    assert result.word_frequency["boss"] == 1


def test_entry_with_empty_reason_is_fine(analyzer, make_entry):
    result = analyzer.analyze([make_entry(""), make_entry(None)])
    assert result.theme_frequency == {}
    assert result.entry_count == 2


def test_aggregates_across_entries(small_analyzer, make_entry):
    entries = [
        make_entry("boss boss", level=3, timestamp="2024-03-02T09:00:00Z"),
        make_entry("boss and mom", level=-2, timestamp="2024-03-01T09:00:00Z"),
        make_entry("tired boss", level=3, timestamp="2024-03-02T21:00:00Z"),
    ]
    result = small_analyzer.analyze(entries)

    assert result.theme_frequency == {"Work": 4.0, "Family": 1.0, "Sleep": 1.0}
    # ascending dates, one tuple per day
    assert [(d.date, d.count) for d in result.themes_over_time["Work"]] == [
        ("2024-03-01", 1.0),
        ("2024-03-02", 3.0),
    ]
    assert result.word_frequency == {"boss": 4, "mom": 1, "tired": 1}


def test_function_level_breakdown_is_ascending_and_unique(small_analyzer, make_entry):
    entries = [
        make_entry("boss", level=5),
        make_entry("boss", level=-4),
        make_entry("boss", level=5),
        make_entry("boss", level=0),
    ]
    series = small_analyzer.analyze(entries).themes_by_function_level["Work"]

    levels = [lc.level for lc in series]
    assert levels == sorted(set(levels))
    assert [(lc.level, lc.count) for lc in series] == [(-4, 1.0), (0, 1.0), (5, 2.0)]


def test_custom_feeling_label_used_for_other(small_analyzer, make_entry):
    entries = [
        make_entry("boss", feeling="Other", customFeeling="Overwhelmed"),
        make_entry("boss", feeling="Other"),
        make_entry("boss", feeling="Sad", customFeeling="ignored"),
        make_entry("boss", feeling=None),
    ]
    by_feeling = small_analyzer.analyze(entries).themes_by_feeling["Work"]

    assert by_feeling == {"Overwhelmed": 1.0, "Other": 1.0, "Sad": 1.0, "Unknown": 1.0}


def test_date_key_is_utc(small_analyzer, make_entry):
    # 23:30 at UTC-5 is already the next day in UTC
    entry = make_entry("boss", timestamp="2024-03-01T23:30:00-05:00")
    series = small_analyzer.analyze([entry]).themes_over_time["Work"]
    assert series[0].date == "2024-03-02"


def test_words_by_function_level(small_analyzer, make_entry):
    entries = [
        make_entry("sunny walk", level=4),
        make_entry("rainy walk", level=-6),
        make_entry("neutral walk", level=0),
    ]
    words = small_analyzer.analyze(entries).words_by_function_level
    assert words["positive"] == {"sunny": 1, "walk": 1}
    assert words["negative"] == {"rainy": 1, "walk": 1}


def test_analysis_is_repeatable_and_does_not_mutate_input(analyzer, make_entry):
    entries = [
        make_entry("Argument with my sister about money", level=-5, feeling="Angry"),
        make_entry("Great workout at the gym, slept well", level=6),
        make_entry("Deadline stress at work again", level=-2, feeling="Afraid"),
    ]
    before = [e.model_dump() for e in entries]

    first = analyzer.analyze(entries)
    second = analyzer.analyze(entries)

    assert first.model_dump() == second.model_dump()
    assert [e.model_dump() for e in entries] == before


def test_order_of_entries_does_not_change_totals(analyzer, make_entry):
    entries = [
        make_entry("family dinner with mom", timestamp="2024-03-03T10:00:00Z"),
        make_entry("mom called, tired", timestamp="2024-03-01T10:00:00Z"),
    ]
    a = analyzer.analyze(entries)
    b = analyzer.analyze(list(reversed(entries)))

    assert a.theme_frequency == pytest.approx(b.theme_frequency)
    assert a.themes_over_time == b.themes_over_time


def test_frequency_strategy(small_analyzer, make_entry):
    entries = [
        make_entry("lunch lunch walk", timestamp="2024-03-02T10:00:00Z"),
        make_entry("walk lunch park", timestamp="2024-03-01T10:00:00Z"),
    ]
    result = small_analyzer.analyze(entries, strategy="frequency")

    assert result.strategy == "frequency"
    assert result.theme_frequency == {"Lunch": 3.0, "Walk": 2.0}
    assert [(d.date, d.count) for d in result.themes_over_time["Lunch"]] == [
        ("2024-03-01", 1.0),
        ("2024-03-02", 2.0),
    ]


def test_frequency_strategy_below_min_count_has_no_themes(small_analyzer, make_entry):
    result = small_analyzer.analyze([make_entry("one two three")], strategy="frequency")
    assert result.theme_frequency == {}
    assert result.word_frequency == {"one": 1, "two": 1, "three": 1}


def test_unknown_strategy_rejected(small_analyzer, make_entry):
    with pytest.raises(ConfigError):
        small_analyzer.analyze([make_entry("boss")], strategy="magic")


def test_custom_stopwords(small_catalog, make_entry):
    analyzer = ThematicAnalyzer(small_catalog, stopwords=frozenset({"boss"}))
    result = analyzer.analyze([make_entry("boss work")])
    assert result.word_frequency == {"work": 1}
    assert result.theme_frequency == {"Work": 1.0}
