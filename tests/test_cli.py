import json

import pytest

from moodtracker.cli_run import main
from moodtracker.services.analysis_service import get_analyzer, get_config


def _write_export(tmp_path, entries):
    path = tmp_path / "journal.json"
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


def test_cli_prints_report(tmp_path, capsys, entry_payload):
    path = _write_export(tmp_path, [
        entry_payload("Long meeting with my boss at work", level=-2),
        entry_payload("Slept well after yoga", level=6),
    ])

    assert main([str(path), "--top", "3"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["entry_count"] == 2
    assert report["strategy"] == "catalog"
    assert report["top_themes"][0][0] == "Work & Career"
    assert len(report["top_themes"]) <= 3
    assert report["summary"].startswith("You need at least")


def test_cli_writes_timeline_csv(tmp_path, entry_payload):
    path = _write_export(tmp_path, [entry_payload("work deadline")])
    csv_path = tmp_path / "out" / "timeline.csv"

    assert main([str(path), "--timeline-csv", str(csv_path)]) == 0

    lines = csv_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("date,")
    assert lines[1].startswith("2024-03-01,")


def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 2


def test_cli_bad_strategy(tmp_path, entry_payload):
    path = _write_export(tmp_path, [entry_payload("work")])
    assert main([str(path), "--strategy", "magic"]) == 2


@pytest.fixture
def fresh_service_cache():
    get_config.cache_clear()
    get_analyzer.cache_clear()
    yield
    get_config.cache_clear()
    get_analyzer.cache_clear()


def test_cli_bad_catalog_file(tmp_path, monkeypatch, entry_payload, fresh_service_cache):
    bad = tmp_path / "catalog.yaml"
    bad.write_text("theme_catalog: {}\n", encoding="utf-8")
    monkeypatch.setenv("MOOD_THEME_CATALOG_PATH", str(bad))

    path = _write_export(tmp_path, [entry_payload("work")])
    assert main([str(path)]) == 2
