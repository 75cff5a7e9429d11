# moodtracker/infra/entry_repo.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml
from pydantic import ValidationError

from moodtracker.domain.models import JournalEntry
from moodtracker.exceptions import EntryDataError


def _raw_records(data: Any) -> List[Dict[str, Any]]:
    """Accept a plain list of entries or {"entries": [...]}"""
    if isinstance(data, dict):
        data = data.get("entries")
    if not isinstance(data, list):
        raise EntryDataError("Entry export must be a list of entries or {'entries': [...]}")
    return data


def parse_entries(records: Sequence[Any]) -> List[JournalEntry]:
    """Validate raw entry dicts. The first bad record aborts with its index."""
    entries: List[JournalEntry] = []
    for i, record in enumerate(records):
        if isinstance(record, JournalEntry):
            entries.append(record)
            continue
        try:
            entries.append(JournalEntry.model_validate(record))
        except ValidationError as e:
            raise EntryDataError(f"Invalid entry #{i}: {e.errors()[0].get('msg', e)}") from e
    return entries


def load_entries(path: Path) -> List[JournalEntry]:
    """Load an exported entry file (.json / .yaml / .yml)"""
    if not path.exists():
        raise FileNotFoundError(f"Entry file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        elif path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            raise EntryDataError(f"Unsupported file format: {path.suffix or path.name}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise EntryDataError(f"Cannot parse entry file {path}: {e}") from e

    return parse_entries(_raw_records(data))
