# moodtracker/infra/yaml_io.py
from pathlib import Path
from typing import Any
import yaml

from moodtracker.exceptions import CatalogLoadError

def load_yaml(path: Path) -> Any:
    """Load a YAML file and return the Python object."""
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)

def load_word_list(path: Path) -> frozenset:
    """Load a YAML list of words (or {"stopwords": [...]}) as a lowercase frozenset."""
    try:
        data = load_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogLoadError(f"Cannot read word list {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("stopwords")
    if not isinstance(data, list):
        raise CatalogLoadError(f"Word list {path} must be a YAML list of strings")

    return frozenset(str(w).strip().lower() for w in data if str(w).strip())

def save_yaml(path: Path, data: Any) -> None:
    """Dump a Python object to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
