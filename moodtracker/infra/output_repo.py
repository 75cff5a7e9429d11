# moodtracker/infra/output_repo.py
from pathlib import Path
from typing import Dict, Any, Optional
from datetime import datetime
import re

import pandas as pd

from moodtracker.infra.paths import ensure_output_dir
from moodtracker.infra.yaml_io import save_yaml


def _slugify_name(name: str) -> str:
    """Make a label safe to use inside a file name."""
    if not name:
        return "journal"
    s = re.sub(r"\s+", "_", name.strip())
    s = re.sub(r"[^\w\-]", "", s)
    return s or "journal"


def save_analysis_yaml(
    name: str,
    analysis_result: Dict[str, Any],
    output_dir: Optional[Path] = None,
) -> Path:
    """
    Save one analysis run as YAML.

    e.g. output/analysis_20241128_143530_my_journal.yaml
    """
    output_dir = output_dir or ensure_output_dir()
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = output_dir / f"analysis_{ts}_{_slugify_name(name)}.yaml"
    save_yaml(path, analysis_result)
    return path


def save_timeline_csv(frame: pd.DataFrame, path: Path) -> Path:
    """Write the dates x themes table (build_theme_timeline) as CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, encoding="utf-8")
    return path
