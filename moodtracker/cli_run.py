#  cli_run.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from moodtracker.core.config import LOG_LEVEL, normalize_strategy
from moodtracker.domain.aggregation import top_items
from moodtracker.domain.chart_data import build_theme_timeline
from moodtracker.domain.filters import TIME_RANGES
from moodtracker.exceptions import AnalysisError, CatalogLoadError, ConfigError, EntryDataError
from moodtracker.infra.entry_repo import load_entries
from moodtracker.infra.output_repo import save_analysis_yaml, save_timeline_csv
from moodtracker.services.analysis_service import get_analyzer, get_config
from moodtracker.usecases.analyze_journal import run_theme_analysis_usecase

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Thematic analysis of an exported mood journal.")
    ap.add_argument("entries", help="Exported entries (.json / .yaml)")
    ap.add_argument("--strategy", default=None, help="catalog | frequency (default: MOOD_THEME_STRATEGY)")
    ap.add_argument("--time-range", default="all", choices=TIME_RANGES)
    ap.add_argument("--top", type=int, default=10, help="How many themes / words to print")
    ap.add_argument("--save", action="store_true", help="Also save the full result as YAML under output/")
    ap.add_argument("--timeline-csv", default=None, help="Write the dates x top themes table to this CSV")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        strategy = normalize_strategy(args.strategy) if args.strategy else None
        entries = load_entries(Path(args.entries))
        out = run_theme_analysis_usecase(
            entries,
            get_analyzer(),
            strategy=strategy,
            time_range=args.time_range,
            min_entries=get_config().min_entries,
        )
    except (FileNotFoundError, CatalogLoadError, EntryDataError, ConfigError) as e:
        logger.error("%s", e)
        return 2
    except Exception as e:
        raise AnalysisError(f"Thematic analysis failed: {e}") from e

    result = out["result"]
    if not out["sufficient_entries"]:
        logger.warning(
            "Only %d entries (recommended minimum: %d); results may be sparse",
            out["entry_count"], out["min_entries"],
        )

    report = {
        "summary": out["summary"],
        "entry_count": out["entry_count"],
        "strategy": result.strategy,
        "top_themes": [list(kv) for kv in top_items(result.theme_frequency, args.top)],
        "top_words": [list(kv) for kv in top_items(result.word_frequency, args.top)],
    }
    print(json.dumps(report, ensure_ascii=False, indent=2))

    if args.save:
        path = save_analysis_yaml(
            Path(args.entries).stem,
            {"summary": out["summary"], "result": result.model_dump(by_alias=True)},
        )
        logger.info("Saved analysis -> %s", path)

    if args.timeline_csv:
        path = save_timeline_csv(build_theme_timeline(result), Path(args.timeline_csv))
        logger.info("Saved timeline -> %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
