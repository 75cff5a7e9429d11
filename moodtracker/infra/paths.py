# moodtracker/infra/paths.py
from pathlib import Path
from moodtracker.core.config import BASE_DIR

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DATA_DIR    = PACKAGE_DIR / "data"
OUTPUT_DIR  = BASE_DIR / "output"

THEME_CATALOG_PATH = DATA_DIR / "theme_catalog.yaml"

def ensure_output_dir() -> Path:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    return OUTPUT_DIR
