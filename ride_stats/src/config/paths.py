# src/config/paths.py
from pathlib import Path

from ride_stats.src.config.settings import Paths

PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / Paths.DATA_DIR


def data_path(filename: str) -> Path:
    return DATA_DIR / filename


def default_events_path() -> Path:
    return data_path(Paths.EVENTS_FILE)
