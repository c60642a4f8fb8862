# src/data/loader.py
"""
Event log loading module.
Parses the comma separated event log into Event objects:
- timestamp, vehicle id, event type, x, y, user id (or NULL)
- Malformed rows are dropped without raising
- An unreadable file yields an empty event list
"""

import csv
import re
import warnings
import pandas as pd
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ride_stats.src.core.event import Event, EventType
from ride_stats.src.core.geometry import Point
from ride_stats.src.config.paths import default_events_path

COLUMNS = ["timestamp", "vehicle_id", "event_type", "x", "y", "user_id"]
NULL_USER = "NULL"

_EVENT_TYPES = {t.value: t for t in EventType}
_INTEGER = re.compile(r"-?[0-9]+")


def _is_plain_number(text: str) -> bool:
    # float() also takes surrounding whitespace and digit separators
    return text == text.strip() and "_" not in text


def parse_fields(fields: Sequence) -> Optional[Event]:
    """
    Build an Event from an already split row.
    Returns None if the row has fewer than 6 fields or any field fails to convert.
    Extra trailing fields are ignored.
    """
    if len(fields) < len(COLUMNS):
        return None

    raw = list(fields[:len(COLUMNS)])
    if any(pd.isna(value) for value in raw):
        return None
    timestamp_str, vehicle_id, type_str, x_str, y_str, user_str = (str(v) for v in raw)

    if not vehicle_id or not user_str:
        return None

    event_type = _EVENT_TYPES.get(type_str)
    if event_type is None:
        return None

    if not _INTEGER.fullmatch(timestamp_str):
        return None
    if not (_is_plain_number(x_str) and _is_plain_number(y_str)):
        return None

    try:
        timestamp = int(timestamp_str)
        x = float(x_str)
        y = float(y_str)
    except ValueError:
        return None

    return Event(
        timestamp=timestamp,
        vehicle_id=vehicle_id,
        event_type=event_type,
        location=Point(x=x, y=y),
        user_id=None if user_str == NULL_USER else user_str
    )


def parse_line(line: str) -> Optional[Event]:
    """Parse one line of the event log, e.g. "120,JK5T,START_RIDE,1.0,2.0,42"."""
    return parse_fields(line.rstrip("\r\n").split(","))


def parse_lines(lines: Iterable[str]) -> List[Event]:
    """Parse lines in order, silently skipping the ones that can't be parsed."""
    events: List[Event] = []
    for line in lines:
        event = parse_line(line)
        if event is not None:
            events.append(event)
    return events


def read_event_rows(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read the raw event log into a DataFrame of strings, one column per field.
    Rows with extra fields are truncated; short rows are padded with NaN.
    """
    with warnings.catch_warnings():
        # Rows with extra fields are truncated silently
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        return pd.read_csv(
            path,
            header=None,
            names=COLUMNS,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            na_values=[],
            quoting=csv.QUOTE_NONE,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=lambda bad_line: bad_line[:len(COLUMNS)],
        )


def load_events(path: Union[str, Path, None] = None) -> List[Event]:
    """
    Load all events from the event log, in file order (assumed sorted by time).
    Returns an empty list if the file can't be read.
    """
    path = Path(path) if path is not None else default_events_path()
    print(f"Loading events from {path}...")

    try:
        df = read_event_rows(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Warning: could not read event log {path}: {e}")
        return []
    except pd.errors.EmptyDataError:
        print(f"Warning: event log {path} is empty.")
        return []
    except pd.errors.ParserError as e:
        print(f"Warning: could not parse event log {path}: {e}")
        return []

    events: List[Event] = []
    for row in df.itertuples(index=False, name=None):
        event = parse_fields(row)
        if event is not None:
            events.append(event)

    skipped = len(df) - len(events)
    print(f"Loaded: {len(events)} events ({skipped} skipped)")
    return events
