from __future__ import annotations

"""Entry persistence and form validation for the daily log."""

import logging
import math
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytz

from fittrack.config import settings as cfg
from fittrack.core.storage import read_json, write_json_atomic

log = logging.getLogger(__name__)

Entry = Dict[str, Any]


class EntryValidationError(ValueError):
    """Raised with a user-facing message when the entry form is invalid."""


def today_iso(tz_name: Optional[str] = None) -> str:
    tz_name = tz_name if tz_name is not None else cfg.TIMEZONE
    now = datetime.now()
    if tz_name:
        try:
            now = datetime.now(pytz.timezone(tz_name))
        except pytz.UnknownTimeZoneError:
            log.warning("Unknown timezone %r, using local time", tz_name)
    return now.strftime("%Y-%m-%d")


def _parse_number(raw: str) -> Optional[float]:
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return math.nan


def validate_entry(date: str, weight_raw: str, calories_raw: str) -> Entry:
    weight = _parse_number(weight_raw)
    calories = _parse_number(calories_raw)

    if weight is not None and (not math.isfinite(weight) or weight <= 0):
        raise EntryValidationError("Weight must be a number > 0")
    if calories is not None and (not math.isfinite(calories) or calories < 0):
        raise EntryValidationError("Calories must be a number ≥ 0")
    if weight is None and calories is None:
        raise EntryValidationError("Enter a weight or calories 🙂")

    return {
        "id": time.time_ns() // 1_000_000,
        "date": date or today_iso(),
        "weight": weight,
        "calories": calories,
    }


class EntryStore:
    """JSON-file backed list of entries, one per date."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> List[Entry]:
        data = read_json(self.path, default=[])
        if not isinstance(data, list):
            log.warning("Ignoring malformed entries file %s", self.path)
            return []
        return [e for e in data if isinstance(e, dict)]

    def save(self, entries: List[Entry]) -> None:
        try:
            write_json_atomic(self.path, entries)
        except OSError:
            log.warning("Could not write entries to %s", self.path, exc_info=True)
            raise

    def upsert(self, entry: Entry) -> bool:
        """Store ``entry``, replacing any entry on the same date. Returns True when replaced."""
        entries = self.load()
        for idx, existing in enumerate(entries):
            if existing.get("date") == entry["date"]:
                entries[idx] = entry
                self.save(entries)
                return True
        entries.append(entry)
        self.save(entries)
        return False

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
