from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class TickQueue:
    """Stands in for the display-refresh hook; callbacks run only when the test says so."""

    def __init__(self, clock: ManualClock) -> None:
        self.clock = clock
        self.pending: List[Callable[[], None]] = []

    def __call__(self, callback: Callable[[], None]) -> None:
        self.pending.append(callback)

    def run_next(self, advance_ms: float = 0.0) -> None:
        self.clock.advance(advance_ms)
        self.pending.pop(0)()

    def drain(self, step_ms: float = 100.0, limit: int = 1000) -> int:
        ran = 0
        while self.pending and ran < limit:
            self.run_next(step_ms)
            ran += 1
        return ran


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def ticks(clock) -> TickQueue:
    return TickQueue(clock)


def _make_entries(*pairs, field: str = "weight"):
    entries = []
    for i, (date, value) in enumerate(pairs):
        entry = {"id": i, "date": date, "weight": None, "calories": None}
        entry[field] = value
        entries.append(entry)
    return entries


@pytest.fixture
def make_entries():
    return _make_entries
