from __future__ import annotations

"""
Time-based animation driver for the chart widget.

The scheduler does not know about Qt. It is handed a ``clock`` returning
milliseconds and a ``request_tick`` primitive that arranges for a callback
to run on the next display refresh; the widget passes QTimer/QElapsedTimer
based ones, tests pass a manual clock and a tick queue.

Every ``start`` bumps a generation counter. A pending tick remembers the
generation it was scheduled for and does nothing once a newer animation
has started, so two animations never draw onto the same surface.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from fittrack.config.settings import CHART_DURATION_MS

log = logging.getLogger(__name__)

Clock = Callable[[], float]
RequestTick = Callable[[Callable[[], None]], None]
DrawPass = Callable[[float], None]


class Phase(str, Enum):
    IDLE = "idle"
    ANIMATING = "animating"
    SETTLED = "settled"


@dataclass
class AnimationState:
    generation: int
    start_time: float
    progress: float = 0.0


class FrameScheduler:
    def __init__(self, clock: Clock, request_tick: RequestTick, duration_ms: float = CHART_DURATION_MS) -> None:
        self._clock = clock
        self._request_tick = request_tick
        self.duration_ms = duration_ms
        self.generation = 0
        self.phase = Phase.IDLE
        self.state: Optional[AnimationState] = None
        self._draw: Optional[DrawPass] = None

    def start(self, draw: DrawPass) -> int:
        """Begin a new reveal animation, superseding any in flight. Returns its generation."""
        if self.phase is Phase.ANIMATING:
            log.debug("Superseding chart animation #%d", self.generation)
        self.generation += 1
        self.state = AnimationState(generation=self.generation, start_time=self._clock())
        self._draw = draw
        self.phase = Phase.ANIMATING
        self._schedule(self.generation)
        return self.generation

    def cancel(self) -> None:
        """Invalidate pending ticks without starting a new animation."""
        self.generation += 1
        self.state = None
        self._draw = None
        self.phase = Phase.IDLE

    def _schedule(self, generation: int) -> None:
        self._request_tick(lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        state = self.state
        if state is None or generation != self.generation or self.phase is not Phase.ANIMATING:
            return
        elapsed = self._clock() - state.start_time
        progress = min(1.0, max(0.0, elapsed / self.duration_ms)) if self.duration_ms > 0 else 1.0
        state.progress = max(state.progress, progress)

        if self._draw is not None:
            self._draw(state.progress)
        # the draw pass may have started a newer animation
        if generation != self.generation:
            return

        if state.progress < 1.0:
            self._schedule(generation)
        else:
            self.phase = Phase.SETTLED
            log.debug("Chart animation #%d settled", generation)
