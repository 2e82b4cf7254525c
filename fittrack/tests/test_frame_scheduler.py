from __future__ import annotations

import pytest

from fittrack.gui.frame_scheduler import FrameScheduler, Phase


def _scheduler(clock, ticks, duration_ms=450.0) -> FrameScheduler:
    return FrameScheduler(clock, ticks, duration_ms)


def test_start_captures_time_and_requests_a_tick(clock, ticks):
    sched = _scheduler(clock, ticks)
    seen = []

    generation = sched.start(seen.append)

    assert generation == 1
    assert sched.phase is Phase.ANIMATING
    assert sched.state.start_time == clock.now
    assert len(ticks.pending) == 1
    assert seen == []


def test_progress_is_monotonic_and_settles(clock, ticks):
    """Progress never decreases and no tick is requested once it reaches 1."""

    sched = _scheduler(clock, ticks)
    seen = []
    sched.start(seen.append)

    ran = ticks.drain(step_ms=100.0)

    assert seen == pytest.approx([100 / 450, 200 / 450, 300 / 450, 400 / 450, 1.0])
    assert ran == 5
    assert all(a <= b for a, b in zip(seen, seen[1:]))
    assert sched.phase is Phase.SETTLED
    assert ticks.pending == []


def test_backwards_clock_does_not_rewind_progress(clock, ticks):
    sched = _scheduler(clock, ticks)
    seen = []
    sched.start(seen.append)

    ticks.run_next(300.0)
    ticks.run_next(-200.0)

    assert seen[1] == seen[0] == pytest.approx(300 / 450)


def test_restart_suppresses_stale_ticks(clock, ticks):
    sched = _scheduler(clock, ticks)
    first, second = [], []
    sched.start(first.append)
    ticks.run_next(100.0)
    stale = ticks.pending[:]

    sched.start(second.append)
    assert sched.generation == 2
    for callback in stale:
        ticks.pending.remove(callback)
        callback()

    assert first == [pytest.approx(100 / 450)]
    assert len(ticks.pending) == 1

    ticks.drain(step_ms=150.0)
    assert second == pytest.approx([150 / 450, 300 / 450, 1.0])
    assert first == [pytest.approx(100 / 450)]
    assert sched.phase is Phase.SETTLED


def test_interleaved_restart_never_mixes_draws(clock, ticks):
    sched = _scheduler(clock, ticks)
    draws = []
    sched.start(lambda p: draws.append(("a", p)))
    sched.start(lambda p: draws.append(("b", p)))

    ticks.drain(step_ms=100.0)

    assert {name for name, _ in draws} == {"b"}
    assert draws[-1] == ("b", 1.0)


def test_cancel_drops_pending_tick(clock, ticks):
    sched = _scheduler(clock, ticks)
    seen = []
    sched.start(seen.append)

    sched.cancel()
    ticks.drain()

    assert seen == []
    assert sched.phase is Phase.IDLE


def test_restart_from_inside_draw_pass(clock, ticks):
    sched = _scheduler(clock, ticks)
    seen = []

    def draw(progress):
        seen.append(progress)
        if len(seen) == 1:
            sched.start(seen.append)

    sched.start(draw)
    ticks.drain(step_ms=450.0)

    assert seen == [1.0, 1.0]
    assert sched.generation == 2
    assert sched.phase is Phase.SETTLED


def test_zero_duration_settles_on_first_tick(clock, ticks):
    sched = _scheduler(clock, ticks, duration_ms=0)
    seen = []
    sched.start(seen.append)

    ticks.drain()

    assert seen == [1.0]
    assert sched.phase is Phase.SETTLED
