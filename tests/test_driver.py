"""Tests for the asyncio frame driver."""

import asyncio
from typing import List

import pytest

from faradaylab import FrameDriver, InductionLab, TickResult


class FakeClock:
    """Advances a fixed step on every read."""

    def __init__(self, step_ms: float = 1000.0 / 60.0) -> None:
        self.now = 0.0
        self.step_ms = step_ms

    def __call__(self) -> float:
        self.now += self.step_ms
        return self.now


def test_run_fixed_number_of_frames() -> None:
    lab = InductionLab(start_time=0.0)
    lab.play()
    seen: List[TickResult] = []
    driver = FrameDriver(lab, fps=1000.0, clock=FakeClock(), sinks=[seen.append])
    n = asyncio.run(driver.run(max_frames=12))
    assert n == 12
    assert driver.frames == 12
    assert len(seen) == 12
    assert lab.tick_count == 12
    assert len(lab.history) == 2


def test_stop_cancels_pending_tick() -> None:
    async def scenario() -> None:
        lab = InductionLab(start_time=0.0)
        lab.play()
        driver = FrameDriver(lab, fps=200.0, clock=FakeClock())
        driver.start()
        assert driver.running
        await asyncio.sleep(0.05)
        await driver.stop()
        assert not driver.running
        ticks = lab.tick_count
        state = lab.state
        assert ticks > 0
        await asyncio.sleep(0.05)
        assert lab.tick_count == ticks
        assert lab.state is state

    asyncio.run(scenario())


def test_failing_sink_does_not_stop_loop() -> None:
    def broken(_: TickResult) -> None:
        raise RuntimeError("render failed")

    ok: List[TickResult] = []
    lab = InductionLab(start_time=0.0)
    driver = FrameDriver(lab, fps=1000.0, clock=FakeClock(), sinks=[broken, ok.append])
    asyncio.run(driver.run(max_frames=5))
    assert len(ok) == 5


def test_sink_added_later_sees_following_frames() -> None:
    lab = InductionLab(start_time=0.0)
    driver = FrameDriver(lab, fps=1000.0, clock=FakeClock())
    driver.frame()
    late: List[TickResult] = []
    driver.add_sink(late.append)
    driver.frame()
    driver.frame()
    assert [r.state.time for r in late] == [pytest.approx(2000.0 / 60.0), pytest.approx(3000.0 / 60.0)]


def test_duplicate_timestamps_are_skipped() -> None:
    lab = InductionLab(start_time=0.0)
    driver = FrameDriver(lab, fps=1000.0, clock=lambda: 50.0)
    asyncio.run(driver.run(max_frames=4))
    assert driver.frames == 4
    assert lab.tick_count == 1


def test_start_twice_raises() -> None:
    async def scenario() -> None:
        driver = FrameDriver(InductionLab(start_time=0.0), fps=100.0, clock=FakeClock())
        driver.start()
        with pytest.raises(RuntimeError):
            driver.start()
        await driver.stop()

    asyncio.run(scenario())


def test_invalid_fps() -> None:
    with pytest.raises(ValueError):
        FrameDriver(InductionLab(), fps=0)
