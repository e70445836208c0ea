from __future__ import annotations

import asyncio

import pytest

from conftest import ManualTicker
from dailytrain.core.engine import SessionEngine
from dailytrain.core.timer import AsyncioTicker, CountdownTimer
from dailytrain.workout.model import Exercise, Section, WorkoutPlan


def test_asyncio_ticker_ticks_until_cancelled() -> None:
    async def _run() -> None:
        ticker = AsyncioTicker(interval_sec=0.01)
        ticks: list[int] = []
        cancel = ticker.start(lambda: ticks.append(len(ticks)))

        await asyncio.sleep(0.065)
        assert len(ticks) >= 3

        cancel()
        seen = len(ticks)
        await asyncio.sleep(0.05)
        assert len(ticks) == seen

        cancel()

    asyncio.run(_run())


def test_asyncio_ticker_can_be_cancelled_from_its_own_callback() -> None:
    async def _run() -> None:
        ticker = AsyncioTicker(interval_sec=0.01)
        ticks: list[int] = []
        cancel_holder: list = []

        def on_tick() -> None:
            ticks.append(1)
            cancel_holder[0]()

        cancel_holder.append(ticker.start(on_tick))
        await asyncio.sleep(0.06)
        assert ticks == [1]

    asyncio.run(_run())


def test_asyncio_ticker_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        AsyncioTicker(interval_sec=0)


def test_countdown_timer_keeps_a_single_source(ticker: ManualTicker) -> None:
    timer = CountdownTimer(ticker)
    assert timer.active is False
    timer.stop()

    timer.start(lambda: None)
    timer.start(lambda: None)
    assert timer.active
    assert ticker.starts == 2
    assert ticker.cancels == 1

    timer.stop()
    timer.stop()
    assert timer.active is False
    assert ticker.cancels == 2


def test_engine_auto_advances_on_real_loop() -> None:
    async def _run() -> None:
        plan = WorkoutPlan(
            name="Loop plan",
            sections=(
                Section(
                    "Core",
                    "training",
                    (
                        Exercise("Hollow hold", "timed", duration_sec=3),
                        Exercise("Crunches", "reps", sets=2, reps=15),
                    ),
                ),
            ),
        )
        engine = SessionEngine(plan, ticker=AsyncioTicker(interval_sec=0.01))
        remaining: list[int] = []
        engine.subscribe(lambda s: remaining.append(s.remaining_seconds))

        engine.toggle_play_pause()
        await asyncio.sleep(0.1)

        assert engine.state.exercise_index == 1
        assert engine.state.running is False
        assert engine.timer_active is False
        assert remaining[:4] == [3, 2, 1, 0]
        engine.exit()

    asyncio.run(_run())
