from __future__ import annotations

from pathlib import Path

import pytest

from conftest import ManualTicker
from dailytrain.core.state import SessionSnapshot
from dailytrain.ui.controller import SessionController, resolve_plan
from dailytrain.workout.parser import PlanParseError


def test_controller_drives_session_lifecycle() -> None:
    tickers: list[ManualTicker] = []

    def make_ticker() -> ManualTicker:
        tickers.append(ManualTicker())
        return tickers[-1]

    controller = SessionController(ticker_factory=make_ticker)
    assert controller.snapshot() is None
    controller.skip_next()

    seen: list[SessionSnapshot] = []
    first = controller.start_session(
        resolve_plan(template_key="basic_full_body"), on_snapshot=seen.append
    )
    assert first.current_exercise_name == "Jog"
    assert first.remaining_seconds == 180
    assert controller.session_active

    controller.toggle_play_pause()
    tickers[-1].tick(10)
    snapshot = controller.snapshot()
    assert snapshot is not None
    assert snapshot.remaining_seconds == 170
    assert seen[-1].remaining_seconds == 170

    controller.skip_next()
    controller.skip_previous()
    snapshot = controller.snapshot()
    assert snapshot is not None
    assert snapshot.remaining_seconds == 180

    engine = controller.engine
    assert engine is not None
    controller.start_session(resolve_plan(template_key="quick_mobility"))
    assert engine.released
    assert len(tickers) == 2

    controller.exit_session()
    assert controller.engine is None
    assert not controller.session_active


def test_resolve_plan_requires_a_source() -> None:
    with pytest.raises(ValueError):
        resolve_plan()


def test_resolve_plan_from_file(tmp_path: Path) -> None:
    plan_file = tmp_path / "bad.json"
    plan_file.write_text('{"sections": [{"category": "nap"}]}', encoding="utf-8")

    with pytest.raises(PlanParseError):
        resolve_plan(plan_path=plan_file)
