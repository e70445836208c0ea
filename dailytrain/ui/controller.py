"""Controller shared by the terminal and web presenters."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from dailytrain.core.engine import SessionEngine, SnapshotListener
from dailytrain.core.state import SessionSnapshot
from dailytrain.core.timer import AsyncioTicker, Ticker
from dailytrain.workout.library import build_plan_from_template
from dailytrain.workout.model import WorkoutPlan
from dailytrain.workout.user_plans import load_user_plan


TickerFactory = Callable[[], Ticker]


def resolve_plan(
    *,
    template_key: str | None = None,
    plan_path: str | Path | None = None,
) -> WorkoutPlan:
    if plan_path is not None:
        return load_user_plan(Path(plan_path))
    if template_key is not None:
        return build_plan_from_template(template_key)
    raise ValueError("Choose a plan file or a built-in template")


class SessionController:
    def __init__(
        self,
        tick_interval_sec: float = 1.0,
        ticker_factory: TickerFactory | None = None,
    ) -> None:
        self._ticker_factory = ticker_factory or (
            lambda: AsyncioTicker(interval_sec=tick_interval_sec)
        )
        self._engine: SessionEngine | None = None

    @property
    def engine(self) -> SessionEngine | None:
        return self._engine

    @property
    def session_active(self) -> bool:
        return self._engine is not None and not self._engine.released

    def start_session(
        self,
        plan: WorkoutPlan,
        on_snapshot: SnapshotListener | None = None,
    ) -> SessionSnapshot:
        self.exit_session()
        engine = SessionEngine(plan, ticker=self._ticker_factory())
        if on_snapshot is not None:
            engine.subscribe(on_snapshot)
        self._engine = engine
        return engine.snapshot()

    def exit_session(self) -> None:
        if self._engine is None:
            return
        self._engine.exit()
        self._engine = None

    def snapshot(self) -> SessionSnapshot | None:
        if self._engine is None:
            return None
        return self._engine.snapshot()

    def toggle_play_pause(self) -> None:
        if self._engine is not None:
            self._engine.toggle_play_pause()

    def skip_next(self) -> None:
        if self._engine is not None:
            self._engine.skip_next()

    def skip_previous(self) -> None:
        if self._engine is not None:
            self._engine.skip_previous()
