"""Session progression engine: position, countdown and completion."""

from __future__ import annotations

import logging
from typing import Callable

from dailytrain.core.state import (
    SessionSnapshot,
    SessionState,
    project_section_progress,
)
from dailytrain.core.timer import AsyncioTicker, CountdownTimer, Ticker
from dailytrain.workout.model import Exercise, Section, WorkoutPlan, validate_plan


logger = logging.getLogger(__name__)

SnapshotListener = Callable[[SessionSnapshot], None]
Unsubscribe = Callable[[], None]


class SessionEngine:
    """Walks a workout plan one exercise at a time.

    Not thread-safe: commands and ticks must arrive from a single event loop.
    Every command is synchronous and never raises; moves that have nowhere to
    go are no-ops.
    """

    def __init__(self, plan: WorkoutPlan, ticker: Ticker | None = None) -> None:
        validate_plan(plan)
        self.plan = plan
        self._sections: tuple[Section, ...] = plan.ordered_sections()
        self._exercises: tuple[tuple[Exercise, ...], ...] = tuple(
            section.ordered_exercises() for section in self._sections
        )
        self._timer = CountdownTimer(ticker or AsyncioTicker())
        self._listeners: list[SnapshotListener] = []
        self._released = False
        self.state = SessionState()

        if not self._sections:
            self.state.phase = "completed"
        else:
            self._prepare_current_exercise()
        logger.info(
            "Session started for '%s' (%d sections, %d exercises)",
            plan.name,
            len(self._sections),
            plan.exercise_count,
        )
        if self.completed:
            logger.info("Session for '%s' has nothing to play", plan.name)

    @property
    def completed(self) -> bool:
        return self.state.phase == "completed"

    @property
    def released(self) -> bool:
        return self._released

    @property
    def timer_active(self) -> bool:
        return self._timer.active

    @property
    def current_section(self) -> Section | None:
        if self.completed or not self._sections:
            return None
        return self._sections[self.state.section_index]

    @property
    def current_exercise(self) -> Exercise | None:
        if self.completed or not self._sections:
            return None
        exercises = self._exercises[self.state.section_index]
        if self.state.exercise_index >= len(exercises):
            return None
        return exercises[self.state.exercise_index]

    def subscribe(self, listener: SnapshotListener) -> Unsubscribe:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def snapshot(self) -> SessionSnapshot:
        state = self.state
        section = self.current_section
        exercise = self.current_exercise
        sets_and_reps: tuple[int, int] | None = None
        if exercise is not None and exercise.sets > 0 and exercise.reps > 0:
            sets_and_reps = (exercise.sets, exercise.reps)

        return SessionSnapshot(
            plan_name=self.plan.name,
            section_index=state.section_index,
            section_total=len(self._sections),
            exercise_index=state.exercise_index,
            exercise_total=(
                len(self._exercises[state.section_index]) if self._sections else 0
            ),
            current_section_name=section.name if section else None,
            current_section_category=section.category if section else None,
            current_exercise_name=exercise.name if exercise else None,
            current_exercise_description=exercise.description if exercise else None,
            sets_and_reps=sets_and_reps,
            remaining_seconds=state.remaining_seconds,
            total_duration_for_current_exercise=(
                exercise.countdown_sec if exercise else 0
            ),
            running=state.running,
            completed=self.completed,
            section_progress=project_section_progress(
                self._sections, state.section_index, completed=self.completed
            ),
        )

    # Commands

    def toggle_play_pause(self) -> None:
        if not self._accepts_commands():
            return
        if self.state.running:
            self._stop_timer()
        elif self.state.remaining_seconds > 0:
            self.state.running = True
            self._timer.start(self._on_tick)
        else:
            # Nothing to count down: play acts as next.
            self._advance_exercise()
        self._publish()

    def skip_next(self) -> None:
        if not self._accepts_commands():
            return
        self._advance_exercise()
        self._publish()

    def skip_previous(self) -> None:
        if not self._accepts_commands():
            return
        if self._retreat_exercise():
            self._publish()

    def exit(self) -> None:
        if self._released:
            return
        self._stop_timer()
        self._released = True
        self._listeners.clear()
        logger.info("Session for '%s' exited", self.plan.name)

    # Transitions

    def _accepts_commands(self) -> bool:
        return not self._released and not self.completed

    def _on_tick(self) -> None:
        if not self._accepts_commands() or not self.state.running:
            return
        if self.state.remaining_seconds > 0:
            self.state.remaining_seconds -= 1
            self._publish()
        # Expire on the tick that reaches 0: D ticks for a D-second exercise.
        if self.state.remaining_seconds <= 0:
            logger.debug(
                "Countdown expired at section %d exercise %d",
                self.state.section_index,
                self.state.exercise_index,
            )
            self._advance_exercise()
            self._publish()

    def _stop_timer(self) -> None:
        self._timer.stop()
        self.state.running = False

    def _prepare_current_exercise(self) -> None:
        self._stop_timer()
        exercises = self._exercises[self.state.section_index]
        if self.state.exercise_index >= len(exercises):
            self._advance_section()
            return
        exercise = exercises[self.state.exercise_index]
        self.state.remaining_seconds = exercise.countdown_sec
        logger.debug(
            "Prepared '%s' (section %d, exercise %d, %ds)",
            exercise.name,
            self.state.section_index,
            self.state.exercise_index,
            self.state.remaining_seconds,
        )

    def _advance_exercise(self) -> None:
        self._stop_timer()
        exercises = self._exercises[self.state.section_index]
        if self.state.exercise_index < len(exercises) - 1:
            self.state.exercise_index += 1
            self._prepare_current_exercise()
        else:
            self._advance_section()

    def _advance_section(self) -> None:
        if self.state.section_index < len(self._sections) - 1:
            self.state.section_index += 1
            self.state.exercise_index = 0
            self._prepare_current_exercise()
            return
        self._stop_timer()
        self.state.remaining_seconds = 0
        self.state.phase = "completed"
        logger.info("Session for '%s' completed", self.plan.name)

    def _retreat_exercise(self) -> bool:
        """Step back one exercise; return False when already at the start.

        Stepping back into an empty section lets preparation move forward
        again, so the current section restarts at its first exercise.
        """
        state = self.state
        if state.section_index == 0 and state.exercise_index == 0:
            return False

        self._stop_timer()
        if state.exercise_index > 0:
            state.exercise_index -= 1
        else:
            state.section_index -= 1
            state.exercise_index = max(len(self._exercises[state.section_index]) - 1, 0)
        self._prepare_current_exercise()
        return True

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            if self._released:
                break
            listener(snapshot)
