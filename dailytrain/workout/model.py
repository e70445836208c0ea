"""Workout plan domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, get_args
from uuid import uuid4


SectionCategory = Literal["warmup", "training", "stretch", "cooldown"]
ExerciseMode = Literal["reps", "timed"]

SECTION_CATEGORIES: tuple[str, ...] = get_args(SectionCategory)
EXERCISE_MODES: tuple[str, ...] = get_args(ExerciseMode)

CATEGORY_LABELS: dict[str, str] = {
    "warmup": "Warm-up",
    "training": "Training",
    "stretch": "Stretch",
    "cooldown": "Cool-down",
}

CATEGORY_ACCENTS: dict[str, str] = {
    "warmup": "#f97316",
    "training": "#3b82f6",
    "stretch": "#22c55e",
    "cooldown": "#a855f7",
}


class PlanValidationError(ValueError):
    """Raised when a workout plan cannot be run safely."""


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Exercise:
    name: str
    mode: ExerciseMode = "reps"
    sets: int = 0
    reps: int = 0
    duration_sec: int = 0
    description: str | None = None
    order: int = 0
    exercise_id: str = field(default_factory=_new_id)

    @property
    def countdown_sec(self) -> int:
        """Seconds to count down when this exercise is played (0 for reps)."""
        if self.mode == "timed":
            return self.duration_sec
        return 0


@dataclass(frozen=True)
class Section:
    name: str
    category: SectionCategory
    exercises: tuple[Exercise, ...] = ()
    # Informational only; never reconciled with the exercise durations.
    duration_sec: int = 0
    order: int = 0
    section_id: str = field(default_factory=_new_id)

    def ordered_exercises(self) -> tuple[Exercise, ...]:
        return tuple(sorted(self.exercises, key=lambda item: item.order))


@dataclass(frozen=True)
class WorkoutPlan:
    name: str
    sections: tuple[Section, ...] = ()
    plan_id: str = field(default_factory=_new_id)

    def ordered_sections(self) -> tuple[Section, ...]:
        return tuple(sorted(self.sections, key=lambda item: item.order))

    @property
    def exercise_count(self) -> int:
        return sum(len(section.exercises) for section in self.sections)

    @property
    def timed_duration_sec(self) -> int:
        return sum(
            exercise.countdown_sec
            for section in self.sections
            for exercise in section.exercises
        )


def validate_plan(plan: WorkoutPlan) -> WorkoutPlan:
    """Reject plans the session engine could not navigate consistently.

    Empty names, empty sections and plans without sections are accepted.
    Negative or non-integer durations, counts and order ranks are not, nor
    are categories and modes outside the known sets.
    """
    for s_index, section in enumerate(plan.sections):
        where = f"Section {s_index + 1}"
        if section.category not in SECTION_CATEGORIES:
            raise PlanValidationError(
                f"{where}: unknown category '{section.category}'"
            )
        _require_non_negative(section.duration_sec, f"{where}: duration_sec")
        _require_non_negative(section.order, f"{where}: order")

        for e_index, exercise in enumerate(section.exercises):
            where = f"Section {s_index + 1}, exercise {e_index + 1}"
            if exercise.mode not in EXERCISE_MODES:
                raise PlanValidationError(f"{where}: unknown mode '{exercise.mode}'")
            _require_non_negative(exercise.duration_sec, f"{where}: duration_sec")
            _require_non_negative(exercise.sets, f"{where}: sets")
            _require_non_negative(exercise.reps, f"{where}: reps")
            _require_non_negative(exercise.order, f"{where}: order")
    return plan


def _require_non_negative(value: object, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PlanValidationError(f"{label} must be an integer")
    if value < 0:
        raise PlanValidationError(f"{label} must be >= 0")
