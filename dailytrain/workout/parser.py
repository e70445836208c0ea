"""Workout plan file parser (JSON)."""

from __future__ import annotations

import json
from pathlib import Path

from dailytrain.workout.model import (
    EXERCISE_MODES,
    SECTION_CATEGORIES,
    Exercise,
    PlanValidationError,
    Section,
    WorkoutPlan,
    validate_plan,
)


_CATEGORY_ALIASES = {
    "warm-up": "warmup",
    "warm_up": "warmup",
    "cool-down": "cooldown",
    "cool_down": "cooldown",
}


class PlanParseError(ValueError):
    """Raised when a workout plan file is invalid."""


def load_plan(path: str | Path) -> WorkoutPlan:
    file_path = Path(path)
    if file_path.suffix.lower() != ".json":
        raise PlanParseError(
            f"Unsupported plan format '{file_path.suffix}'. Use .json"
        )
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PlanParseError(f"Invalid JSON: {exc}") from exc
    return parse_plan(data, default_name=file_path.stem)


def parse_plan(data: object, default_name: str = "Workout") -> WorkoutPlan:
    if not isinstance(data, dict):
        raise PlanParseError("Plan JSON must be an object")

    name_obj = data.get("name", default_name)
    if not isinstance(name_obj, str):
        raise PlanParseError("Plan field 'name' must be a string")

    sections_obj = data.get("sections", [])
    if not isinstance(sections_obj, list):
        raise PlanParseError("Plan field 'sections' must be an array")

    sections = tuple(
        _build_section(raw, index=i) for i, raw in enumerate(sections_obj)
    )
    plan = WorkoutPlan(name=name_obj.strip(), sections=sections)
    try:
        return validate_plan(plan)
    except PlanValidationError as exc:
        raise PlanParseError(str(exc)) from exc


def _build_section(raw: object, *, index: int) -> Section:
    where = f"Section {index + 1}"
    if not isinstance(raw, dict):
        raise PlanParseError(f"{where}: must be an object")

    category_obj = raw.get("category", "training")
    if not isinstance(category_obj, str):
        raise PlanParseError(f"{where}: category must be a string")
    category = category_obj.strip().lower()
    category = _CATEGORY_ALIASES.get(category, category)
    if category not in SECTION_CATEGORIES:
        raise PlanParseError(
            f"{where}: unknown category '{category_obj}'. "
            f"Use one of {', '.join(SECTION_CATEGORIES)}"
        )

    exercises_obj = raw.get("exercises", [])
    if not isinstance(exercises_obj, list):
        raise PlanParseError(f"{where}: exercises must be an array")

    exercises = tuple(
        _build_exercise(item, where=f"{where}, exercise {i + 1}", position=i)
        for i, item in enumerate(exercises_obj)
    )
    return Section(
        name=_parse_text(raw.get("name"), default=""),
        category=category,  # type: ignore[arg-type]
        exercises=exercises,
        duration_sec=_parse_count(raw.get("duration_sec"), f"{where}: duration_sec"),
        order=_parse_count(raw.get("order", index), f"{where}: order"),
    )


def _build_exercise(raw: object, *, where: str, position: int) -> Exercise:
    if not isinstance(raw, dict):
        raise PlanParseError(f"{where}: must be an object")

    duration_sec = _parse_count(raw.get("duration_sec"), f"{where}: duration_sec")
    mode_obj = raw.get("mode")
    if mode_obj is None:
        mode = "timed" if duration_sec > 0 else "reps"
    else:
        mode = str(mode_obj).strip().lower()
        if mode not in EXERCISE_MODES:
            raise PlanParseError(f"{where}: mode must be 'reps' or 'timed'")

    description_obj = raw.get("description")
    description = None
    if description_obj is not None:
        description = str(description_obj).strip() or None

    return Exercise(
        name=_parse_text(raw.get("name"), default=""),
        mode=mode,  # type: ignore[arg-type]
        sets=_parse_count(raw.get("sets"), f"{where}: sets"),
        reps=_parse_count(raw.get("reps"), f"{where}: reps"),
        duration_sec=duration_sec,
        description=description,
        order=_parse_count(raw.get("order", position), f"{where}: order"),
    )


def _parse_text(raw: object, *, default: str) -> str:
    if raw is None:
        return default
    return str(raw).strip()


def _parse_count(raw: object, label: str) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise PlanParseError(f"{label} must be an integer")
    try:
        value = int(str(raw).strip())
    except ValueError as exc:
        raise PlanParseError(f"{label} must be an integer") from exc
    if value < 0:
        raise PlanParseError(f"{label} must be >= 0")
    return value
