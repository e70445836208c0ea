"""Display helpers shared by the terminal and web presenters."""

from __future__ import annotations

from dailytrain.core.state import SectionProgress, SessionSnapshot
from dailytrain.workout.model import CATEGORY_ACCENTS, CATEGORY_LABELS

DONE_COLOR = "#22c55e"
PENDING_COLOR = "#d1d5db"


def fmt_clock(total_seconds: int) -> str:
    minutes, seconds = divmod(max(0, total_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def timer_fraction(remaining_seconds: int, total_seconds: int) -> float:
    """Share of the countdown already elapsed, in [0, 1]."""
    if total_seconds <= 0:
        return 0.0
    remaining = min(max(0, remaining_seconds), total_seconds)
    return 1.0 - (remaining / total_seconds)


def timer_color(remaining_seconds: int, total_seconds: int) -> str:
    if total_seconds <= 0:
        return "green"
    share = remaining_seconds / total_seconds
    if share > 0.5:
        return "green"
    if share > 0.25:
        return "yellow"
    return "red"


def category_label(category: str | None) -> str:
    if category is None:
        return ""
    return CATEGORY_LABELS.get(category, category)


def section_dot_color(item: SectionProgress) -> str:
    if item.status == "completed":
        return DONE_COLOR
    if item.status == "active":
        return CATEGORY_ACCENTS.get(item.category, "#3b82f6")
    return PENDING_COLOR


def status_line(snapshot: SessionSnapshot) -> str:
    if snapshot.completed:
        return f"[{snapshot.plan_name}] Workout complete!"

    dots = "".join(
        {"completed": "#", "active": ">", "pending": "."}[item.status]
        for item in snapshot.section_progress
    )
    parts = [
        f"[{dots}]",
        f"{category_label(snapshot.current_section_category)}: "
        f"{snapshot.current_section_name or ''}",
        f"{snapshot.exercise_index + 1}/{snapshot.exercise_total} "
        f"{snapshot.current_exercise_name or ''}",
    ]
    if snapshot.sets_and_reps is not None:
        sets, reps = snapshot.sets_and_reps
        parts.append(f"{sets} x {reps}")
    if snapshot.total_duration_for_current_exercise > 0:
        state = "running" if snapshot.running else "paused"
        parts.append(f"{fmt_clock(snapshot.remaining_seconds)} ({state})")
    return " | ".join(parts)
