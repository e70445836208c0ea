"""Session state, published snapshots and section progress."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from dailytrain.workout.model import Section, SectionCategory


SessionPhase = Literal["active", "completed"]
SectionStatus = Literal["completed", "active", "pending"]


@dataclass
class SessionState:
    section_index: int = 0
    exercise_index: int = 0
    remaining_seconds: int = 0
    running: bool = False
    phase: SessionPhase = "active"


@dataclass(frozen=True)
class SectionProgress:
    index: int
    name: str
    category: SectionCategory
    status: SectionStatus


@dataclass(frozen=True)
class SessionSnapshot:
    plan_name: str
    section_index: int
    section_total: int
    exercise_index: int
    exercise_total: int
    current_section_name: str | None
    current_section_category: SectionCategory | None
    current_exercise_name: str | None
    current_exercise_description: str | None
    sets_and_reps: tuple[int, int] | None
    remaining_seconds: int
    total_duration_for_current_exercise: int
    running: bool
    completed: bool
    section_progress: tuple[SectionProgress, ...]


def project_section_progress(
    sections: Sequence[Section],
    section_index: int,
    completed: bool = False,
) -> tuple[SectionProgress, ...]:
    out: list[SectionProgress] = []
    for index, section in enumerate(sections):
        status: SectionStatus
        if completed or index < section_index:
            status = "completed"
        elif index == section_index:
            status = "active"
        else:
            status = "pending"
        out.append(
            SectionProgress(
                index=index,
                name=section.name,
                category=section.category,
                status=status,
            )
        )
    return tuple(out)
