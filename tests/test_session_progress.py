from __future__ import annotations

from dailytrain.core.state import project_section_progress
from dailytrain.workout.model import Section


SECTIONS = (
    Section("Warm-up", "warmup"),
    Section("Main", "training"),
    Section("Stretch", "stretch"),
    Section("Relax", "cooldown"),
)


def test_progress_splits_on_current_section() -> None:
    progress = project_section_progress(SECTIONS, section_index=2)

    assert [item.status for item in progress] == [
        "completed",
        "completed",
        "active",
        "pending",
    ]
    assert [item.index for item in progress] == [0, 1, 2, 3]
    assert progress[3].category == "cooldown"


def test_progress_marks_everything_done_once_completed() -> None:
    progress = project_section_progress(SECTIONS, section_index=3, completed=True)
    assert {item.status for item in progress} == {"completed"}


def test_progress_for_empty_plan() -> None:
    assert project_section_progress((), section_index=0) == ()
