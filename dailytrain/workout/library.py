"""Built-in workout plan templates."""

from __future__ import annotations

from dataclasses import dataclass

from dailytrain.workout.model import (
    Exercise,
    ExerciseMode,
    Section,
    SectionCategory,
    WorkoutPlan,
)


@dataclass(frozen=True)
class TemplateExercise:
    name: str
    description: str
    sets: int = 0
    reps: int = 0
    duration_sec: int = 0


@dataclass(frozen=True)
class TemplateSection:
    name: str
    category: SectionCategory
    duration_sec: int
    exercises: tuple[TemplateExercise, ...]


@dataclass(frozen=True)
class PlanTemplate:
    key: str
    name: str
    sections: tuple[TemplateSection, ...]


TEMPLATES: tuple[PlanTemplate, ...] = (
    PlanTemplate(
        key="basic_full_body",
        name="Basic Full Body",
        sections=(
            TemplateSection(
                "Warm-up",
                "warmup",
                300,
                (
                    TemplateExercise("Jog", "Easy jog to warm up", 1, 0, 180),
                    TemplateExercise("High knees", "20 per leg", 1, 40, 60),
                    TemplateExercise("Arm circles", "Open up shoulders and chest", 1, 10, 60),
                ),
            ),
            TemplateSection(
                "Main training",
                "training",
                1800,
                (
                    TemplateExercise("Push-ups", "Standard push-up, chest close to the floor", 3, 12),
                    TemplateExercise("Squats", "Standard squat, thighs parallel to the floor", 3, 15),
                    TemplateExercise("Plank", "Hold the plank position", 3, 0, 30),
                ),
            ),
            TemplateSection(
                "Stretch",
                "stretch",
                300,
                (
                    TemplateExercise("Hamstring stretch", "Seated forward fold", 1, 0, 30),
                    TemplateExercise("Shoulder stretch", "Stretch shoulders and deltoids", 1, 0, 30),
                    TemplateExercise("Chest stretch", "Open up the pecs", 1, 0, 30),
                ),
            ),
        ),
    ),
    PlanTemplate(
        key="quick_mobility",
        name="Quick Mobility 10",
        sections=(
            TemplateSection(
                "Warm-up",
                "warmup",
                120,
                (
                    TemplateExercise("Jumping jacks", "Light and springy", 1, 0, 60),
                    TemplateExercise("Hip circles", "10 each direction", 1, 20),
                ),
            ),
            TemplateSection(
                "Mobility",
                "stretch",
                300,
                (
                    TemplateExercise("Cat-cow", "Slow, follow the breath", 1, 0, 60),
                    TemplateExercise("World's greatest stretch", "Alternate sides", 1, 0, 90),
                    TemplateExercise("Deep squat hold", "Heels down, chest up", 1, 0, 60),
                ),
            ),
            TemplateSection(
                "Cool-down",
                "cooldown",
                120,
                (
                    TemplateExercise("Child's pose", "Relax the lower back", 1, 0, 60),
                    TemplateExercise("Box breathing", "4 in, 4 hold, 4 out, 4 hold", 1, 0, 60),
                ),
            ),
        ),
    ),
)


def list_templates() -> tuple[PlanTemplate, ...]:
    return TEMPLATES


def _infer_mode(duration_sec: int) -> ExerciseMode:
    """Any positive duration is played as a countdown."""
    return "timed" if duration_sec > 0 else "reps"


def build_plan_from_template(template_key: str) -> WorkoutPlan:
    template = next((item for item in TEMPLATES if item.key == template_key), None)
    if template is None:
        raise ValueError(f"Unknown workout template '{template_key}'")

    sections: list[Section] = []
    for s_order, section in enumerate(template.sections):
        exercises = tuple(
            Exercise(
                name=item.name,
                mode=_infer_mode(item.duration_sec),
                sets=item.sets,
                reps=item.reps,
                duration_sec=item.duration_sec,
                description=item.description,
                order=e_order,
            )
            for e_order, item in enumerate(section.exercises)
        )
        sections.append(
            Section(
                name=section.name,
                category=section.category,
                exercises=exercises,
                duration_sec=section.duration_sec,
                order=s_order,
            )
        )
    return WorkoutPlan(name=template.name, sections=tuple(sections))
