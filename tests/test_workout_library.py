from __future__ import annotations

import pytest

from dailytrain.workout.library import build_plan_from_template, list_templates
from dailytrain.workout.model import validate_plan


def test_basic_full_body_template_exists_and_builds() -> None:
    keys = {template.key for template in list_templates()}
    assert "basic_full_body" in keys

    plan = build_plan_from_template("basic_full_body")
    assert plan.name == "Basic Full Body"
    assert [s.category for s in plan.ordered_sections()] == ["warmup", "training", "stretch"]
    assert plan.exercise_count == 9

    training = plan.ordered_sections()[1]
    push_ups, squats, plank = training.ordered_exercises()
    assert push_ups.mode == "reps"
    assert (squats.sets, squats.reps) == (3, 15)
    assert plank.mode == "timed"
    assert plank.countdown_sec == 30


def test_all_templates_build_valid_plans() -> None:
    for template in list_templates():
        plan = validate_plan(build_plan_from_template(template.key))
        assert plan.exercise_count > 0


def test_unknown_template_raises() -> None:
    with pytest.raises(ValueError):
        build_plan_from_template("marathon")
