"""User-defined workout plans stored locally."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from dailytrain.workout.model import WorkoutPlan
from dailytrain.workout.parser import load_plan


def default_plans_dir() -> Path:
    return Path.home() / ".daily-training" / "plans"


@dataclass(frozen=True)
class UserPlan:
    key: str
    name: str
    section_count: int
    path: Path


def list_user_plans(base_dir: Path | None = None) -> list[UserPlan]:
    root = base_dir or default_plans_dir()
    if not root.exists():
        return []
    out: list[UserPlan] = []
    for file in sorted(root.glob("*.json")):
        try:
            payload = json.loads(file.read_text(encoding="utf-8"))
            name = str(payload.get("name", file.stem))
            sections = payload.get("sections", [])
            section_count = len(sections) if isinstance(sections, list) else 0
        except (OSError, ValueError, AttributeError):
            name = file.stem
            section_count = 0
        out.append(
            UserPlan(key=file.stem, name=name, section_count=section_count, path=file)
        )
    return out


def load_user_plan(path: Path) -> WorkoutPlan:
    return load_plan(path)
