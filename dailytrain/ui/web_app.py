"""NiceGUI web UI for Daily Training."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from nicegui import ui

from dailytrain.core.state import SessionSnapshot
from dailytrain.ui.controller import SessionController, resolve_plan
from dailytrain.ui.display import (
    category_label,
    fmt_clock,
    section_dot_color,
    timer_color,
    timer_fraction,
)
from dailytrain.workout.library import list_templates
from dailytrain.workout.parser import PlanParseError
from dailytrain.workout.user_plans import list_user_plans


logger = logging.getLogger(__name__)

TIMER_COLORS = {"green": "#22c55e", "yellow": "#eab308", "red": "#ef4444"}


PlanSource = Literal["builtin", "custom"]


@dataclass(frozen=True)
class PlanOption:
    label: str
    source: PlanSource
    key: str
    path: Path | None = None


def _plan_options(plans_dir: Path | None) -> list[PlanOption]:
    options = [
        PlanOption(label=f"{template.name} (built-in)", source="builtin", key=template.key)
        for template in list_templates()
    ]
    options.extend(
        PlanOption(label=item.name, source="custom", key=item.key, path=item.path)
        for item in list_user_plans(base_dir=plans_dir)
    )
    return options


def run_web_ui(
    *,
    host: str = "127.0.0.1",
    port: int = 8089,
    tick_interval_sec: float = 1.0,
    plans_dir: Path | None = None,
) -> int:
    controller = SessionController(tick_interval_sec=tick_interval_sec)
    options = _plan_options(plans_dir)
    by_label = {option.label: option for option in options}
    completion_shown = False

    with ui.column().classes("w-full items-center gap-4") as setup_view:
        ui.label("DAILY TRAINING").classes("text-xl font-semibold tracking-wide")
        plan_select = ui.select(
            [option.label for option in options],
            value=options[0].label if options else None,
            label="Plan",
        ).classes("min-w-[320px]")
        start_btn = ui.button("Start training")

    with ui.column().classes("w-full items-center gap-4") as session_view:
        with ui.row().classes("items-center gap-2") as progress_row:
            pass
        category_text = ui.label("").classes("text-lg")
        section_text = ui.label("").classes("text-2xl font-bold")
        with ui.card().classes("min-w-[320px] items-center"):
            exercise_text = ui.label("").classes("text-xl font-bold")
            description_text = ui.label("").classes("text-sm text-slate-500")
            sets_reps_text = ui.label("").classes("text-2xl font-bold")
            clock_text = ui.label("").classes("text-5xl font-mono font-semibold")
            clock_bar = ui.linear_progress(value=0.0, show_value=False).classes("w-64")
        with ui.row().classes("gap-8"):
            prev_btn = ui.button("Previous")
            play_btn = ui.button("Play")
            next_btn = ui.button("Next")
        exit_btn = ui.button("Exit").props("outline color=negative")
    session_view.set_visibility(False)

    def render_progress(snapshot: SessionSnapshot) -> None:
        progress_row.clear()
        with progress_row:
            for item in snapshot.section_progress:
                color = section_dot_color(item)
                ui.element("div").style(
                    f"width: 12px; height: 12px; border-radius: 50%; background: {color};"
                ).tooltip(item.name)

    def render(snapshot: SessionSnapshot) -> None:
        nonlocal completion_shown
        render_progress(snapshot)
        if snapshot.completed:
            category_text.set_text("")
            section_text.set_text("Workout complete!")
            exercise_text.set_text("")
            description_text.set_text("")
            sets_reps_text.set_text("")
            clock_text.set_text("")
            clock_bar.set_visibility(False)
            if not completion_shown:
                completion_shown = True
                ui.notify("Congratulations, today's training is done!", color="positive")
            return

        category_text.set_text(category_label(snapshot.current_section_category))
        section_text.set_text(snapshot.current_section_name or "")
        exercise_text.set_text(snapshot.current_exercise_name or "Unnamed exercise")
        description_text.set_text(snapshot.current_exercise_description or "")
        if snapshot.sets_and_reps is not None:
            sets, reps = snapshot.sets_and_reps
            sets_reps_text.set_text(f"{sets} sets x {reps} reps")
        else:
            sets_reps_text.set_text("")

        total = snapshot.total_duration_for_current_exercise
        clock_bar.set_visibility(total > 0)
        if total > 0:
            color = TIMER_COLORS[timer_color(snapshot.remaining_seconds, total)]
            clock_text.set_text(fmt_clock(snapshot.remaining_seconds))
            clock_text.style(f"color: {color};")
            clock_bar.set_value(timer_fraction(snapshot.remaining_seconds, total))
        else:
            clock_text.set_text("")
        play_btn.set_text("Pause" if snapshot.running else "Play")

    def refresh_ui() -> None:
        snapshot = controller.snapshot()
        if snapshot is not None:
            render(snapshot)

    def show_setup() -> None:
        setup_view.set_visibility(True)
        session_view.set_visibility(False)

    def on_start() -> None:
        nonlocal completion_shown
        option = by_label.get(str(plan_select.value or ""))
        if option is None:
            ui.notify("Choose a plan first", color="negative")
            return
        try:
            if option.source == "custom":
                plan = resolve_plan(plan_path=option.path)
            else:
                plan = resolve_plan(template_key=option.key)
        except (PlanParseError, ValueError) as exc:
            logger.warning("Unable to load plan '%s': %s", option.label, exc)
            ui.notify(f"Unable to load plan: {exc}", color="negative")
            return
        completion_shown = False
        render(controller.start_session(plan))
        setup_view.set_visibility(False)
        session_view.set_visibility(True)

    def on_exit() -> None:
        controller.exit_session()
        show_setup()

    def on_previous() -> None:
        controller.skip_previous()
        refresh_ui()

    def on_play_pause() -> None:
        controller.toggle_play_pause()
        refresh_ui()

    def on_next() -> None:
        controller.skip_next()
        refresh_ui()

    start_btn.on_click(on_start)
    prev_btn.on_click(on_previous)
    play_btn.on_click(on_play_pause)
    next_btn.on_click(on_next)
    exit_btn.on_click(on_exit)

    ui.timer(0.5, refresh_ui)
    ui.run(host=host, port=port, reload=False, title="Daily Training")
    return 0
