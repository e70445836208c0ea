"""Terminal CLI entrypoint for Daily Training."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import os
import stat
import sys
from pathlib import Path
from typing import TextIO

from dailytrain.core.state import SessionSnapshot
from dailytrain.logging_config import VALID_LEVELS, configure_logging
from dailytrain.ui.controller import SessionController, resolve_plan
from dailytrain.ui.display import status_line
from dailytrain.workout.library import list_templates
from dailytrain.workout.model import WorkoutPlan
from dailytrain.workout.parser import PlanParseError
from dailytrain.workout.user_plans import list_user_plans


logger = logging.getLogger(__name__)

COMMAND_HELP = "Commands: p = play/pause, n = next, b = previous, q = exit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Daily Training session runner")
    parser.add_argument("--plan", default=None, help="Run a workout plan JSON file")
    parser.add_argument(
        "--template",
        default=None,
        help="Run a built-in plan template by key (see --list-templates)",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List built-in plan templates",
    )
    parser.add_argument(
        "--list-plans",
        action="store_true",
        help="List user plans found in the plans directory",
    )
    parser.add_argument(
        "--plans-dir",
        type=Path,
        default=None,
        help="Directory holding user plan JSON files (default ~/.daily-training/plans)",
    )
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=1.0,
        help="Seconds between countdown ticks",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=VALID_LEVELS,
        type=str.upper,
        help="Logging level",
    )
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI)",
    )
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8089,
        help="Port for --ui-web",
    )
    return parser


def run_list_templates() -> int:
    for template in list_templates():
        exercises = sum(len(section.exercises) for section in template.sections)
        print(
            f"{template.key:<20} {template.name:<24} "
            f"{len(template.sections)} sections, {exercises} exercises"
        )
    return 0


def run_list_plans(plans_dir: Path | None) -> int:
    plans = list_user_plans(base_dir=plans_dir)
    if not plans:
        print("No user plans found")
        return 0
    for item in plans:
        print(f"{item.key:<20} {item.name:<24} {item.section_count} sections  {item.path}")
    return 0


async def _open_command_stream(
    source: TextIO,
) -> tuple[asyncio.StreamReader, asyncio.BaseTransport | None]:
    """Stream stdin lines without blocking the loop.

    Regular files are read up front; pipes and terminals go through a read
    pipe transport on a duplicate descriptor so closing it leaves stdin open.
    """
    reader = asyncio.StreamReader()
    fd = source.fileno()
    if stat.S_ISREG(os.fstat(fd).st_mode):
        reader.feed_data(source.read().encode("utf-8"))
        reader.feed_eof()
        return reader, None

    pipe = os.fdopen(os.dup(fd), "rb", buffering=0)
    loop = asyncio.get_running_loop()
    transport, _ = await loop.connect_read_pipe(
        lambda: asyncio.StreamReaderProtocol(reader), pipe
    )
    return reader, transport


async def run_session(
    plan: WorkoutPlan,
    tick_interval_sec: float = 1.0,
    stdin: TextIO | None = None,
) -> int:
    source = stdin or sys.stdin
    done = asyncio.Event()
    controller = SessionController(tick_interval_sec=tick_interval_sec)

    def on_snapshot(snapshot: SessionSnapshot) -> None:
        print(status_line(snapshot))
        if snapshot.completed:
            done.set()

    first = controller.start_session(plan, on_snapshot=on_snapshot)
    print(status_line(first))
    if first.completed:
        controller.exit_session()
        return 0
    print(COMMAND_HELP)

    def on_command(command: str) -> None:
        if command in {"p", ""}:
            controller.toggle_play_pause()
        elif command == "n":
            controller.skip_next()
        elif command == "b":
            controller.skip_previous()
        elif command == "q":
            controller.exit_session()
            print("Session exited")
            done.set()
        else:
            print(COMMAND_HELP)

    async def read_commands(reader: asyncio.StreamReader) -> None:
        while not done.is_set():
            raw = await reader.readline()
            if not raw:
                controller.exit_session()
                done.set()
                return
            on_command(raw.decode("utf-8", errors="replace").strip().lower())

    stdin_blocking = os.get_blocking(source.fileno())
    reader, transport = await _open_command_stream(source)
    reader_task = asyncio.create_task(read_commands(reader))
    try:
        await done.wait()
    finally:
        reader_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await reader_task
        if transport is not None:
            transport.close()
        os.set_blocking(source.fileno(), stdin_blocking)
        controller.exit_session()
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.ui_web:
        from dailytrain.ui.web_app import run_web_ui

        return run_web_ui(
            host=args.web_host,
            port=args.web_port,
            tick_interval_sec=args.tick_interval,
            plans_dir=args.plans_dir,
        )

    if args.list_templates:
        return run_list_templates()
    if args.list_plans:
        return run_list_plans(args.plans_dir)

    if args.plan is None and args.template is None:
        parser.print_help()
        return 1
    if args.tick_interval <= 0:
        print("Error: --tick-interval must be > 0")
        return 2

    try:
        plan = resolve_plan(template_key=args.template, plan_path=args.plan)
    except (PlanParseError, ValueError) as exc:
        logger.error("Unable to load plan: %s", exc)
        print(f"Error: {exc}")
        return 2

    try:
        return asyncio.run(run_session(plan, tick_interval_sec=args.tick_interval))
    except KeyboardInterrupt:
        print("Session exited")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
