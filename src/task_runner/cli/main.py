# src/task_runner/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Runner from configured task modules, then:
- `task-runner list`                      -> print available tasks
- `task-runner run NAME --args '{"a": 1}'` -> dispatch one task, print its JSON result

Runner errors (unknown task, bad payload) are reported on stderr with exit code 2.
Task failures are logged with traceback and reported with exit code 1.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from ..cli.bootstrap import create_runner
from ..config import Settings, get_settings
from ..core.errors import RunnerError
from ..core.runner import Runner
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="task-runner", description="Run named tasks.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List registered tasks.")

    run_p = sub.add_parser("run", help="Run one task by name.")
    run_p.add_argument("name", help="Task name.")
    run_p.add_argument(
        "--args",
        dest="args_json",
        default="null",
        help="Task arguments as JSON (default: null).",
    )
    return parser


def _run_task(runner: Runner, name: str, args_json: str) -> int:
    try:
        args: Any = json.loads(args_json)
    except json.JSONDecodeError as e:
        print(f"Invalid --args JSON: {e}", file=sys.stderr)
        return 2

    try:
        result = asyncio.run(runner.handle({"task": name, "args": args}))
    except RunnerError as e:
        print(str(e), file=sys.stderr)
        return 2
    except Exception:
        logger.exception("Task %s failed", name)
        return 1

    print(json.dumps(result, ensure_ascii=False, default=str))
    return 0


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        settings = get_settings()

    # getLevelName maps known names to ints; anything else comes back as a str
    console_level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.debug("Starting %s command=%s", settings.app_name, args.command)

    runner = create_runner(settings=settings)

    if args.command == "list":
        runner.describe()
        return 0

    if settings.describe_on_start:
        # stdout carries the JSON result
        runner.describe(sys.stderr)
    return _run_task(runner, args.name, args.args_json)


if __name__ == "__main__":
    raise SystemExit(main())
