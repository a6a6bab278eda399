# src/task_runner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the Runner (optionally with a custom parser),
- imports configured task modules and lets each one register its tasks.

A task module is any importable module exposing:

    def register_tasks(runner: Runner) -> None: ...
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable

from ..config import Settings, get_settings
from ..core.ports import ArgumentParser
from ..core.runner import Runner

logger = logging.getLogger(__name__)

REGISTER_HOOK = "register_tasks"


def load_task_modules(runner: Runner, module_names: Iterable[str]) -> list[str]:
    """
    Import each module and call its register_tasks(runner).

    Import errors propagate (a misconfigured module list should fail loudly).
    Modules without the hook are skipped with a warning.
    Returns the names of modules that registered tasks.
    """
    loaded: list[str] = []
    for module_name in module_names:
        module = importlib.import_module(module_name)
        hook = getattr(module, REGISTER_HOOK, None)
        if not callable(hook):
            logger.warning("Task module %s has no %s(runner); skipped", module_name, REGISTER_HOOK)
            continue

        before = len(runner)
        hook(runner)
        loaded.append(module_name)
        logger.info(
            "Loaded task module %s (%d tasks registered, %d total)",
            module_name,
            len(runner) - before,
            len(runner),
        )
    return loaded


def create_runner(
    *,
    settings: Settings | None = None,
    parse_arguments: ArgumentParser | None = None,
) -> Runner:
    """
    Create a Runner populated from settings.task_modules.

    Keeping settings injectable makes the host easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    runner = Runner(parse_arguments)
    load_task_modules(runner, settings.task_modules)
    return runner
