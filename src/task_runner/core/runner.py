# src/task_runner/core/runner.py

from __future__ import annotations

"""
Named task registry + dispatcher.

Flow for one request:
- parse_arguments(data) -> (task_name, args)
- look the task up by name
- task.run(args), awaiting the result if it is awaitable

Nothing here catches, retries or logs task failures; they surface to the caller.
"""

import inspect
import logging
import sys
import threading
from collections.abc import Callable
from typing import Any, TextIO

from ..tasks.function_task import FunctionTask
from .errors import TaskNotFound
from .parsing import default_parse_arguments
from .ports import ArgumentParser, Task

logger = logging.getLogger(__name__)


class Runner:
    """
    Registry of tasks keyed by name.

    Thread-safety:
    - register() is serialized with a lock
    - lookups read the dict directly; a dispatch racing with a registration
      sees either the old or the new task for that name
    """

    def __init__(self, parse_arguments: ArgumentParser | None = None) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()
        self.parse_arguments: ArgumentParser = parse_arguments or default_parse_arguments

    # ---- registry ----

    def register(self, name: str, task: Task) -> None:
        with self._lock:
            replaced = name in self._tasks
            self._tasks[name] = task
        logger.debug("Task registered name=%r replaced=%s", name, replaced)

    load = register

    def task(self, name: str | None = None) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
        """
        Decorator: register a plain function as a task.

            @runner.task("add")
            def add(args): return args["a"] + args["b"]

        The function itself is returned unchanged.
        """

        def deco(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
            ft = FunctionTask(fn, name=name)
            self.register(ft.name, ft)
            return fn

        return deco

    def get_task(self, name: str) -> Task | None:
        return self._tasks.get(name)

    def get_tasks(self) -> dict[str, Task]:
        """Live mapping (not a copy)."""
        return self._tasks

    def list_names(self) -> list[str]:
        with self._lock:
            return list(self._tasks)

    get_task_list = list_names

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- diagnostics ----

    def build_description(self) -> str:
        lines = ["Available tasks:"]
        for name in self.list_names():
            lines.append(f"- {name}")
        return "\n".join(lines)

    def describe(self, out: TextIO | None = None) -> None:
        stream = out if out is not None else sys.stdout
        stream.write(self.build_description() + "\n")

    # ---- dispatch ----

    async def invoke(self, name: str, args: Any) -> Any:
        task = self._tasks.get(name)
        if task is None:
            raise TaskNotFound(name)

        logger.debug("Dispatching task name=%r", name)
        result = task.run(args)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def handle(self, data: Any) -> Any:
        task_name, args = self.parse_arguments(data)
        return await self.invoke(task_name, args)
