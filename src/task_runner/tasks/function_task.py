# src/task_runner/tasks/function_task.py

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.ports import TaskResult


class FunctionTask:
    """
    Task adapter around a plain callable.

    fn(args) may be a regular function or a coroutine function. For the latter,
    run() returns the coroutine and the runner awaits it.
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: Callable[[Any], Any], name: str | None = None) -> None:
        if not callable(fn):
            raise TypeError(f"FunctionTask expects a callable, got {type(fn).__name__}")
        self.fn = fn
        self.name = name if name is not None else getattr(fn, "__name__", type(fn).__name__)

    def run(self, args: Any) -> TaskResult:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"FunctionTask(name={self.name!r})"
