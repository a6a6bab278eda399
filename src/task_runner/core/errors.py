# src/task_runner/core/errors.py

from __future__ import annotations


class RunnerError(Exception):
    """Base class for errors raised by the runner itself.

    Failures raised by a task are never wrapped in this hierarchy: they reach
    the caller of Runner.invoke()/Runner.handle() unchanged.
    """


class InvalidInput(RunnerError, ValueError):
    """The parsing step could not extract (task_name, args) from the payload."""


class TaskNotFound(RunnerError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Task {name} not found")
        self.name = name
