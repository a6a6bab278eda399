"""
task_runner: a small named-task registry and dispatcher.

    runner = Runner()
    runner.register("add", FunctionTask(lambda a: a["a"] + a["b"]))
    await runner.handle({"task": "add", "args": {"a": 1, "b": 2}})  # -> 3
"""

from .core.errors import InvalidInput, RunnerError, TaskNotFound
from .core.parsing import default_parse_arguments
from .core.ports import ArgumentParser, ParseResult, Task
from .core.runner import Runner
from .tasks.function_task import FunctionTask

__all__ = [
    "ArgumentParser",
    "FunctionTask",
    "InvalidInput",
    "ParseResult",
    "Runner",
    "RunnerError",
    "Task",
    "TaskNotFound",
    "default_parse_arguments",
]
