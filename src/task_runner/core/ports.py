# src/task_runner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the runner.

The runner depends on Protocols instead of concrete task types.
Anything with a run(args) method can be registered; the result may be a plain
value or an awaitable.
"""

from typing import Any, Awaitable, Callable, NamedTuple, Protocol, Union

TaskResult = Union[Any, Awaitable[Any]]


class Task(Protocol):
    """A unit of work: accepts one argument, returns a value or an awaitable."""
    def run(self, args: Any) -> TaskResult: ...


class ParseResult(NamedTuple):
    """What a parser extracts from an incoming payload."""

    task_name: str
    args: Any


ArgumentParser = Callable[[Any], "ParseResult | tuple[str, Any]"]
# (data) -> (task_name, args). A plain 2-tuple is accepted as well.
