# src/task_runner/core/parsing.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import InvalidInput
from .ports import ParseResult


def default_parse_arguments(data: Any) -> ParseResult:
    """
    Default parsing step.

    Accepts a mapping like {"task": "add", "args": {...}}:
    - task is coerced with str()
    - args is passed through untouched (None included)

    Embedding applications are expected to supply their own parser when their
    request shape differs.
    """
    if isinstance(data, Mapping) and "task" in data and "args" in data:
        return ParseResult(task_name=str(data["task"]), args=data["args"])

    raise InvalidInput("Invalid task data: expected object with task and args properties")
