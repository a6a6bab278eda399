# tests/test_function_task.py

from __future__ import annotations

import pytest

from task_runner.core.runner import Runner
from task_runner.tasks.function_task import FunctionTask


def test_function_task_name_defaults_to_function_name() -> None:
    def double(x):
        return x * 2

    ft = FunctionTask(double)
    assert ft.name == "double"
    assert ft.run(4) == 8
    assert repr(ft) == "FunctionTask(name='double')"


def test_function_task_explicit_name() -> None:
    assert FunctionTask(len, name="size").name == "size"


def test_function_task_rejects_non_callable() -> None:
    with pytest.raises(TypeError):
        FunctionTask(42)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_async_function_task_is_awaited_by_runner() -> None:
    async def fetch(args):
        return {"got": args}

    runner = Runner()
    runner.register("fetch", FunctionTask(fetch))

    assert await runner.invoke("fetch", 1) == {"got": 1}


def test_function_task_keeps_explicit_empty_name() -> None:
    def double(x):
        return x * 2

    assert FunctionTask(double, name="").name == ""
