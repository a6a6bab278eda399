# tests/test_bootstrap.py

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest

from task_runner.cli.bootstrap import create_runner, load_task_modules
from task_runner.config import Settings
from task_runner.core.runner import Runner


@pytest.mark.asyncio
async def test_create_runner_loads_configured_modules(settings: Settings) -> None:
    runner = create_runner(settings=settings)

    assert sorted(runner.list_names()) == ["add", "boom", "echo"]
    assert await runner.handle({"task": "add", "args": {"a": 1, "b": 2}}) == 3
    assert await runner.invoke("echo", [1]) == [1]


def test_create_runner_uses_custom_parser(settings: Settings) -> None:
    def parse(data):
        return data, None

    runner = create_runner(settings=settings, parse_arguments=parse)
    assert runner.parse_arguments is parse


def test_module_without_hook_is_skipped(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    (tmp_path / "no_hook_tasks.py").write_text("VALUE = 1\n", "utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    importlib.invalidate_caches()

    runner = Runner()
    with caplog.at_level(logging.WARNING, logger="task_runner"):
        loaded = load_task_modules(runner, ["no_hook_tasks"])

    assert loaded == []
    assert len(runner) == 0
    assert "no_hook_tasks" in caplog.text


def test_missing_module_raises() -> None:
    with pytest.raises(ModuleNotFoundError):
        load_task_modules(Runner(), ["definitely_not_a_task_module_xyz"])
