# tests/conftest.py

from __future__ import annotations

import importlib
import re
import textwrap
from pathlib import Path

import pytest

from task_runner.config import Settings
from task_runner.core.runner import Runner

TASK_MODULE_SOURCE = '''
def register_tasks(runner):
    @runner.task("add")
    def add(args):
        return args["a"] + args["b"]

    @runner.task()
    async def echo(args):
        return args

    @runner.task("boom")
    def boom(args):
        raise RuntimeError("boom")
'''


@pytest.fixture()
def runner() -> Runner:
    return Runner()


@pytest.fixture()
def task_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """
    Importable module exposing register_tasks(runner).

    Lives in tmp_path so every test gets a fresh module name on a fresh sys.path entry.
    """
    name = "sample_tasks_" + re.sub(r"\W", "_", tmp_path.name)
    (tmp_path / f"{name}.py").write_text(textwrap.dedent(TASK_MODULE_SOURCE), "utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    importlib.invalidate_caches()
    return name


@pytest.fixture()
def settings(tmp_path: Path, task_module: str) -> Settings:
    """
    Settings built directly rather than from env, to keep tests isolated and deterministic.
    """
    return Settings(
        app_name="task-runner-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        task_modules=[task_module],
        describe_on_start=False,
    )
