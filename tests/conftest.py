"""Shared pytest fixtures for the vitestrap test suite.

Provides reusable fixtures for:
- A Rich console that records output into a string buffer
- Fake collaborators for the pipeline (runner, prober, prompt, editor, files)
- The Python interpreter as a shell-safe command for subprocess tests
"""

from __future__ import annotations

import asyncio
import io
import shlex
import sys
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from vitestrap.harness import CommandError


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------


@pytest.fixture
def capture_console() -> Console:
    """Console writing plain text (no colour, no control codes) to a StringIO."""
    return Console(
        file=io.StringIO(),
        force_terminal=False,
        color_system=None,
        width=200,
    )


@pytest.fixture
def output(capture_console: Console):
    """Callable returning everything written so far to ``capture_console``."""
    return lambda: capture_console.file.getvalue()


@pytest.fixture
def python_cmd() -> str:
    """The running interpreter, quoted for use in a shell command line."""
    return shlex.quote(sys.executable)


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FakeRunner:
    """Records commands instead of running them."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, str, Path | None]] = []
        self.foreground: list[tuple[str, Path | None]] = []

    async def run(self, command: str, label: str, cwd: Any = None) -> None:
        self.calls.append((command, label, Path(cwd) if cwd is not None else None))
        if command in self.fail_on:
            raise CommandError(command, 1)

    async def run_foreground(self, command: str, cwd: Any = None) -> int:
        self.foreground.append((command, Path(cwd) if cwd is not None else None))
        return 0


class FakeProber:
    """Reports only the tools listed in ``present`` as installed."""

    def __init__(self, present: set[str]) -> None:
        self.present = present
        self.probed: list[str] = []

    async def exists(self, tool: str) -> bool:
        self.probed.append(tool)
        return tool in self.present


class ScriptedPrompt:
    """Answers questions from a fixed list, in order."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    async def __call__(self, question: str) -> str:
        self.questions.append(question)
        return self.answers.pop(0)


class FakeEditor:
    binary = "code"

    def __init__(self) -> None:
        self.launched: list[Path] = []

    def launch(self, project_dir: Path) -> asyncio.Task[None]:
        self.launched.append(Path(project_dir))
        return asyncio.get_running_loop().create_task(asyncio.sleep(0))


class FakeFiles:
    def __init__(self) -> None:
        self.writes: list[tuple[Path, dict[str, Any]]] = []

    async def write_all(self, project_dir: Path, context: dict[str, Any]) -> list[Path]:
        self.writes.append((Path(project_dir), context))
        return []


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def fake_editor() -> FakeEditor:
    return FakeEditor()


@pytest.fixture
def fake_files() -> FakeFiles:
    return FakeFiles()


@pytest.fixture
def make_prober():
    """Factory: ``make_prober({"node", "npm"})``."""
    return FakeProber


@pytest.fixture
def make_prompt():
    """Factory: ``make_prompt(["my-app", "n"])``."""
    return ScriptedPrompt
