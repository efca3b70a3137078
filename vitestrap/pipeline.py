"""vitestrap setup workflow.

Bootstraps a Vite + React + Tailwind CSS project in fixed steps:

1. Check that Node.js and npm are installed.
2. Ask for the project folder name.
3. ``npm create vite@latest <folder>`` (React template).
4. ``npm install tailwindcss @tailwindcss/vite`` inside the new project.
5. Write ``vite.config.js``, ``src/index.css`` and ``src/App.jsx``.
6. Open the project in VS Code when the ``code`` CLI is available.
7. Offer to start the development server.

Usage::

    vitestrap
    python -m vitestrap.pipeline
"""

from __future__ import annotations

import asyncio
import re
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from vitestrap.config import Config
from vitestrap.editor import EditorLauncher
from vitestrap.harness import CommandRunner, Presenter, ToolProber, ask
from vitestrap.scaffolder import ProjectFiles
from vitestrap.utils import (
    console as default_console,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
)

AskFn = Callable[[str], Awaitable[str]]

_YES = re.compile(r"^y(es)?$", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SetupError(Exception):
    """Raised when a precondition for the setup is not met."""


# ---------------------------------------------------------------------------
# Workflow context
# ---------------------------------------------------------------------------


@dataclass
class WorkflowContext:
    """State threaded through the workflow steps.

    Attributes:
        base_dir: Directory the project folder is created in.
        folder: Folder name entered by the user.
        exit_code: Set once the workflow has decided how the process ends.
        detached: Fire-and-forget tasks; held here only so they are not
            garbage collected while running.
    """

    base_dir: Path = field(default_factory=lambda: Path("."))
    folder: str = ""
    exit_code: int | None = None
    detached: set[asyncio.Task[None]] = field(default_factory=set)

    @property
    def project_dir(self) -> Path:
        return self.base_dir / self.folder

    @property
    def finished(self) -> bool:
        return self.exit_code is not None

    def terminate(self, code: int) -> None:
        """Record the exit status of the workflow."""
        self.exit_code = code

    def detach(self, task: asyncio.Task[None]) -> None:
        self.detached.add(task)
        task.add_done_callback(self.detached.discard)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class Pipeline:
    """Runs the setup steps in order against a ``WorkflowContext``.

    Every collaborator can be injected; defaults are built from *config*.
    Steps never recover locally: ``SetupError`` and ``CommandError`` propagate
    to the caller (normally :func:`run_setup`).
    """

    def __init__(
        self,
        config: Config,
        *,
        console: Console | None = None,
        runner: CommandRunner | None = None,
        prober: ToolProber | None = None,
        prompt: AskFn | None = None,
        editor: EditorLauncher | None = None,
        files: ProjectFiles | None = None,
    ) -> None:
        self.config = config
        self.console = console if console is not None else default_console
        self.runner = runner or CommandRunner(
            Presenter(
                console=self.console,
                frames=config.spinner.frames,
                interval=config.spinner.interval,
            )
        )
        self.prober = prober or ToolProber()
        self.prompt = prompt or self._ask
        self.editor = editor or EditorLauncher(
            binary=config.editor.binary,
            entry_file=config.editor.entry_file,
        )
        self.files = files or ProjectFiles(console=self.console)

    async def _ask(self, question: str) -> str:
        return await ask(question, console=self.console)

    async def run(self, context: WorkflowContext) -> int:
        """Execute every step and return the exit code (0 on success)."""
        self.console.clear()
        self.console.print()
        print_step("🚀 Starting Vite + React + Tailwind setup...", self.console)

        await self.check_tools()
        await self.choose_folder(context)
        await self.create_project(context)
        await self.write_files(context)
        await self.open_editor(context)
        await self.offer_dev_server(context)

        if not context.finished:
            context.terminate(0)
        return context.exit_code

    # -- Steps --------------------------------------------------------------

    async def check_tools(self) -> None:
        commands = self.config.commands
        if not await self.prober.exists(commands.runtime):
            raise SetupError("Node.js not found. Please install it first.")
        if not await self.prober.exists(commands.package_manager):
            raise SetupError(
                f"{commands.package_manager} not found. Please install Node.js first."
            )

    async def choose_folder(self, context: WorkflowContext) -> None:
        folder = await self.prompt("\nEnter your project folder name: ")
        if not folder:
            raise SetupError("Folder name cannot be empty.")
        context.folder = folder
        self.console.print()

    async def create_project(self, context: WorkflowContext) -> None:
        await self.runner.run(
            self.config.scaffold_command(context.folder),
            "Creating Vite + React project...",
            cwd=context.base_dir,
        )
        await self.runner.run(
            self.config.commands.install,
            "Installing Tailwind CSS and Vite plugin...",
            cwd=context.project_dir,
        )
        self.console.print()

    async def write_files(self, context: WorkflowContext) -> None:
        await self.files.write_all(context.project_dir, {"project_name": context.folder})
        self.console.print()

    async def open_editor(self, context: WorkflowContext) -> None:
        if await self.prober.exists(self.editor.binary):
            print_info("💻 Opening project in VS Code...", self.console)
            context.detach(self.editor.launch(context.project_dir.resolve()))
        else:
            print_warning("⚠️ VS Code not found. Open manually if needed.", self.console)

    async def offer_dev_server(self, context: WorkflowContext) -> None:
        answer = await self.prompt(
            "\nDo you want to start the development server now? (y/n): "
        )
        dev_command = self.config.commands.dev
        self.console.print()
        if _YES.match(answer):
            print_success("🚀 Starting development server...", self.console)
            self.console.print()
            await self.runner.run_foreground(dev_command, cwd=context.project_dir)
            context.terminate(0)
        else:
            print_warning(
                f"You can run '{dev_command}' later inside the project folder.",
                self.console,
            )
            self.console.print()


# ---------------------------------------------------------------------------
# Top-level error handling
# ---------------------------------------------------------------------------


async def run_setup(
    pipeline: Pipeline | None = None,
    context: WorkflowContext | None = None,
) -> int:
    """Run the setup and turn any failure into a printed message and exit code 1.

    This is the only place fatal errors are reported.  When *pipeline* is
    omitted it is built from ``Config.from_env()`` inside the handler, so
    configuration errors are reported the same way.
    """
    out = pipeline.console if pipeline is not None else default_console
    try:
        if pipeline is None:
            pipeline = Pipeline(Config.from_env())
        if context is None:
            context = WorkflowContext(base_dir=pipeline.config.base_dir)
        return await pipeline.run(context)
    except SetupError as exc:
        print_error(f"❌ {exc}", out)
    except Exception as exc:  # CommandError, config errors, anything unexpected
        print_error(f"❌ Error: {exc}", out)
    if context is not None:
        context.terminate(1)
    return 1


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``vitestrap`` / ``python -m vitestrap.pipeline``."""
    try:
        exit_code = asyncio.run(run_setup())
    except KeyboardInterrupt:
        default_console.print()
        print_error("❌ Setup cancelled.")
        sys.exit(130)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
