"""Shell command execution with spinner feedback.

``CommandRunner.run`` executes one command line through the platform shell,
showing the presenter's spinner until the process exits.  Only the exit code
is observed; the child's output goes to the null device.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from vitestrap.harness.presenter import Presenter


class CommandError(Exception):
    """Raised when a command exits with a nonzero code or cannot be launched."""

    def __init__(self, command: str, returncode: int | None = None, reason: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.reason = reason
        super().__init__(f"Command failed: {command}")


@dataclass(frozen=True)
class CommandOutcome:
    """Result of a single command execution.

    ``returncode`` is ``None`` when the process could not be started; ``error``
    then carries the launch error text.
    """

    returncode: int | None
    error: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Runs external commands one at a time through the shell."""

    def __init__(self, presenter: Presenter | None = None) -> None:
        self.presenter = presenter if presenter is not None else Presenter()

    async def run(self, command: str, label: str, cwd: str | Path | None = None) -> None:
        """Run *command* while showing a spinner labelled *label*.

        Raises:
            CommandError: If the command exits nonzero or fails to launch.
        """
        handle = self.presenter.start_progress(label)
        try:
            outcome = await self.execute(command, cwd=cwd)
        except BaseException:
            handle.stop(success=False)
            raise

        handle.stop(success=outcome.success)
        if not outcome.success:
            raise CommandError(command, outcome.returncode, outcome.error)

    async def execute(self, command: str, cwd: str | Path | None = None) -> CommandOutcome:
        """Run *command* to completion without any console feedback."""
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
                cwd=str(cwd) if cwd else None,
            )
        except OSError as exc:
            return CommandOutcome(returncode=None, error=str(exc))

        try:
            returncode = await process.wait()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise
        return CommandOutcome(returncode=returncode)

    async def run_foreground(self, command: str, cwd: str | Path | None = None) -> int:
        """Run a long-lived *command* attached to the terminal.

        The child inherits stdin/stdout/stderr.  Returns its exit code.
        """
        process = await asyncio.create_subprocess_shell(
            command,
            cwd=str(cwd) if cwd else None,
        )
        return await process.wait()
