"""Best-effort "open the project in VS Code".

``EditorLauncher.launch`` returns a detached task that is never awaited by the
workflow.  Whatever happens inside it (missing binary, spawn error) is
swallowed; opening the editor is a convenience, not a step that can fail the
setup.
"""

from __future__ import annotations

import asyncio
import os
import subprocess
from collections.abc import Mapping
from pathlib import Path


class EditorLauncher:
    """Builds and fires the editor command for a project directory."""

    def __init__(
        self,
        binary: str = "code",
        entry_file: str = "src/App.jsx",
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.binary = binary
        self.entry_file = entry_file
        self.env = env if env is not None else os.environ

    def in_integrated_terminal(self) -> bool:
        """``True`` when running inside VS Code's own terminal."""
        return "vscode" in self.env.get("TERM_PROGRAM", "").lower()

    def command_for(self, project_dir: str | Path) -> str:
        """Return the shell command that opens *project_dir*.

        Inside the integrated terminal the current window is reused and only
        the entry file is opened; otherwise the folder is opened first.
        """
        focus = f"{self.binary} -r {self.entry_file}"
        if self.in_integrated_terminal():
            return focus
        return f'{self.binary} "{project_dir}" && sleep 1 && {focus}'

    def launch(self, project_dir: str | Path) -> asyncio.Task[None]:
        """Start opening the editor and return without waiting for it."""
        task = asyncio.get_running_loop().create_task(
            asyncio.to_thread(_spawn, self.command_for(project_dir), Path(project_dir))
        )
        task.add_done_callback(_consume_result)
        return task


def _spawn(command: str, cwd: Path) -> None:
    # Own session: the editor outlives this process and is never reaped here.
    subprocess.Popen(
        command,
        shell=True,
        cwd=str(cwd),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def _consume_result(task: asyncio.Task[None]) -> None:
    # Retrieve the exception so asyncio does not report it as unhandled.
    if not task.cancelled():
        task.exception()
