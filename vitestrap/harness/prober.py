"""Checks whether an external tool can be invoked."""

from __future__ import annotations

import asyncio


class ToolProber:
    """Answers "is this CLI tool installed?" by running its version query.

    A tool counts as present only when ``<tool> --version`` exits with code 0
    through the shell.  A tool that is installed but whose version query
    fails is reported as absent.
    """

    def __init__(self, version_flag: str = "--version") -> None:
        self.version_flag = version_flag

    async def exists(self, tool: str) -> bool:
        """Return ``True`` if *tool* runs successfully.  Never raises."""
        try:
            process = await asyncio.create_subprocess_shell(
                f"{tool} {self.version_flag}",
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            await process.communicate()
        except OSError:
            return False
        return process.returncode == 0
