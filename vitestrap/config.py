"""vitestrap configuration.

Typed settings for the setup workflow. All settings use Pydantic v2 models so
they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

SPINNER_FRAMES: tuple[str, ...] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")


class CommandConfig(BaseModel):
    """External commands run by the workflow.

    ``scaffold`` is a template; ``{folder}`` is replaced with the folder name
    the user typed.
    """

    runtime: str = Field(default="node", description="JavaScript runtime that must be installed")
    package_manager: str = Field(default="npm", description="Package manager that must be installed")
    scaffold: str = Field(default="npm create vite@latest {folder} -- --template react -y")
    install: str = Field(default="npm install tailwindcss @tailwindcss/vite")
    dev: str = Field(default="npm run dev")

    @field_validator("scaffold")
    @classmethod
    def _needs_folder_placeholder(cls, value: str) -> str:
        if "{folder}" not in value:
            raise ValueError("scaffold command must contain a '{folder}' placeholder")
        return value


class EditorConfig(BaseModel):
    """Editor opened (best-effort) once the project is ready."""

    binary: str = Field(default="code")
    entry_file: str = Field(default="src/App.jsx", description="File to focus after opening")


class SpinnerConfig(BaseModel):
    """Progress indicator appearance."""

    frames: tuple[str, ...] = Field(default=SPINNER_FRAMES, min_length=1)
    interval: float = Field(default=0.1, gt=0, description="Seconds between frames")


class Config(BaseModel):
    """Global vitestrap configuration.

    Created once by the CLI entry point and passed to ``Pipeline``.
    """

    base_dir: Path = Field(default=Path("."))
    commands: CommandConfig = Field(default_factory=CommandConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    spinner: SpinnerConfig = Field(default_factory=SpinnerConfig)

    def scaffold_command(self, folder: str) -> str:
        """Return the project-creation command for *folder*."""
        return self.commands.scaffold.replace("{folder}", folder)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            VITESTRAP_BASE_DIR, VITESTRAP_SCAFFOLD_COMMAND,
            VITESTRAP_INSTALL_COMMAND, VITESTRAP_DEV_COMMAND,
            VITESTRAP_EDITOR, VITESTRAP_SPINNER_INTERVAL.
        """
        command_kwargs: dict[str, Any] = {}
        if os.environ.get("VITESTRAP_SCAFFOLD_COMMAND"):
            command_kwargs["scaffold"] = os.environ["VITESTRAP_SCAFFOLD_COMMAND"]
        if os.environ.get("VITESTRAP_INSTALL_COMMAND"):
            command_kwargs["install"] = os.environ["VITESTRAP_INSTALL_COMMAND"]
        if os.environ.get("VITESTRAP_DEV_COMMAND"):
            command_kwargs["dev"] = os.environ["VITESTRAP_DEV_COMMAND"]

        editor_kwargs: dict[str, Any] = {}
        if os.environ.get("VITESTRAP_EDITOR"):
            editor_kwargs["binary"] = os.environ["VITESTRAP_EDITOR"]

        spinner_kwargs: dict[str, Any] = {}
        if os.environ.get("VITESTRAP_SPINNER_INTERVAL"):
            spinner_kwargs["interval"] = os.environ["VITESTRAP_SPINNER_INTERVAL"]

        return cls(
            base_dir=Path(os.environ.get("VITESTRAP_BASE_DIR", ".")),
            commands=CommandConfig(**command_kwargs),
            editor=EditorConfig(**editor_kwargs),
            spinner=SpinnerConfig(**spinner_kwargs),
        )
