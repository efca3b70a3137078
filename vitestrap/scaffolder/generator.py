"""Writes the Tailwind-ready files into a freshly created Vite project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console

from vitestrap.utils import print_success

from .templates import TemplateRenderer


@dataclass(frozen=True)
class TemplateFile:
    """One template and where its rendering lands in the project."""

    template: str
    output: str
    message: str


TEMPLATE_FILES: tuple[TemplateFile, ...] = (
    TemplateFile("vite.config.js.j2", "vite.config.js", "Configured vite.config.js"),
    TemplateFile("src/index.css.j2", "src/index.css", "Added Tailwind import"),
    TemplateFile("src/App.jsx.j2", "src/App.jsx", "Updated App.jsx"),
)


class ProjectFiles:
    """Renders ``TEMPLATE_FILES`` into a project directory."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        files: tuple[TemplateFile, ...] = TEMPLATE_FILES,
        console: Console | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.files = files
        self.console = console

    async def write_all(self, project_dir: str | Path, context: dict[str, Any]) -> list[Path]:
        """Render every template into *project_dir*, overwriting what is there.

        Prints one success line per file and returns the written paths.
        """
        root = Path(project_dir)
        written: list[Path] = []
        for entry in self.files:
            path = await self.renderer.render_to_file(entry.template, root / entry.output, context)
            print_success(f"✅ {entry.message}", self.console)
            written.append(path)
        return written
