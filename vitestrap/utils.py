"""Shared console and file-system helpers for vitestrap.

Every status line the tool prints goes through the module-level Rich
``console`` so colours are consistent and tests can swap in a console bound to
a ``StringIO``.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def _target(out: Console | None) -> Console:
    return out if out is not None else console


def print_step(message: str, out: Console | None = None) -> None:
    """Print a yellow headline (e.g. the start banner)."""
    _target(out).print(f"[yellow]{escape(message)}[/yellow]", highlight=False)


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    _target(out).print(f"[green]{escape(message)}[/green]", highlight=False)


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    _target(out).print(f"[red]{escape(message)}[/red]", highlight=False)


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    _target(out).print(f"[yellow]{escape(message)}[/yellow]", highlight=False)


def print_info(message: str, out: Console | None = None) -> None:
    """Print a blue informational message."""
    _target(out).print(f"[blue]{escape(message)}[/blue]", highlight=False)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories.

    Existing files are overwritten.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path
