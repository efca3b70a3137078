"""Terminal progress indicator bound to a single in-flight operation.

``Presenter.start_progress`` opens a transient Rich ``Live`` display that
redraws ``<label> <glyph>`` on one console line every ``interval`` seconds.
The returned ``ProgressHandle`` is the only way to stop it: ``stop`` closes
the live display, which erases the spinner line, and prints one final status
line.

Only one handle may be active per presenter, since two animations on one
terminal line would overwrite each other.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from vitestrap.config import SPINNER_FRAMES
from vitestrap.utils import console as default_console

DONE_MARKER = "[green]✔ Done![/green]"
FAILED_MARKER = "[red]✖ Failed![/red]"


class PresenterBusyError(RuntimeError):
    """Raised when a progress indicator is started while another is running."""

    def __init__(self, active_label: str, requested_label: str) -> None:
        self.active_label = active_label
        self.requested_label = requested_label
        super().__init__(
            f"Cannot start '{requested_label}': '{active_label}' is still in progress"
        )


@dataclass
class SpinnerState:
    """Cycle position into the frame sequence plus a liveness flag."""

    frames: tuple[str, ...]
    index: int = 0
    alive: bool = True

    def advance(self) -> str:
        """Return the current glyph and move to the next one."""
        glyph = self.frames[self.index]
        self.index = (self.index + 1) % len(self.frames)
        return glyph


class SpinnerLine:
    """Renderable producing ``<label> <glyph>``; each render advances the state."""

    def __init__(self, label: str, state: SpinnerState) -> None:
        self.label = label
        self.state = state

    def __rich__(self) -> Text:
        return Text(f"{self.label} {self.state.advance()}", style="yellow")


class ProgressHandle:
    """Handle for one running progress indicator."""

    def __init__(
        self,
        presenter: Presenter,
        label: str,
        state: SpinnerState,
        live: Live,
    ) -> None:
        self.label = label
        self.state = state
        self.live = live
        self._presenter = presenter

    @property
    def active(self) -> bool:
        return self.state.alive

    def stop(self, success: bool = True) -> None:
        """Stop the animation and print the final status line.

        Later calls are ignored.
        """
        if not self.state.alive:
            return
        self.state.alive = False
        self.live.stop()
        self._presenter._release(self)

        marker = DONE_MARKER if success else FAILED_MARKER
        self._presenter.console.print(f"{escape(self.label)} {marker}", highlight=False)


class Presenter:
    """Renders coloured status lines and the animated spinner."""

    def __init__(
        self,
        console: Console | None = None,
        frames: tuple[str, ...] = SPINNER_FRAMES,
        interval: float = 0.1,
    ) -> None:
        if not frames:
            raise ValueError("at least one spinner frame is required")
        self.console = console if console is not None else default_console
        self.frames = tuple(frames)
        self.interval = interval
        self._active: ProgressHandle | None = None

    @property
    def active(self) -> ProgressHandle | None:
        """The handle currently rendering, if any."""
        return self._active

    def start_progress(self, label: str) -> ProgressHandle:
        """Start the spinner for *label*.

        Raises:
            PresenterBusyError: If another progress indicator is still active.
        """
        if self._active is not None:
            raise PresenterBusyError(self._active.label, label)

        state = SpinnerState(frames=self.frames)
        live = Live(
            SpinnerLine(label, state),
            console=self.console,
            refresh_per_second=1 / self.interval,
            transient=True,
        )
        live.start()
        handle = ProgressHandle(self, label, state, live)
        self._active = handle
        return handle

    def _release(self, handle: ProgressHandle) -> None:
        if self._active is handle:
            self._active = None
