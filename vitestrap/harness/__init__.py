"""vitestrap command harness.

The pieces the setup workflow is built from:

    Presenter     - spinner and status lines for one in-flight operation
    CommandRunner - runs a shell command, reporting pass/fail to the Presenter
    ToolProber    - checks whether a CLI tool is installed
    ask           - single-line interactive prompt
"""

from .presenter import Presenter, PresenterBusyError, ProgressHandle, SpinnerLine, SpinnerState
from .prober import ToolProber
from .prompt import ask
from .runner import CommandError, CommandOutcome, CommandRunner

__all__ = [
    # Presenter
    "Presenter",
    "PresenterBusyError",
    "ProgressHandle",
    "SpinnerLine",
    "SpinnerState",
    # Command runner
    "CommandRunner",
    "CommandOutcome",
    "CommandError",
    # Prober / prompt
    "ToolProber",
    "ask",
]
