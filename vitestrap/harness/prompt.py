"""Single-question interactive prompt.

The answer is read on a daemon thread that hands its result back to the event
loop through a future.  Cancelling the await (Ctrl-C under ``asyncio.run``)
therefore ends the program at once instead of waiting for the user to press
Enter: nothing joins the reader thread on shutdown.
"""

from __future__ import annotations

import asyncio
import os
import sys
import threading
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from vitestrap.utils import console as default_console


class LinePrompt(Prompt):
    """``Prompt`` that prints the question verbatim, without a ``": "`` suffix."""

    prompt_suffix = ""


class DescriptorReader:
    """Line reader working directly on a file descriptor.

    Reads one byte at a time, so input after the newline stays unread for the
    next prompt or for a child process inheriting the descriptor.  No Python
    level lock is held while blocked.
    """

    def __init__(self, fd: int, encoding: str = "utf-8") -> None:
        self.fd = fd
        self.encoding = encoding

    def readline(self) -> str:
        data = bytearray()
        while True:
            byte = os.read(self.fd, 1)
            if not byte:
                break
            data += byte
            if byte == b"\n":
                break
        return data.decode(self.encoding, errors="replace")


def _stdin_stream() -> TextIO | DescriptorReader:
    try:
        fd = sys.stdin.fileno()
    except (AttributeError, OSError, ValueError):
        # Replaced stdin without a descriptor (e.g. StringIO).
        return sys.stdin
    return DescriptorReader(fd, getattr(sys.stdin, "encoding", None) or "utf-8")


def _resolve(future: asyncio.Future[str], answer: str | None, error: BaseException | None) -> None:
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(answer)


def _read_answer(
    loop: asyncio.AbstractEventLoop,
    future: asyncio.Future[str],
    prompt: str,
    console: Console,
    stream: TextIO | DescriptorReader,
) -> None:
    answer: str | None = None
    error: Exception | None = None
    try:
        answer = LinePrompt.ask(prompt, console=console, stream=stream)
    except EOFError:
        answer = ""
    except Exception as exc:
        error = exc
    try:
        loop.call_soon_threadsafe(_resolve, future, answer, error)
    except RuntimeError:
        # Loop already closed; nobody is waiting for the answer.
        return


async def ask(
    question: str,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> str:
    """Print *question* in cyan and return one line of input, stripped.

    End of input yields an empty string.

    Args:
        question: Text written before reading.
        console: Console to write to (defaults to the shared console).
        stream: Input stream (defaults to stdin).
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()
    reader = threading.Thread(
        target=_read_answer,
        args=(
            loop,
            future,
            f"[cyan]{escape(question)}[/cyan]",
            console if console is not None else default_console,
            stream if stream is not None else _stdin_stream(),
        ),
        name="vitestrap-prompt",
        daemon=True,
    )
    reader.start()
    return await future
