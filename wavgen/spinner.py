from __future__ import annotations

import sys
from pathlib import Path
from typing import IO

from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.text import Text
from rich.traceback import Traceback

from .logging_utils import debug_enabled


class Spinner:
    """Rich status spinner; a no-op when the stream is not a terminal."""

    def __init__(
        self,
        message: str,
        *,
        stream: IO[str] | None = None,
        enabled: bool | None = None,
    ) -> None:
        self._message = message
        self._stream = stream or sys.stderr
        self._enabled = self._stream.isatty() if enabled is None else enabled
        self._console = Console(file=self._stream) if self._enabled else None
        self._status: Status | None = None

    def start(self) -> None:
        if self._console is None or self._status is not None:
            return
        self._status = self._console.status(self._message)
        self._status.start()

    def update(self, message: str) -> None:
        self._message = message
        if self._status is not None:
            self._status.update(message)

    def stop(self) -> None:
        if self._status is None:
            return
        self._status.stop()
        self._status = None

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.stop()


def render_error(
    context: str,
    exc: BaseException,
    *,
    log_path: Path | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Show a failure: a red panel on a terminal, a single line elsewhere."""
    console = Console(file=stream or sys.stderr, soft_wrap=True, highlight=False)
    summary = f"{context} failed: {type(exc).__name__}: {exc}"
    logs = f"logs: {log_path}" if log_path is not None else None
    if console.is_terminal:
        console.print(
            Panel(Text(summary, style="bold red"), title="wavgen", subtitle=logs, border_style="red")
        )
    else:
        console.print(summary if logs is None else f"{summary} ({logs})", markup=False)
    if debug_enabled():
        console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))
