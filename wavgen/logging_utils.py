"""Logging for wavgen: a rich console stream plus a debug log file.

Failures are logged once, with traceback, through the `wavgen` logger. The
console hides those traceback records unless WAVGEN_DEBUG is set, because the
CLI shows the error itself.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_LOGGER = logging.getLogger("wavgen.logging")
_FAILURES = logging.getLogger("wavgen.failures")

LOG_DIR_ENV = "WAVGEN_LOG_DIR"
DEBUG_ENV = "WAVGEN_DEBUG"
LOG_FILE = "wavgen.log"
_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"

_handlers: list[logging.Handler] = []
_log_file: Path | None = None
_configured = False


def debug_enabled() -> bool:
    return bool(os.environ.get(DEBUG_ENV))


def get_log_dir() -> Path:
    configured = os.environ.get(LOG_DIR_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".cache" / "wavgen" / "logs"


def get_log_path() -> Path:
    return get_log_dir() / LOG_FILE


class _HideTracebacks(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.exc_info is None or debug_enabled()


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.addHandler(handler)
    _handlers.append(handler)


def configure_logging(*, force: bool = False) -> Path | None:
    """Install wavgen's handlers once and return the log file in use, if any.

    `force` replaces the handlers installed earlier, picking up a changed
    WAVGEN_LOG_DIR or WAVGEN_DEBUG.
    """
    global _configured, _log_file
    if _configured and not force:
        return _log_file

    logger = logging.getLogger("wavgen")
    while _handlers:
        handler = _handlers.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)

    # Leave console output to the host application when it configured logging.
    if not logging.getLogger().handlers:
        console = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        console.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)
        console.addFilter(_HideTracebacks())
        _attach(logger, console)

    _log_file = None
    path = get_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        _LOGGER.warning("File logging disabled: %s", exc)
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        _attach(logger, file_handler)
        _log_file = path

    _configured = True
    return _log_file


def log_exception(context: str, exc: BaseException) -> Path | None:
    """Log `exc` with its traceback; returns the log file that received it."""
    _FAILURES.error("%s failed: %s", context, exc, exc_info=exc)
    return _log_file
