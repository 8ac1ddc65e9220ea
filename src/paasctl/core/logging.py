"""Logging setup for paasctl.

Log records go to stderr so they never mix with command output. Messages
carry their context as a trailing ``[key=value ...]`` block.
"""

import logging
import sys
from enum import Enum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

QUIET_LOGGERS = ("httpx", "httpcore")


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def level_for(verbose: int, quiet: bool, default: LogLevel = LogLevel.WARNING) -> LogLevel:
    """Map the -v count and -q flag to a log level.

    -vv and above is DEBUG, -v is INFO, -q is ERROR. Verbosity wins over quiet.
    """
    if verbose >= 2:
        return LogLevel.DEBUG
    if verbose == 1:
        return LogLevel.INFO
    if quiet:
        return LogLevel.ERROR
    return default


def setup_logging(level: LogLevel = LogLevel.WARNING, rich_output: bool = True) -> None:
    """Route paasctl logs to stderr at the given level.

    Replaces any handlers installed by an earlier call, so repeated CLI
    invocations in one process do not duplicate output.
    """
    if rich_output:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
    root.addHandler(handler)

    numeric = getattr(logging, level.value.upper())
    root.setLevel(numeric)
    logging.getLogger("paasctl").setLevel(numeric)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))


def get_logger(name: str) -> "StructuredLogger":
    """Get a context-carrying logger under the paasctl namespace."""
    return StructuredLogger(name)


class StructuredLogger:
    """Thin wrapper that appends bound and per-call context to messages."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        if not name.startswith("paasctl"):
            name = f"paasctl.{name}"
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    def bind(self, **kwargs: Any) -> "StructuredLogger":
        """Return a logger that adds ``kwargs`` to every message."""
        return StructuredLogger(self._logger.name, {**self._context, **kwargs})

    def _render(self, message: str, extra: dict[str, Any]) -> str:
        context = {**self._context, **extra}
        if not context:
            return message
        return f"{message} [{' '.join(f'{k}={v}' for k, v in context.items())}]"

    def debug(self, message: str, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(self._render(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(logging.INFO):
            self._logger.info(self._render(message, kwargs))
