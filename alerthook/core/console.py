"""Diagnostic console for notification scripts."""

from typing import Any

from rich.console import Console

from alerthook.core.logging import get_logger

logger = get_logger(__name__)


def join_args(args: tuple[Any, ...]) -> str:
    """Join console arguments with single spaces."""
    return " ".join(str(a) for a in args)


class ScriptConsole:
    """Console with log/warn/error/debug, writing diagnostics to stderr.

    Lines are written verbatim: no markup, emoji codes or highlighting.
    Every line is also mirrored to the structured logger.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True, highlight=False, emoji=False)

    def _emit(self, line: str) -> None:
        self.console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def log(self, *args: Any) -> None:
        line = join_args(args)
        self._emit(line)
        logger.info("console_log", message=line)

    def warn(self, *args: Any) -> None:
        line = join_args(args)
        self._emit(line)
        logger.warning("console_warn", message=line)

    def error(self, *args: Any) -> None:
        line = join_args(args)
        self._emit(line)
        logger.error("console_error", message=line)

    def debug(self, *args: Any) -> None:
        logger.debug("console_debug", message=join_args(args))
