"""
Logging for exerec.

Example:
    from exerec.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Recording ls -a")
    logger.warning("Stored command differs from request")
    logger.error("Failed to write recording", exc_info=True)
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for exerec
EXEREC_THEME = Theme({
    "log.time": "dim cyan",
    "log.level.debug": "dim blue",
    "log.level.info": "green",
    "log.level.warning": "yellow",
    "log.level.error": "bold red",
    "log.level.critical": "bold white on red",
    "exerec.success": "bold green",
    "exerec.error": "bold red",
})

# Global console instance
console = Console(theme=EXEREC_THEME, stderr=True)

# Flag to track if logging has been initialized
_initialized = False


def setup_logging(
    level: str = "WARNING",
    show_time: bool = True,
    show_path: bool = False,
    rich_tracebacks: bool = True,
    force: bool = False,
) -> None:
    """
    init exerec's logging

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        show_time: Show timestamps in log output
        show_path: Show file path in log output
        rich_tracebacks: Use rich formatting for tracebacks
        force: Reconfigure even if logging was already initialized

    Note:
        Call once from the application entry point. force=True replaces
        a configuration made by an earlier call.
    """
    global _initialized

    if _initialized and not force:
        return

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=rich_tracebacks,
        markup=False,
    )
    handler.setFormatter(
        logging.Formatter(
            "%(message)s",
            datefmt="[%X]",
        )
    )

    logging.basicConfig(
        level=numeric_level,
        handlers=[handler],
        force=True,
    )

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    Note:
        Handlers are left to the application: importing exerec never touches
        the root logger. The CLI calls setup_logging() itself.
    """
    return logging.getLogger(name)


class ExeLogger:
    """
    exerec-specific logger

    Console helpers used by the CLI for status lines.
    """

    def __init__(self, name: str):
        self.name = name
        self.console = console

    def success(self, message: str) -> None:
        """
        Print a success message with special formatting.

        Args:
            message: Success message to display
        """
        from rich.markup import escape

        self.console.print(f"[exerec.success]✓[/exerec.success] {escape(message)}")

    def failure(self, message: str, details: Optional[str] = None) -> None:
        """
        Print a failure message with special formatting.

        Args:
            message: Failure message to display
            details: Optional details, shown dimmed
        """
        from rich.markup import escape

        msg = f"[exerec.error]E[/exerec.error] {escape(message)}"
        if details:
            msg += f" [dim]({escape(details)})[/dim]"
        self.console.print(msg)


def get_exe_logger(name: str) -> ExeLogger:
    """
    Get an ExeLogger instance for the given module.

    Example:
        logger = get_exe_logger(__name__)
        logger.success("Recorded ls -a")
    """
    return ExeLogger(name)
