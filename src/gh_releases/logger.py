"""Logging utilities for gh-releases.

Usage:
    Basic usage in any module:
        >>> from gh_releases.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("GET %s", url)  # Use %-style formatting

    Applications that want console output opt in explicitly:
        >>> from gh_releases.logger import setup_logging
        >>> setup_logging("DEBUG")

Important:
    - Always use %-style formatting (lazy evaluation)
    - Only the root 'gh_releases' logger ever gets handlers
    - As a library the package installs a NullHandler and nothing else
"""

import logging
import sys

ROOT_LOGGER_NAME = "gh_releases"

LOG_CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_CONSOLE_DATE_FORMAT = "%H:%M:%S"

LOG_COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for different log levels.

    Colors are applied to the level name during format() and then
    reverted, so other handlers see the original record.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors for console output."""
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]

            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """Get a logger within the gh_releases hierarchy.

    Args:
        name: Logger name, typically __name__

    Returns:
        Logger that propagates to the root 'gh_releases' logger

    """
    if name != ROOT_LOGGER_NAME and not name.startswith(
        f"{ROOT_LOGGER_NAME}."
    ):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a colored console handler to the root package logger.

    Calling this more than once replaces the level of the existing
    console handler instead of adding another one.

    Args:
        level: Log level name ("DEBUG", "INFO", "WARNING", ...)

    Returns:
        The configured root package logger

    Raises:
        ValueError: If level is not a known log level name

    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if isinstance(handler.formatter, ColoredConsoleFormatter):
            handler.setLevel(numeric_level)
            return root

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        ColoredConsoleFormatter(LOG_CONSOLE_FORMAT, LOG_CONSOLE_DATE_FORMAT)
    )
    console_handler.setLevel(numeric_level)
    root.addHandler(console_handler)
    return root
