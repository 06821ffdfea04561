# utils/logger.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Logging utility for formula parsing and NNF rewriting with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class NegaLogger:
    """Centralized logger for the parsing and rewriting pipeline."""

    def __init__(self, name: str = "nega", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(NegaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        """Whether debug messages are currently emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for rewriting events
    def rewrite_applied(self, rule: str, before, after):
        """Log a single rewrite step.

        Rendering trees is linear in their size, so nothing is formatted
        unless debug output is enabled.
        """
        if self.is_debug():
            self.debug(f"    🔁 {rule}: {before} → {after}")

    def conversion_result(self, source: str, result: str):
        """Log the outcome of a full conversion."""
        self.info(f"{source} → {result}")


class NegaFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        # Default formatting for other levels
        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[NegaLogger] = None


def get_logger(name: str = "nega") -> NegaLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "nega")

    Returns:
        NegaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = NegaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
