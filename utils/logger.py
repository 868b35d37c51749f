# utils/logger.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Logging utility for formula parsing and rewriting with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for wff processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class WffLogger:
    """Centralized logger for wff parsing and rewriting with structured output."""

    def __init__(self, name: str = "wffkit", level: LogLevel = LogLevel.INFO):
        """Initialize the wff logger.

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
        console_handler.setFormatter(WffFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

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

    # Specialized methods for formula events
    def formula_created(self, source: str, rendered: str, var_count: int):
        """Log successful formula construction."""
        self.debug(f"Formula '{source}' -> '{rendered}' ({var_count} distinct variables)")

    def pattern_compiled(self, source: str, variables: str):
        """Log pattern compilation."""
        self.debug(f"Compiled pattern '{source}' with variables [{variables}]")

    def match_summary(self, formula: str, pattern: str, group_count: int):
        """Log the outcome of a pattern search."""
        self.debug(f"Searching '{formula}' for '{pattern}': {group_count} occurrence(s)")

    def substitution_applied(self, before: str, after: str, index: int):
        """Log a completed substitution."""
        self.info(f"Substituted occurrence {index}: {before} → {after}")

    def substitution_rejected(self, formula: str, reason: str):
        """Log a substitution that left the formula unchanged."""
        self.debug(f"Substitution in '{formula}' rejected: {reason}")


class WffFormatter(logging.Formatter):
    """Custom formatter for wff logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[WffLogger] = None


def get_logger(name: str = "wffkit") -> WffLogger:
    """Get or create the global wff logger instance.

    Args:
        name: Logger name (default: "wffkit")

    Returns:
        WffLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = WffLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


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
