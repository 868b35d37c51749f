# utils/__init__.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Utility module exports

from .logger import (
    LogLevel,
    WffLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "WffLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
