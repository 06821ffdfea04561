# utils/__init__.py
# This file is part of Nega - Propositional Negation Normal Form
#
# Utility module exports

from .logger import (
    LogLevel,
    NegaLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "NegaLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
