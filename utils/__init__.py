# utils/__init__.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Utility module exports

from .logger import (
    LogLevel,
    PredicatesLogger,
    PredicatesFormatter,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "PredicatesLogger",
    "PredicatesFormatter",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
