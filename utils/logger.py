# utils/logger.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Logging utility for normal-form conversion with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for predicate processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PredicatesLogger:
    """Centralized logger for predicate conversion with structured output."""

    def __init__(self, name: str = "simple_predicates", level: LogLevel = LogLevel.WARNING):
        """Initialize the predicates logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PredicatesFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> LogLevel:
        """Current logging level."""
        return LogLevel(self.logger.level)

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        """Return True when debug messages would be emitted."""
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

    # Specialized methods for normal-form conversion events
    def conversion_start(self, form: str, root_type: str, operands: int = 1):
        """Log the start of a normal-form conversion."""
        if operands == 1:
            self.debug(f"Starting {form} conversion of {root_type}")
        else:
            self.debug(f"Starting {form} conversion of {operands} sibling operands")

    def distribution_step(self, connective: str, left: int, right: int, result: int):
        """Log a cross-product distribution step."""
        self.debug(
            f"    🔀 Distributed {connective}: {left} x {right} clauses -> {result}"
        )

    def conversion_complete(self, form: str, clauses: int, literals: int):
        """Log a finished normal-form conversion."""
        self.debug(f"{form} conversion complete: {clauses} clauses, {literals} literals")

    def ceiling_exceeded(self, form: str, limit: int, clause_count: int):
        """Log an aborted conversion; the raised exception carries the error."""
        self.debug(
            f"💥 {form} conversion aborted: {clause_count} clauses exceed limit {limit}"
        )


class PredicatesFormatter(logging.Formatter):
    """Custom formatter for predicate logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PredicatesLogger] = None


def get_logger(name: str = "simple_predicates") -> PredicatesLogger:
    """Get or create the global predicates logger instance.

    Args:
        name: Logger name (default: "simple_predicates")

    Returns:
        PredicatesLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PredicatesLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging from boolean switches.

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
