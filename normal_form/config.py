# normal_form/config.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Conversion settings with a process-wide default

"""Settings for normal-form conversion.

A process-wide default is kept in this module and used by every conversion
that does not receive an explicit configuration. The default places no
ceiling on clause growth and simplifies expressions before normalizing.

Example:
    >>> from normal_form.config import configure_normalization
    >>> configure_normalization(max_clauses=10_000)
    >>> # Conversions producing more clauses now raise ExpressionTooComplexError
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class NormalizationConfig:
    """Immutable settings for one or more conversions.

    Attributes:
        max_clauses: Largest clause set a conversion step may produce,
            or None for no ceiling
        simplify: Remove double negations and repeated operands before
            normalizing
    """

    max_clauses: Optional[int] = None
    simplify: bool = True

    def __post_init__(self):
        if self.max_clauses is not None:
            if isinstance(self.max_clauses, bool) or not isinstance(self.max_clauses, int):
                raise ValueError(f"max_clauses must be an integer, got {self.max_clauses!r}")
            if self.max_clauses < 1:
                raise ValueError(f"max_clauses must be positive, got {self.max_clauses}")

    def exceeds(self, clause_count: int) -> bool:
        """Return True if the clause count is above the configured ceiling."""
        return self.max_clauses is not None and clause_count > self.max_clauses


# Global configuration instance
_global_config = NormalizationConfig()


def get_config() -> NormalizationConfig:
    """Return the process-wide default configuration."""
    return _global_config


def set_config(config: NormalizationConfig) -> None:
    """Replace the process-wide default configuration.

    Args:
        config: New default configuration
    """
    global _global_config
    if not isinstance(config, NormalizationConfig):
        raise ValueError(f"Expected NormalizationConfig, got {type(config).__name__}")
    _global_config = config


def configure_normalization(**changes) -> NormalizationConfig:
    """Update selected fields of the process-wide default configuration.

    Args:
        **changes: Field values to replace (max_clauses, simplify)

    Returns:
        The new default configuration

    Raises:
        ValueError: If a field name or value is invalid
    """
    unknown = set(changes) - {"max_clauses", "simplify"}
    if unknown:
        raise ValueError(f"Unknown configuration fields: {sorted(unknown)}")
    set_config(replace(_global_config, **changes))
    return _global_config


def resolve_config(config: Optional[NormalizationConfig]) -> NormalizationConfig:
    """Return the given configuration, or the process-wide default if None."""
    return config if config is not None else _global_config
