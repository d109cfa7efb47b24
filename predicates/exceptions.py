# predicates/exceptions.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Custom exceptions for normal-form conversion

"""Domain-specific exceptions for boolean predicate processing.

Construction and evaluation of well-formed expressions never fail. The
exceptions below cover normal-form conversion: rebuilding expressions from
degenerate normal forms and aborting conversions that exceed a configured
clause ceiling.
"""

from typing import Optional


class PredicateError(RuntimeError):
    """Base class for all errors raised by the predicate library."""

    pass


class NormalizationError(PredicateError):
    """Exception raised when a normal form cannot be built or rebuilt.

    Indicates structurally degenerate input, such as an empty clause that
    has no expression form, or a node type the transformer does not know.
    """

    pass


class ExpressionTooComplexError(NormalizationError):
    """Exception raised when normal-form conversion exceeds the clause ceiling.

    Distribution of alternating connectives can grow the clause set
    multiplicatively with nesting depth. When a ceiling is configured the
    conversion stops at the first step that could exceed it.

    Attributes:
        limit: The configured maximum number of clauses
        clause_count: Number of clauses the offending step would produce
        form: Name of the normal form being built ("CNF" or "DNF")
    """

    def __init__(self, limit: int, clause_count: int, form: Optional[str] = None):
        self.limit = limit
        self.clause_count = clause_count
        self.form = form
        target = f"{form} " if form else ""
        super().__init__(
            f"Expression too complex to normalize: {target}conversion needs "
            f"{clause_count} clauses, limit is {limit}"
        )
