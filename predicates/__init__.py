# predicates/__init__.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Expression tree public API

"""Boolean predicate expressions over user-supplied variable types.

Expressions are built programmatically from ``Var`` leaves and the ``Not``,
``And`` and ``Or`` connectives, then evaluated against contextual data
supplied by the caller. Each variable type decides on its own how to turn a
context into a truth value by implementing the ``Eval`` capability.

Core Components:
    Eval: Protocol implemented by variable types
    Expr: Base class of all expression nodes
    Var, Not, And, Or: Expression node types
    PredicateError: Base class of library errors

Example:
    >>> from predicates import Var, And, Not
    >>> expr = And(Var(Item(4)), Not(Var(Item(5))))
    >>> expr.eval({1, 2, 4, 7, 9, 10})
    >>> # Returns True: 4 is present and 5 is absent
"""

from .eval import Eval, evaluate
from .ast_nodes import Expr, Var, Not, And, Or, Visitor, flatten
from .exceptions import PredicateError, NormalizationError, ExpressionTooComplexError

__all__ = [
    "Eval",
    "evaluate",
    "Expr",
    "Var",
    "Not",
    "And",
    "Or",
    "Visitor",
    "flatten",
    "PredicateError",
    "NormalizationError",
    "ExpressionTooComplexError",
]

__version__ = "1.0.0"
__description__ = "Boolean predicate expressions and their evaluation"
