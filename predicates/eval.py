# predicates/eval.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Evaluation capability implemented by user-supplied variable types

"""Evaluation capability for boolean variables.

Any object with an ``eval(context)`` method returning a truth value can be used
as a variable inside an expression tree. The context type is chosen by the
implementer: a set of enabled feature flags, a dictionary of facts, a database
row, and so on.

Variables must compare and hash by value and must be immutable, since normal
forms store them inside sets and share them between clauses. Evaluation must
be referentially transparent: the same variable evaluated against the same
context must always produce the same result, otherwise a normal form is no
longer guaranteed to agree with the expression it was built from.

Example:
    >>> from dataclasses import dataclass
    >>> @dataclass(frozen=True)
    ... class Flag:
    ...     name: str
    ...     def eval(self, context):
    ...         return self.name in context
    >>> evaluate(Flag("beta"), {"beta", "dark_mode"})
    True
"""

from __future__ import annotations
from typing import Protocol, TypeVar, runtime_checkable

C = TypeVar("C", contravariant=True)


@runtime_checkable
class Eval(Protocol[C]):
    """Interface for values that evaluate to a boolean in some context.

    The context type parameter plays the role of an associated type: a
    variable type fixes the kind of data it needs, and every expression built
    over that variable type is evaluated against the same kind of data.
    """

    def eval(self, context: C) -> bool: ...


def evaluate(variable: Eval[C], context: C) -> bool:
    """Evaluate a single variable against the given context.

    Args:
        variable: Value implementing the evaluation capability
        context: Contextual data required by the variable type

    Returns:
        Truth value of the variable in this context
    """
    return bool(variable.eval(context))
