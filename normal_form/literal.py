# normal_form/literal.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Literal classes used at the leaves of normal forms

"""Positive and negative literals.

Inside a normal form every negation has already been pushed down to the
variables, so a leaf is either a bare variable (``Pos``) or its negation
(``Neg``). Literals are frozen and hashable; two literals are equal when they
have the same polarity and equal variables.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable

from predicates.ast_nodes import Expr, Not, Var

Clause = FrozenSet["Literal"]


@dataclass(frozen=True, slots=True)
class Literal:
    """Base class for literals.

    Attributes:
        variable: The variable this literal refers to
    """

    variable: Any

    def eval(self, context: Any) -> bool:
        raise NotImplementedError

    def negate(self) -> Literal:
        """Return the literal of opposite polarity over the same variable."""
        raise NotImplementedError

    def to_expr(self) -> Expr:
        """Return the expression tree equivalent to this literal."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Pos(Literal):
    """A variable in positive polarity; true iff the variable is true."""

    def eval(self, context: Any) -> bool:
        return bool(self.variable.eval(context))

    def negate(self) -> Neg:
        return Neg(self.variable)

    def to_expr(self) -> Expr:
        return Var(self.variable)

    def __str__(self) -> str:
        return str(self.variable)


@dataclass(frozen=True, slots=True)
class Neg(Literal):
    """A negated variable; true iff the variable is false."""

    def eval(self, context: Any) -> bool:
        return not self.variable.eval(context)

    def negate(self) -> Pos:
        return Pos(self.variable)

    def to_expr(self) -> Expr:
        return Not(Var(self.variable))

    def __str__(self) -> str:
        return f"!{self.variable}"


def clause_str(clause: Iterable[Literal], connective: str, ordered: bool = False) -> str:
    """Render a clause, sorting its literals unless the clause is ordered."""
    parts = [str(lit) for lit in clause]
    if not ordered:
        parts.sort()
    if len(parts) == 1:
        return parts[0]
    return "(" + f" {connective} ".join(parts) + ")"
