# normal_form/ordered.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Tuple-backed normal forms that keep operand order and duplicates

"""Normal forms stored as tuples instead of sets.

``CnfList`` and ``DnfList`` hold their clauses as a tuple of tuples of
literals. Conversion runs the same simplification, negation and distribution
phases as ``Cnf`` and ``Dnf``, but clauses and literals stay in operand order
and duplicates are kept. Variables are only compared with ``==``, never
hashed, so variable types that cannot be hashed (mutable dataclasses, lists)
can still be normalized.

Example:
    >>> cnf = CnfList.from_expr(And(Or(Var(a), Var(b)), Var(c)))
    >>> cnf.clauses
    >>> # ((Pos(a), Pos(b)), (Pos(c),))
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, List, Tuple

from predicates import ast_nodes as ast
from .base import NormalForm, _check_literals
from .literal import Literal, clause_str
from .transformer import OrderedNormalFormTransformer

OrderedClause = Tuple[Literal, ...]


@dataclass(frozen=True)
class OrderedNormalForm(NormalForm):
    """A tuple of clauses under an aggregate connective.

    Equality compares clauses and literals position by position. Two ordered
    forms can therefore differ while being logically equivalent.

    Attributes:
        clauses: The clauses of the form, in conversion order
    """

    transformer_class: ClassVar[type] = OrderedNormalFormTransformer

    clauses: Tuple[OrderedClause, ...] = ()

    def __post_init__(self):
        clauses = tuple(tuple(clause) for clause in self.clauses)
        _check_literals(clauses)
        object.__setattr__(self, "clauses", clauses)

    def variables(self) -> List[Any]:
        """Return the distinct variables in order of first occurrence."""
        found: List[Any] = []
        for clause in self.clauses:
            for literal in clause:
                if not any(literal.variable == seen for seen in found):
                    found.append(literal.variable)
        return found

    def clause_lists(self) -> List[List[Literal]]:
        """Return the clauses as lists of literals in stored order."""
        return [list(clause) for clause in self.clauses]

    def __contains__(self, clause) -> bool:
        return tuple(clause) in self.clauses

    def __str__(self) -> str:
        inner = "|" if self.aggregate is ast.And else "&"
        outer = " & " if self.aggregate is ast.And else " | "
        parts = [clause_str(clause, inner, ordered=True) for clause in self.clauses]
        return f"{self.form_name}[{outer.join(parts)}]"


class CnfList(OrderedNormalForm):
    """Conjunctive Normal Form over a tuple of clauses.

    True iff every clause contains at least one true literal; the empty form
    is true.
    """

    aggregate = ast.And
    form_name = "CNF"

    def eval(self, context: Any) -> bool:
        return all(
            any(literal.eval(context) for literal in clause)
            for clause in self.clauses
        )


class DnfList(OrderedNormalForm):
    """Disjunctive Normal Form over a tuple of clauses.

    True iff some clause has all of its literals true; the empty form is
    false.
    """

    aggregate = ast.Or
    form_name = "DNF"

    def eval(self, context: Any) -> bool:
        return any(
            all(literal.eval(context) for literal in clause)
            for clause in self.clauses
        )
