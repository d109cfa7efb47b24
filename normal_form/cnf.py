# normal_form/cnf.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Conjunctive normal form

"""Boolean expressions in Conjunctive Normal Form.

A CNF is a conjunction of clauses, each clause a disjunction of literals.
See https://en.wikipedia.org/wiki/Conjunctive_normal_form
"""

from typing import Any

from predicates import ast_nodes as ast
from .base import NormalForm


class Cnf(NormalForm):
    """A boolean expression in Conjunctive Normal Form.

    True iff every clause contains at least one true literal. The empty CNF
    is the empty conjunction and is therefore true, while a CNF holding an
    empty clause is false.

    Example:
        >>> cnf = Cnf.from_expr(And(Var(Item(4)), Not(Var(Item(5)))))
        >>> cnf.clauses
        >>> # frozenset({frozenset({Pos(Item(4))}), frozenset({Neg(Item(5))})})
    """

    aggregate = ast.And
    form_name = "CNF"

    def eval(self, context: Any) -> bool:
        return all(
            any(literal.eval(context) for literal in clause)
            for clause in self.clauses
        )
