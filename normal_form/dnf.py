# normal_form/dnf.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Disjunctive normal form

"""Boolean expressions in Disjunctive Normal Form.

A DNF is a disjunction of clauses, each clause a conjunction of literals.
See https://en.wikipedia.org/wiki/Disjunctive_normal_form
"""

from typing import Any

from predicates import ast_nodes as ast
from .base import NormalForm


class Dnf(NormalForm):
    """A boolean expression in Disjunctive Normal Form.

    True iff some clause has all of its literals true. The empty DNF is the
    empty disjunction and is therefore false.
    """

    aggregate = ast.Or
    form_name = "DNF"

    def eval(self, context: Any) -> bool:
        return any(
            all(literal.eval(context) for literal in clause)
            for clause in self.clauses
        )
