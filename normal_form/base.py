# normal_form/base.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Shared clause-set representation of conjunctive and disjunctive normal forms

"""Common base class for CNF and DNF.

Both normal forms are stored the same way, as a frozenset of clauses where
each clause is a frozenset of literals. Subclasses fix the aggregate
connective, which decides how clauses combine and how literals inside a clause
combine, and with it the evaluation semantics.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, FrozenSet, Iterable, Iterator, List, Optional

from predicates import ast_nodes as ast
from predicates.exceptions import NormalizationError
from .config import NormalizationConfig
from .literal import Clause, Literal, clause_str
from .transformer import NormalFormTransformer, build_and, build_or


@dataclass(frozen=True)
class NormalForm:
    """A set of clauses under an aggregate connective.

    Instances are immutable. Build them from an expression with
    ``from_expr``, from sibling expressions with ``from_exprs``, or directly
    from clauses. ``NormalForm()`` is the empty form.

    Attributes:
        clauses: The deduplicated clauses of the form
    """

    aggregate: ClassVar[type] = ast.And
    form_name: ClassVar[str] = "NF"
    transformer_class: ClassVar[type] = NormalFormTransformer

    clauses: FrozenSet[Clause] = frozenset()

    def __post_init__(self):
        clauses = frozenset(frozenset(clause) for clause in self.clauses)
        _check_literals(clauses)
        object.__setattr__(self, "clauses", clauses)

    @classmethod
    def from_expr(cls, expr: ast.Expr, config: Optional[NormalizationConfig] = None):
        """Convert an expression into this normal form.

        Args:
            expr: Expression to convert
            config: Conversion settings, or None for the process-wide default

        Returns:
            Normal form logically equivalent to ``expr``

        Raises:
            ExpressionTooComplexError: The conversion exceeds the clause ceiling
        """
        transformer = cls.transformer_class(cls.aggregate, config)
        return cls(transformer.transform(expr))

    @classmethod
    def from_exprs(cls, exprs: Iterable[ast.Expr], config: Optional[NormalizationConfig] = None):
        """Build this normal form from the top-level operands of its aggregate.

        The operands are joined by the aggregate connective (AND for CNF, OR
        for DNF). Their clause sets are united, not distributed.

        Args:
            exprs: Finite sequence of sibling expressions
            config: Conversion settings, or None for the process-wide default

        Returns:
            Normal form equivalent to the operands joined by the aggregate
        """
        transformer = cls.transformer_class(cls.aggregate, config)
        return cls(transformer.transform_all(exprs))

    def eval(self, context: Any) -> bool:
        raise NotImplementedError

    def is_empty(self) -> bool:
        """Return True if the form contains no clauses."""
        return not self.clauses

    def into_list(self) -> List[Clause]:
        """Return the clauses as a list."""
        return list(self.clauses)

    def variables(self) -> FrozenSet[Any]:
        """Return the set of variables occurring in any clause."""
        return frozenset(lit.variable for clause in self.clauses for lit in clause)

    def clause_lists(self) -> List[List[Literal]]:
        """Return the clauses as lists of literals in the order of their string forms."""
        return [
            sorted(clause, key=str)
            for clause in sorted(self.clauses, key=self._clause_key)
        ]

    def to_expr(self) -> Optional[ast.Expr]:
        """Rebuild an equivalent expression tree.

        Clauses and literals are chained left-associatively in the order of
        ``clause_lists()``, so the result is deterministic.

        Returns:
            Equivalent expression, or None for the empty form

        Raises:
            NormalizationError: The form contains an empty clause
        """
        inner_chain = build_or if self.aggregate is ast.And else build_and
        outer_chain = build_and if self.aggregate is ast.And else build_or

        exprs = []
        for clause in self.clause_lists():
            expr = inner_chain(lit.to_expr() for lit in clause)
            if expr is None:
                raise NormalizationError(
                    f"Empty clause in {self.form_name} has no expression form"
                )
            exprs.append(expr)
        return outer_chain(exprs)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __contains__(self, clause) -> bool:
        return frozenset(clause) in self.clauses

    def __str__(self) -> str:
        inner = "|" if self.aggregate is ast.And else "&"
        outer = " & " if self.aggregate is ast.And else " | "
        parts = sorted(clause_str(clause, inner) for clause in self.clauses)
        return f"{self.form_name}[{outer.join(parts)}]"

    @staticmethod
    def _clause_key(clause: Clause) -> List[str]:
        return sorted(str(lit) for lit in clause)


def _check_literals(clauses: Iterable[Iterable[Any]]) -> None:
    for clause in clauses:
        for literal in clause:
            if not isinstance(literal, Literal):
                raise TypeError(
                    f"Clauses must contain literals, got {type(literal).__name__}"
                )
