# normal_form/transformer.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Expression transformer for conjunctive and disjunctive normal form conversion

"""Transforms expression trees into collections of clauses.

This module implements the conversion shared by CNF and DNF. The two forms
differ only in their aggregate connective, the connective that joins clauses
together: AND for CNF, OR for DNF. Inside a clause the other connective
applies.

The transformation process:
1. Simplifies the tree (double negation, repeated operands), if enabled
2. Pushes negations down to the variables using De Morgan's laws
3. Converts the negation normal form to clauses, taking the union of clause
   collections under the aggregate connective and the cross product under the
   other

Runs of the same connective, such as the long left-associative chains built by
``build_and``, are opened up with ``flatten`` and processed in a loop. Stack
depth therefore grows with the number of alternations between connectives,
not with the length of a chain.

``NormalFormTransformer`` produces frozensets of frozensets, so identical
literals and clauses collapse as they are produced.
``OrderedNormalFormTransformer`` produces tuples of tuples that keep operand
order and duplicates and never hash a variable. Cross products can still grow
multiplicatively with the nesting depth of alternating connectives; a clause
ceiling can be configured to stop runaway conversions.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple

from predicates import ast_nodes as ast
from predicates.exceptions import ExpressionTooComplexError, NormalizationError
from utils.logger import get_logger
from .config import NormalizationConfig, resolve_config
from .literal import Literal, Neg, Pos


class NormalFormTransformer(ast.Visitor):
    """Converts expressions into the clause sets of a normal form.

    Uses the visitor pattern to push negations down to the variables while
    memoizing transformed subexpressions, then distributes the connectives
    into clauses.

    Attributes:
        aggregate: Connective joining clauses (``And`` for CNF, ``Or`` for DNF)
        form: Name of the target normal form
        config: Conversion settings in effect
        _memo: Cache for negation-normalized subexpressions, keyed by node identity
    """

    def __init__(self, aggregate: type = ast.And, config: Optional[NormalizationConfig] = None):
        """Initialize transformer for the given aggregate connective.

        Args:
            aggregate: ``ast.And`` to build CNF clauses, ``ast.Or`` for DNF
            config: Conversion settings, or None for the process-wide default

        Raises:
            ValueError: If aggregate is not ``ast.And`` or ``ast.Or``
        """
        if aggregate is not ast.And and aggregate is not ast.Or:
            raise ValueError(f"Aggregate connective must be And or Or, got {aggregate!r}")
        self.aggregate = aggregate
        self.form = "CNF" if aggregate is ast.And else "DNF"
        self.config = resolve_config(config)
        # The node is stored with its result so that its id stays reserved
        self._memo: Dict[int, Tuple[ast.Expr, ast.Expr]] = {}

    def transform(self, root: ast.Expr):
        """Convert a single expression into clauses.

        Args:
            root: Root node of the expression to convert

        Returns:
            Clauses of the normal form

        Raises:
            ExpressionTooComplexError: A step exceeds the clause ceiling
            NormalizationError: The tree contains an unknown node type
        """
        logger = get_logger()
        logger.conversion_start(self.form, type(root).__name__)

        clauses = self._convert(root)

        logger.conversion_complete(self.form, len(clauses), _literal_count(clauses))
        return clauses

    def transform_all(self, exprs: Iterable[ast.Expr]):
        """Convert sibling operands of the aggregate connective.

        Each operand is converted independently and the resulting clauses
        are united. They are not distributed over each other, since they are
        already joined by the aggregate connective.

        Args:
            exprs: Finite sequence of top-level operands

        Returns:
            Union of the operands' clauses
        """
        logger = get_logger()
        exprs = list(exprs)
        logger.conversion_start(self.form, "sequence", operands=len(exprs))

        clauses = self._empty()
        for expr in exprs:
            clauses = self._join(clauses, self._convert(expr))
            self._check(len(clauses))

        logger.conversion_complete(self.form, len(clauses), _literal_count(clauses))
        return clauses

    def normalize(self, root: ast.Expr) -> ast.Expr:
        """Return the negation normal form of an expression.

        In the result every ``Not`` node wraps a ``Var`` directly, and runs of
        one connective are rebuilt as left-associative chains.

        Args:
            root: Expression to normalize

        Returns:
            Equivalent expression in negation normal form
        """
        if self.config.simplify:
            root = simplify(root)

        self._memo.clear()
        return self._visit(root)

    def _convert(self, root: ast.Expr):
        return self._clauses(self.normalize(root))

    def _visit(self, node: ast.Expr) -> ast.Expr:
        """Visit expression node with memoization.

        Args:
            node: Node to visit and transform

        Returns:
            Transformed node
        """
        if not isinstance(node, (ast.Var, ast.Not, ast.And, ast.Or)):
            raise NormalizationError(f"Expected an expression node, got {type(node).__name__}")

        cached = self._memo.get(id(node))
        if cached is not None:
            return cached[1]

        result = node.accept(self)
        self._memo[id(node)] = (node, result)
        return result

    def visit_var(self, n: ast.Var) -> ast.Var:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        """Push a negation down to the variables.

        Args:
            n: Negation node

        Returns:
            Equivalent expression in negation normal form
        """
        negated = True
        inner = n.operand

        # Double negation: !!A -> A
        while isinstance(inner, ast.Not):
            negated = not negated
            inner = inner.operand

        if not negated:
            return self._visit(inner)

        if isinstance(inner, ast.Var):
            return n if n.operand is inner else ast.Not(inner)

        # De Morgan: !(A & B) -> !A | !B
        if isinstance(inner, ast.And):
            return self._chain(ast.Or, (ast.Not(op) for op in ast.flatten(inner, ast.And)))

        # De Morgan: !(A | B) -> !A & !B
        if isinstance(inner, ast.Or):
            return self._chain(ast.And, (ast.Not(op) for op in ast.flatten(inner, ast.Or)))

        raise NormalizationError(f"Cannot negate node of type {type(inner).__name__}")

    def visit_and(self, n: ast.And) -> ast.Expr:
        return self._chain(ast.And, ast.flatten(n, ast.And))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return self._chain(ast.Or, ast.flatten(n, ast.Or))

    def _chain(self, connective: type, operands: Iterable[ast.Expr]) -> ast.Expr:
        """Normalize operands and join them into one left-associative chain.

        Normalized operands that are themselves runs of ``connective`` are
        spliced into the chain, so normalizing twice gives the same tree.
        """
        normalized: List[ast.Expr] = []
        for operand in operands:
            normalized.extend(ast.flatten(self._visit(operand), connective))
        return _build_chain(connective, normalized)

    def _clauses(self, expr: ast.Expr):
        """Convert a negation normal form into clauses.

        Args:
            expr: Expression whose negations all wrap variables

        Returns:
            Clauses under this transformer's aggregate connective
        """
        if isinstance(expr, ast.Var):
            return self._unit(Pos(expr.variable))

        if isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Var):
            return self._unit(Neg(expr.operand.variable))

        if isinstance(expr, (ast.And, ast.Or)):
            connective = type(expr)
            operands = ast.flatten(expr, connective)

            result = self._clauses(operands[0])
            for operand in operands[1:]:
                clauses = self._clauses(operand)

                # Aggregate connective: clauses are siblings
                if connective is self.aggregate:
                    result = self._join(result, clauses)
                    self._check(len(result))
                else:
                    result = self._distribute(connective.__name__, result, clauses)
            return result

        raise NormalizationError(
            f"Unexpected node in negation normal form: {type(expr).__name__}"
        )

    def _distribute(self, connective: str, left, right):
        """Distribute the inner connective over two clause collections.

        Every pair of clauses, one from each side, becomes one clause holding
        the literals of both.
        """
        self._check(len(left) * len(right))

        result = self._product(left, right)
        get_logger().distribution_step(connective, len(left), len(right), len(result))
        return result

    def _check(self, clause_count: int) -> None:
        if self.config.exceeds(clause_count):
            get_logger().ceiling_exceeded(self.form, self.config.max_clauses, clause_count)
            raise ExpressionTooComplexError(self.config.max_clauses, clause_count, self.form)

    # Clause collections: frozensets of frozensets
    def _empty(self):
        return frozenset()

    def _unit(self, literal: Literal):
        return frozenset((frozenset((literal,)),))

    def _join(self, left, right):
        return left | right

    def _product(self, left, right):
        return frozenset(
            left_clause | right_clause
            for left_clause in left
            for right_clause in right
        )


class OrderedNormalFormTransformer(NormalFormTransformer):
    """Converts expressions into ordered clause tuples.

    Same phases as ``NormalFormTransformer``, but clauses are tuples of
    literals in operand order and nothing is deduplicated. Variables are only
    compared, never hashed, so unhashable variable types can be normalized.
    """

    def _empty(self):
        return ()

    def _unit(self, literal: Literal):
        return ((literal,),)

    def _join(self, left, right):
        return left + right

    def _product(self, left, right):
        return tuple(
            left_clause + right_clause
            for left_clause in left
            for right_clause in right
        )


def simplify(expr: ast.Expr) -> ast.Expr:
    """Remove double negations and collapse repeated operands.

    ``!!A`` becomes ``A``, and repeated operands within a run of one
    connective are dropped, so ``A & A`` or ``A | (B | A)`` shrink. Operands
    are compared with ``Expr.eq_unordered``, which ignores the operand order of
    nested connectives and never hashes variables. The result is logically
    equivalent to the input.

    Args:
        expr: Expression to simplify

    Returns:
        Simplified expression

    Raises:
        NormalizationError: The tree contains something that is not an expression
    """
    negated = False
    while isinstance(expr, ast.Not):
        negated = not negated
        expr = expr.operand

    if not isinstance(expr, (ast.Var, ast.And, ast.Or)):
        raise NormalizationError(f"Expected an expression node, got {type(expr).__name__}")

    if isinstance(expr, (ast.And, ast.Or)):
        connective = type(expr)
        kept: List[ast.Expr] = []
        for operand in ast.flatten(expr, connective):
            for part in ast.flatten(simplify(operand), connective):
                if not any(part.eq_unordered(seen) for seen in kept):
                    kept.append(part)
        expr = _build_chain(connective, kept)

    return ast.Not(expr) if negated else expr


def build_and(factors: Iterable[ast.Expr]) -> Optional[ast.Expr]:
    """Build left-associative conjunction from factors.

    Args:
        factors: Expressions to conjoin

    Returns:
        Conjunction expression, or None if there are no factors
    """
    return _build_chain(ast.And, factors)


def build_or(terms: Iterable[ast.Expr]) -> Optional[ast.Expr]:
    """Build left-associative disjunction from terms.

    Args:
        terms: Expressions to disjoin

    Returns:
        Disjunction expression, or None if there are no terms
    """
    return _build_chain(ast.Or, terms)


def _build_chain(connective: type, operands: Iterable[ast.Expr]) -> Optional[ast.Expr]:
    expr = None
    for operand in operands:
        expr = operand if expr is None else connective(expr, operand)
    return expr


def _literal_count(clauses: Iterable[Any]) -> int:
    return sum(len(clause) for clause in clauses)
