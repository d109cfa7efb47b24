# predicates/ast_nodes.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Expression tree node classes for boolean predicate representation

"""Expression tree nodes for boolean predicates over user-supplied variables.

This module defines immutable node classes used to build tree representations
of boolean predicates. Nodes are hashable whenever their variables are.
Leaves wrap variable values that implement the evaluation capability; inner
nodes are the standard Boolean connectives.

Node Types:
    Var: Leaf wrapping one variable value
    Not, And, Or: Standard Boolean connectives

Trees are built bottom-up from frozen nodes, so they are always finite and
acyclic. All nodes support the visitor design pattern for traversal and
transformation, and the ``&``, ``|`` and ``~`` operators for construction.

Example:
    >>> from predicates import Var
    >>> expr = Var(flag_a) & ~Var(flag_b)
    >>> expr.eval(enabled_flags)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Protocol


class Visitor(Protocol):
    """Interface for expression visitors implementing the visitor pattern.

    Concrete visitors must implement visit methods for each node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all boolean expression nodes.

    Provides the foundation for immutable expression trees with visitor pattern
    support and operator-based construction. Concrete node types must implement
    ``accept``, ``eval``, ``variables`` and ``__str__``.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def eval(self, context: Any) -> bool:
        """Evaluate the expression against the given context.

        Args:
            context: Contextual data required by the variable type

        Returns:
            Truth value of the expression

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def variables(self) -> FrozenSet[Any]:
        """Return the set of variables occurring in the expression.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def eq_unordered(self, other: Expr) -> bool:
        """Compare structure while ignoring the order of ``And``/``Or`` operands.

        Runs of the same connective are compared as multisets of operands, so
        ``And(a, And(b, c))`` matches ``And(And(c, a), b)``. Variables are
        compared with ``==`` only and never hashed.

        Args:
            other: Expression to compare against

        Returns:
            True if both trees are equal up to operand order

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __and__(self, other: Expr) -> And:
        """Build the conjunction ``self & other``."""
        return And(self, other)

    def __or__(self, other: Expr) -> Or:
        """Build the disjunction ``self | other``."""
        return Or(self, other)

    def __invert__(self) -> Not:
        """Build the negation ``~self``."""
        return Not(self)

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Leaf node wrapping a single variable value.

    The variable is evaluated through its own ``eval`` method, so any value
    implementing the evaluation capability can be used. Set-backed normal
    forms additionally need it to be hashable.

    Attributes:
        variable: The wrapped variable value
    """

    variable: Any

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_var method.

        Args:
            v: Visitor instance to process this variable

        Returns:
            Result of visitor's visit_var method
        """
        return v.visit_var(self)

    def eval(self, context: Any) -> bool:
        return bool(self.variable.eval(context))

    def variables(self) -> FrozenSet[Any]:
        return frozenset((self.variable,))

    def eq_unordered(self, other: Expr) -> bool:
        return isinstance(other, Var) and self.variable == other.variable

    def __str__(self) -> str:
        """Return the variable's string form."""
        return str(self.variable)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of exactly one sub-expression.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_not method.

        Args:
            v: Visitor instance to process this negation

        Returns:
            Result of visitor's visit_not method
        """
        return v.visit_not(self)

    def eval(self, context: Any) -> bool:
        return not self.operand.eval(context)

    def variables(self) -> FrozenSet[Any]:
        return self.operand.variables()

    def eq_unordered(self, other: Expr) -> bool:
        return isinstance(other, Not) and self.operand.eq_unordered(other.operand)

    def __str__(self) -> str:
        """Return string representation of negation.

        Returns:
            Formatted string with negation operator and operand
        """
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction of exactly two sub-expressions.

    Evaluation short-circuits left to right over the whole run of nested
    conjunctions: no operand after the first false one is evaluated.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_and method.

        Args:
            v: Visitor instance to process this conjunction

        Returns:
            Result of visitor's visit_and method
        """
        return v.visit_and(self)

    def eval(self, context: Any) -> bool:
        return all(operand.eval(context) for operand in flatten(self, And))

    def variables(self) -> FrozenSet[Any]:
        return frozenset().union(*(operand.variables() for operand in flatten(self, And)))

    def eq_unordered(self, other: Expr) -> bool:
        return isinstance(other, And) and _same_operands(self, other, And)

    def __str__(self) -> str:
        """Return string representation of conjunction.

        Returns:
            Formatted string with the operands of the whole run of
            conjunctions joined by the AND operator
        """
        return "(" + " & ".join(str(operand) for operand in flatten(self, And)) + ")"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction of exactly two sub-expressions.

    Evaluation short-circuits left to right over the whole run of nested
    disjunctions: no operand after the first true one is evaluated.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_or method.

        Args:
            v: Visitor instance to process this disjunction

        Returns:
            Result of visitor's visit_or method
        """
        return v.visit_or(self)

    def eval(self, context: Any) -> bool:
        return any(operand.eval(context) for operand in flatten(self, Or))

    def variables(self) -> FrozenSet[Any]:
        return frozenset().union(*(operand.variables() for operand in flatten(self, Or)))

    def eq_unordered(self, other: Expr) -> bool:
        return isinstance(other, Or) and _same_operands(self, other, Or)

    def __str__(self) -> str:
        """Return string representation of disjunction.

        Returns:
            Formatted string with the operands of the whole run of
            disjunctions joined by the OR operator
        """
        return "(" + " | ".join(str(operand) for operand in flatten(self, Or)) + ")"


def flatten(expr: Expr, connective: type) -> List[Expr]:
    """Collect the operands of a run of one connective, left to right.

    Nested nodes of ``connective`` are opened up without recursion, so long
    chains such as ``((a & b) & c) & ...`` do not consume stack depth. Any
    other node, including ``expr`` itself when it is not a ``connective``,
    is returned as a single operand.

    Args:
        expr: Root of the run
        connective: ``And`` or ``Or``

    Returns:
        Operands of the run in evaluation order
    """
    operands = []
    stack = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, connective):
            stack.append(node.right)
            stack.append(node.left)
        else:
            operands.append(node)
    return operands


def _same_operands(left: Expr, right: Expr, connective: type) -> bool:
    unmatched = flatten(right, connective)
    operands = flatten(left, connective)
    if len(operands) != len(unmatched):
        return False

    for operand in operands:
        for index, candidate in enumerate(unmatched):
            if operand.eq_unordered(candidate):
                del unmatched[index]
                break
        else:
            return False
    return True
