# tests/normal_form_tests/test_long_chains.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Test suite for conversion and evaluation of long connective chains

"""Test suite for long chains of one connective.

Left-associative chains are what ``build_and``/``build_or`` and
``NormalForm.to_expr()`` produce, so their depth grows with the number of
clauses. Conversion, rebuilding and evaluation must handle chains longer than
the interpreter's recursion limit.
"""

import sys
import pytest
from predicates import And, Not, Or, Var, flatten
from normal_form import (
    Cnf,
    CnfList,
    Dnf,
    NormalFormTransformer,
    NormalizationConfig,
    Neg,
    Pos,
    build_and,
    build_or,
    simplify,
)
from sample_variables import Item

CHAIN = 500
# Deeper than the default recursion limit
DEEP = sys.getrecursionlimit() + 200

PLAIN = NormalizationConfig(simplify=False)


def v(n):
    return Var(Item(n))


class TestRoundTrip:
    """Test cases for rebuilding expressions from large normal forms."""

    def test_cnf_of_many_clauses_round_trips(self):
        cnf = Cnf.from_exprs([v(i) for i in range(CHAIN)])
        assert len(cnf) == CHAIN

        rebuilt = cnf.to_expr()
        assert Cnf.from_expr(rebuilt) == cnf

    def test_dnf_of_many_clauses_round_trips(self):
        dnf = Dnf.from_exprs([And(v(i), Not(v(i + 1))) for i in range(0, 2 * CHAIN, 2)])
        assert len(dnf) == CHAIN

        assert Dnf.from_expr(dnf.to_expr()) == dnf

    @pytest.mark.parametrize("form", [Cnf, Dnf])
    def test_round_trip_beyond_recursion_limit(self, form):
        normal = form.from_exprs([v(i) for i in range(DEEP)], PLAIN)
        assert form.from_expr(normal.to_expr(), PLAIN) == normal


class TestChainConversion:
    """Test cases for converting long chains directly."""

    def test_and_chain(self):
        expr = build_and(v(i) for i in range(CHAIN))

        cnf = Cnf.from_expr(expr)
        assert cnf == Cnf(frozenset(frozenset({Pos(Item(i))}) for i in range(CHAIN)))

        dnf = Dnf.from_expr(expr)
        assert dnf == Dnf(frozenset({frozenset(Pos(Item(i)) for i in range(CHAIN))}))

    def test_or_chain(self):
        expr = build_or(v(i) for i in range(CHAIN))

        assert len(Cnf.from_expr(expr)) == 1
        assert len(Dnf.from_expr(expr)) == CHAIN

    def test_repeated_operands_in_a_chain_collapse(self):
        expr = build_and(v(i % 50) for i in range(CHAIN))

        assert flatten(simplify(expr), And) == [v(i) for i in range(50)]
        assert len(Cnf.from_expr(expr)) == 50

    def test_negated_chain_beyond_recursion_limit(self):
        expr = Not(build_and(v(i) for i in range(DEEP)))
        result = NormalFormTransformer(And, PLAIN).normalize(expr)

        assert flatten(result, Or) == [Not(v(i)) for i in range(DEEP)]
        assert Cnf.from_expr(expr, PLAIN) == Cnf(
            frozenset({frozenset(Neg(Item(i)) for i in range(DEEP))})
        )

    def test_tuple_backed_chain_beyond_recursion_limit(self):
        expr = build_or(v(i) for i in range(DEEP))
        cnf = CnfList.from_expr(expr, PLAIN)

        assert cnf.clauses == (tuple(Pos(Item(i)) for i in range(DEEP)),)


class TestChainEvaluation:
    """Test cases for evaluating long chains and their normal forms."""

    def test_and_chain_eval(self):
        expr = build_and(v(i) for i in range(DEEP))
        everything = set(range(DEEP))

        assert expr.eval(everything)
        assert not expr.eval(everything - {DEEP - 1})
        assert Cnf.from_expr(expr, PLAIN).eval(everything)
        assert not Dnf.from_expr(expr, PLAIN).eval(everything - {0})

    def test_or_chain_eval(self):
        expr = build_or(v(i) for i in range(DEEP))

        assert expr.eval({DEEP - 1})
        assert not expr.eval(set())
        assert Dnf.from_expr(expr, PLAIN).eval({DEEP - 1})
        assert not Cnf.from_expr(expr, PLAIN).eval(set())

    def test_chain_variables(self):
        expr = build_or(v(i) for i in range(DEEP))
        assert expr.variables() == frozenset(Item(i) for i in range(DEEP))

    def test_rebuilt_expression_evaluates_like_the_form(self):
        cnf = Cnf.from_exprs([Or(v(i), Not(v(i + 1))) for i in range(CHAIN)])
        rebuilt = cnf.to_expr()

        for context in (set(), set(range(CHAIN + 1)), {0}, {CHAIN}, set(range(0, CHAIN, 2))):
            assert rebuilt.eval(context) == cnf.eval(context)

    def test_chain_string(self):
        expr = build_and(v(i) for i in range(DEEP))
        assert str(expr) == "(" + " & ".join(str(i) for i in range(DEEP)) + ")"
