# tests/normal_form_tests/test_cnf_conversion.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# CNF conversion test suite

"""Test suite for conversion of expressions to Conjunctive Normal Form.

Verifies clause structure, deduplication, evaluation semantics (including the
empty-conjunction identity), sequence construction, and rebuilding expressions
from clauses.
"""

import pytest
from predicates import And, Not, Or, Var, NormalizationError
from normal_form import Cnf, Dnf, Neg, NormalizationConfig, Pos
from sample_variables import Item, all_contexts
from utils.logger import get_logger


def clauses(*groups):
    """Build a clause set from tuples of literals."""
    return frozenset(frozenset(group) for group in groups)


def v(n):
    return Var(Item(n))


class TestCnfConversion:
    """Test cases for CNF clause structure."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_reference_scenario(self, items):
        cnf = Cnf.from_expr(And(v(4), Not(v(5))))

        assert cnf.eval(items)
        assert cnf.clauses == clauses((Pos(Item(4)),), (Neg(Item(5)),))

    # Test cases: (expression, expected_clauses)
    TEST_CASES = [
        (v(1), clauses((Pos(Item(1)),))),
        (Not(v(1)), clauses((Neg(Item(1)),))),
        (Not(Not(v(1))), clauses((Pos(Item(1)),))),
        (Or(v(1), v(2)), clauses((Pos(Item(1)), Pos(Item(2))))),
        (And(v(1), v(2)), clauses((Pos(Item(1)),), (Pos(Item(2)),))),
        # De Morgan
        (Not(Or(v(1), v(2))), clauses((Neg(Item(1)),), (Neg(Item(2)),))),
        (Not(And(v(1), v(2))), clauses((Neg(Item(1)), Neg(Item(2))))),
        # Distribution of Or over And
        (
            Or(v(1), And(v(2), v(3))),
            clauses((Pos(Item(1)), Pos(Item(2))), (Pos(Item(1)), Pos(Item(3)))),
        ),
        (
            Or(And(v(1), v(2)), And(v(3), v(4))),
            clauses(
                (Pos(Item(1)), Pos(Item(3))),
                (Pos(Item(1)), Pos(Item(4))),
                (Pos(Item(2)), Pos(Item(3))),
                (Pos(Item(2)), Pos(Item(4))),
            ),
        ),
        # Negation pushed through nested connectives
        (
            Not(And(v(1), Or(v(2), Not(v(3))))),
            clauses((Neg(Item(1)), Neg(Item(2))), (Neg(Item(1)), Pos(Item(3)))),
        ),
    ]

    @pytest.mark.parametrize("expr, expected", TEST_CASES)
    def test_cnf_clauses(self, expr, expected):
        """Test conversion produces the expected clause set.

        Args:
            expr: Expression to convert
            expected: Expected clause set
        """
        cnf = Cnf.from_expr(expr)
        self.logger.debug(f"{expr} -> {cnf}")

        assert cnf.clauses == expected, (
            f"Conversion mismatch:\n"
            f"Input: {expr}\n"
            f"Got: {cnf}\n"
            f"Expected: {Cnf(expected)}"
        )

    def test_three_level_cnf(self):
        expr = And(
            Or(And(v(1), v(2)), And(v(3), v(4))),
            And(Or(v(5), v(6)), Or(v(7), v(8))),
        )

        expected = Cnf.from_exprs([
            Or(v(7), v(8)),
            Or(v(5), v(6)),
            Or(v(4), v(2)),
            Or(v(4), v(1)),
            Or(v(3), v(2)),
            Or(v(3), v(1)),
        ])

        assert Cnf.from_expr(expr) == expected
        assert len(expected) == 6

    @pytest.mark.parametrize("expr, expected", TEST_CASES)
    def test_cnf_equivalence(self, expr, expected):
        cnf = Cnf.from_expr(expr)
        for context in all_contexts(range(1, 5)):
            assert cnf.eval(context) == expr.eval(context), (
                f"CNF disagrees with {expr} on {sorted(context)}"
            )


class TestCnfDeduplication:
    """Test cases for set semantics of literals and clauses."""

    def test_repeated_literal_in_clause(self):
        config = NormalizationConfig(simplify=False)
        cnf = Cnf.from_expr(Or(v(1), Or(v(2), v(1))), config)
        assert cnf.clauses == clauses((Pos(Item(1)), Pos(Item(2))))

    def test_repeated_clause(self):
        config = NormalizationConfig(simplify=False)
        cnf = Cnf.from_expr(And(Or(v(1), v(2)), Or(v(2), v(1))), config)
        assert len(cnf) == 1
        assert cnf.clauses == clauses((Pos(Item(1)), Pos(Item(2))))

    def test_double_negation_collapses_to_same_literal(self):
        cnf = Cnf.from_expr(And(v(1), Not(Not(v(1)))))
        assert cnf.clauses == clauses((Pos(Item(1)),))

    def test_clauses_constructor_dedups(self):
        cnf = Cnf([[Pos(Item(1)), Pos(Item(1))], [Pos(Item(1))]])
        assert cnf.clauses == clauses((Pos(Item(1)),))


class TestCnfEvaluation:
    """Test cases for CNF evaluation semantics."""

    def test_empty_cnf_is_true(self):
        assert Cnf().eval(frozenset())
        assert Cnf().eval(frozenset({1}))
        assert Cnf().is_empty()

    def test_empty_clause_is_false(self):
        assert not Cnf([[]]).eval(frozenset({1}))

    def test_every_clause_needs_a_true_literal(self):
        cnf = Cnf([[Pos(Item(1)), Neg(Item(2))], [Pos(Item(3))]])
        assert cnf.eval({1, 3})
        assert cnf.eval({3})
        assert not cnf.eval({2, 3})
        assert not cnf.eval({1})

    def test_nested_as_variable(self, items):
        inner = Cnf.from_expr(Or(v(3), v(4)))
        expr = And(Var(inner), v(1))
        assert expr.eval(items)
        assert not expr.eval({1})
        assert Cnf.from_expr(expr).eval(items)


class TestCnfSequenceConstruction:
    """Test cases for building a CNF from sibling conjuncts."""

    def test_sequence_equals_and_chain(self):
        a = Or(v(1), v(2))
        b = Not(v(3))
        c = Or(And(v(4), v(5)), v(6))

        from_sequence = Cnf.from_exprs([a, b, c])
        from_chain = Cnf.from_expr(And(And(a, b), c))

        assert from_sequence == from_chain
        for context in all_contexts(range(1, 7)):
            assert from_sequence.eval(context) == from_chain.eval(context)

    def test_sequence_unions_instead_of_distributing(self):
        # Each operand is a conjunct: {1 | 2} and {3}, not their cross product
        cnf = Cnf.from_exprs([Or(v(1), v(2)), v(3)])
        assert cnf.clauses == clauses((Pos(Item(1)), Pos(Item(2))), (Pos(Item(3)),))

    def test_empty_sequence(self):
        assert Cnf.from_exprs([]) == Cnf()

    def test_accepts_generators(self):
        cnf = Cnf.from_exprs(v(n) for n in (1, 2, 2))
        assert len(cnf) == 2


class TestCnfAccessors:
    """Test cases for accessors, conversion back to expressions and equality."""

    def test_into_list_and_iteration(self):
        cnf = Cnf.from_expr(And(v(1), Or(v(2), v(3))))
        listed = cnf.into_list()

        assert sorted(map(len, listed)) == [1, 2]
        assert set(iter(cnf)) == set(listed)
        assert frozenset({Pos(Item(1))}) in cnf
        assert [Pos(Item(1))] in cnf

    def test_variables(self):
        cnf = Cnf.from_expr(Or(v(1), Not(And(v(2), v(1)))))
        assert cnf.variables() == frozenset({Item(1), Item(2)})

    def test_to_expr_is_deterministic(self):
        cnf = Cnf.from_expr(And(v(4), Not(v(5))))
        assert cnf.to_expr() == And(Not(v(5)), v(4))

    def test_to_expr_equivalence(self):
        expr = Or(And(v(1), Not(v(2))), And(v(3), Or(v(1), v(4))))
        rebuilt = Cnf.from_expr(expr).to_expr()

        for context in all_contexts(range(1, 5)):
            assert rebuilt.eval(context) == expr.eval(context)

    def test_to_expr_of_empty_form(self):
        assert Cnf().to_expr() is None

    def test_to_expr_rejects_empty_clause(self):
        with pytest.raises(NormalizationError):
            Cnf([[]]).to_expr()

    def test_cnf_and_dnf_are_never_equal(self):
        clause_set = clauses((Pos(Item(1)),))
        assert Cnf(clause_set) != Dnf(clause_set)

    def test_hashable(self):
        first = Cnf.from_expr(Or(v(1), v(2)))
        second = Cnf.from_expr(Or(v(2), v(1)))
        assert first == second
        assert len({first, second}) == 1

    def test_string_representation(self):
        assert str(Cnf.from_expr(And(v(4), Not(v(5))))) == "CNF[!5 & 4]"
        assert str(Cnf.from_expr(Or(v(1), v(2)))) == "CNF[(1 | 2)]"
        assert str(Cnf()) == "CNF[]"

    def test_rejects_non_literals(self):
        with pytest.raises(TypeError):
            Cnf([[Item(1)]])
