# normal_form/__init__.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Normal-form conversion components for boolean predicate expressions

"""Conjunctive and disjunctive normal forms of boolean predicates.

This module converts expression trees into clause-set normal forms that can be
evaluated independently of the original tree. Conversion pushes negations
down to the variables using De Morgan's laws and distributes the inner
connective over the aggregate one, deduplicating literals and clauses as it
goes.

Core Components:
    Cnf: Conjunction of disjunctive clauses
    Dnf: Disjunction of conjunctive clauses
    CnfList, DnfList: Tuple-backed forms for unhashable variables
    Pos, Neg: Literals at the leaves of a normal form
    NormalFormTransformer: The conversion algorithm shared by both forms
    NormalizationConfig: Conversion settings (clause ceiling, simplification)

Example:
    >>> from normal_form import Cnf, Dnf
    >>> Cnf.from_expr(expr).eval(context) == expr.eval(context)
    >>> # Always True for referentially transparent variables
"""

from .literal import Literal, Pos, Neg, Clause
from .config import (
    NormalizationConfig,
    get_config,
    set_config,
    configure_normalization,
)
from .transformer import (
    NormalFormTransformer,
    OrderedNormalFormTransformer,
    simplify,
    build_and,
    build_or,
)
from .base import NormalForm
from .cnf import Cnf
from .dnf import Dnf
from .ordered import OrderedNormalForm, CnfList, DnfList

__all__ = [
    "Literal",
    "Pos",
    "Neg",
    "Clause",
    "NormalizationConfig",
    "get_config",
    "set_config",
    "configure_normalization",
    "NormalFormTransformer",
    "OrderedNormalFormTransformer",
    "simplify",
    "build_and",
    "build_or",
    "NormalForm",
    "Cnf",
    "Dnf",
    "OrderedNormalForm",
    "CnfList",
    "DnfList",
]
