# serialization/__init__.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Structural serialization adapter for expressions and normal forms

"""Opt-in structural serialization of predicate values.

This package sits at the boundary and is independent of the conversion logic.
It maps expressions, literals and normal forms to plain data and back,
preserving the variant and field structure exactly, so that a round trip
yields a structurally equal value.

Core Components:
    PredicateCodec: Conversion with caller-supplied variable hooks
    to_data, from_data: Plain data with pass-through variables
    dumps, loads: JSON text with pass-through variables
    SerializationError: Raised on malformed input

YAML support lives in ``serialization.yaml_format`` and needs PyYAML.
"""

from .codec import (
    PredicateCodec,
    SerializationError,
    to_data,
    from_data,
    dumps,
    loads,
)

__all__ = [
    "PredicateCodec",
    "SerializationError",
    "to_data",
    "from_data",
    "dumps",
    "loads",
]
