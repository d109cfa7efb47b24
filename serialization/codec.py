# serialization/codec.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# Structural conversion of expressions and normal forms to plain data

"""Structural (de)serialization of expressions, literals and normal forms.

Values are mapped to plain data (dicts, lists, scalars) that any structured
format can carry. Every variant becomes a single-key mapping from its name to
its content:

    Var(v)      -> {"Var": v}
    Not(e)      -> {"Not": e}
    And(l, r)   -> {"And": [l, r]}
    Or(l, r)    -> {"Or": [l, r]}
    Pos(v)      -> {"Pos": v}
    Neg(v)      -> {"Neg": v}

Normal forms are transparent: a list of clauses, each clause a list of
literals. Set contents are emitted in a stable order so that equal values
always serialize identically; tuple-backed forms keep their stored order.

Variables are converted through caller-supplied hooks; by default they are
passed through unchanged, which suits variables that already are plain data.

Example:
    >>> codec = PredicateCodec(encode_variable=lambda i: i.value, decode_variable=Item)
    >>> codec.dumps(And(Var(Item(1)), Not(Var(Item(2)))))
    >>> # '{"And": [{"Var": 1}, {"Not": {"Var": 2}}]}'
"""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple

from predicates import ast_nodes as ast
from normal_form.base import NormalForm
from normal_form.ordered import OrderedNormalForm
from normal_form.literal import Literal, Neg, Pos
from utils.logger import get_logger

_BINARY_NODES: Dict[str, type] = {"And": ast.And, "Or": ast.Or}
_LITERALS: Dict[str, type] = {"Pos": Pos, "Neg": Neg}


class SerializationError(ValueError):
    """Exception raised when structured data cannot be converted back.

    Indicates a missing or unknown variant tag, a wrong number of operands,
    undecodable variables, or input that is not valid JSON/YAML.
    """

    pass


def _identity(value: Any) -> Any:
    return value


class PredicateCodec:
    """Converts predicate values to and from plain structured data.

    Attributes:
        encode_variable: Maps a variable to plain data
        decode_variable: Maps plain data back to a variable
    """

    def __init__(
        self,
        encode_variable: Optional[Callable[[Any], Any]] = None,
        decode_variable: Optional[Callable[[Any], Any]] = None,
    ):
        self.encode_variable = encode_variable or _identity
        self.decode_variable = decode_variable or _identity

    # Encoding
    def to_data(self, obj: Any) -> Any:
        """Convert an expression, literal or normal form to plain data.

        Args:
            obj: Value to convert

        Returns:
            Plain data mirroring the value's structure

        Raises:
            SerializationError: The value is not a predicate type
        """
        if isinstance(obj, ast.Expr):
            return self._expr_to_data(obj)
        if isinstance(obj, Literal):
            return self._literal_to_data(obj)
        if isinstance(obj, NormalForm):
            return self._form_to_data(obj)
        raise SerializationError(f"Cannot serialize value of type {type(obj).__name__}")

    def _expr_to_data(self, expr: ast.Expr) -> Dict[str, Any]:
        if isinstance(expr, ast.Var):
            return {"Var": self.encode_variable(expr.variable)}
        if isinstance(expr, ast.Not):
            return {"Not": self._expr_to_data(expr.operand)}
        if isinstance(expr, (ast.And, ast.Or)):
            return {
                type(expr).__name__: [
                    self._expr_to_data(expr.left),
                    self._expr_to_data(expr.right),
                ]
            }
        raise SerializationError(f"Unknown expression node: {type(expr).__name__}")

    def _literal_to_data(self, literal: Literal) -> Dict[str, Any]:
        if isinstance(literal, (Pos, Neg)):
            return {type(literal).__name__: self.encode_variable(literal.variable)}
        raise SerializationError(f"Unknown literal type: {type(literal).__name__}")

    def _form_to_data(self, form: NormalForm) -> List[List[Dict[str, Any]]]:
        return [
            [self._literal_to_data(literal) for literal in clause]
            for clause in form.clause_lists()
        ]

    # Decoding
    def from_data(self, data: Any, kind: type) -> Any:
        """Rebuild a value of the given kind from plain data.

        Args:
            data: Plain data produced by ``to_data`` or an equivalent format
            kind: ``Expr`` (or a node class), ``Literal`` (or ``Pos``/``Neg``),
                ``Cnf``, ``Dnf``, ``CnfList`` or ``DnfList``

        Returns:
            Value structurally equal to the one that was serialized

        Raises:
            SerializationError: The data does not describe a value of ``kind``
        """
        if not isinstance(kind, type):
            raise SerializationError(f"Target kind must be a class, got {kind!r}")

        if issubclass(kind, ast.Expr):
            result = self._expr_from_data(data)
        elif issubclass(kind, Literal):
            result = self._literal_from_data(data)
        elif issubclass(kind, NormalForm) and kind not in (NormalForm, OrderedNormalForm):
            result = self._form_from_data(data, kind)
        else:
            raise SerializationError(f"Cannot deserialize into {kind.__name__}")

        if not isinstance(result, kind):
            raise SerializationError(
                f"Expected {kind.__name__}, data describes {type(result).__name__}"
            )
        return result

    def _expr_from_data(self, data: Any) -> ast.Expr:
        tag, value = _split_tag(data, ("Var", "Not", "And", "Or"))

        if tag == "Var":
            return ast.Var(self._decode(value))
        if tag == "Not":
            return ast.Not(self._expr_from_data(value))

        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise SerializationError(f"{tag} requires exactly two operands, got {value!r}")
        left, right = value
        return _BINARY_NODES[tag](self._expr_from_data(left), self._expr_from_data(right))

    def _literal_from_data(self, data: Any) -> Literal:
        tag, value = _split_tag(data, tuple(_LITERALS))
        return _LITERALS[tag](self._decode(value))

    def _form_from_data(self, data: Any, kind: type) -> NormalForm:
        if not isinstance(data, (list, tuple)):
            raise SerializationError(
                f"{kind.__name__} data must be a list of clauses, got {type(data).__name__}"
            )

        ordered = issubclass(kind, OrderedNormalForm)
        clauses = []
        for index, clause in enumerate(data):
            if not isinstance(clause, (list, tuple)):
                raise SerializationError(
                    f"Clause {index} must be a list of literals, got {type(clause).__name__}"
                )
            literals = [self._literal_from_data(lit) for lit in clause]
            if ordered:
                clauses.append(tuple(literals))
                continue
            try:
                clauses.append(frozenset(literals))
            except TypeError as exc:
                raise SerializationError(f"Clause {index} holds unhashable variables: {exc}") from exc

        return kind(tuple(clauses) if ordered else frozenset(clauses))

    def _decode(self, value: Any) -> Any:
        try:
            return self.decode_variable(value)
        except (TypeError, ValueError, KeyError) as exc:
            raise SerializationError(f"Cannot decode variable {value!r}: {exc}") from exc

    # JSON
    def dumps(self, obj: Any, **kwargs) -> str:
        """Serialize a value to a JSON string.

        Args:
            obj: Expression, literal or normal form
            **kwargs: Passed on to ``json.dumps``

        Returns:
            JSON text
        """
        return json.dumps(self.to_data(obj), **kwargs)

    def loads(self, text: str, kind: type) -> Any:
        """Deserialize a value of the given kind from a JSON string.

        Raises:
            SerializationError: The text is not valid JSON or not a valid value
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Invalid JSON: {exc}") from exc

        get_logger().debug(f"Decoding {getattr(kind, '__name__', kind)} from JSON")
        return self.from_data(data, kind)


def _split_tag(data: Any, tags: Tuple[str, ...]) -> Tuple[str, Any]:
    if not isinstance(data, dict) or len(data) != 1:
        raise SerializationError(f"Expected a single-key mapping with one of {list(tags)}, got {data!r}")

    (tag, value), = data.items()
    if tag not in tags:
        raise SerializationError(f"Unknown variant {tag!r}, expected one of {list(tags)}")
    return tag, value


# Module-level codec for variables that already are plain data
_default_codec = PredicateCodec()


def to_data(obj: Any) -> Any:
    """Convert a value to plain data with the default codec."""
    return _default_codec.to_data(obj)


def from_data(data: Any, kind: type) -> Any:
    """Rebuild a value from plain data with the default codec."""
    return _default_codec.from_data(data, kind)


def dumps(obj: Any, **kwargs) -> str:
    """Serialize a value to JSON with the default codec."""
    return _default_codec.dumps(obj, **kwargs)


def loads(text: str, kind: type) -> Any:
    """Deserialize a value from JSON with the default codec."""
    return _default_codec.loads(text, kind)
