# serialization/yaml_format.py
# This file is part of Simple Predicates - Boolean Predicate Expressions
#
# YAML front end for the structural codec

"""YAML reading and writing of predicate values.

Requires PyYAML (install the ``yaml`` extra). Only the safe loader and dumper
are used, so documents can hold nothing but plain data.
"""

from typing import Any, Optional

import yaml

from utils.logger import get_logger
from .codec import PredicateCodec, SerializationError

_default_codec = PredicateCodec()


def dump_yaml(obj: Any, codec: Optional[PredicateCodec] = None) -> str:
    """Serialize an expression, literal or normal form to YAML text.

    Args:
        obj: Value to serialize
        codec: Codec with variable hooks, or None for pass-through variables

    Returns:
        YAML document
    """
    codec = codec or _default_codec
    return yaml.safe_dump(codec.to_data(obj), default_flow_style=False, sort_keys=False)


def load_yaml(text: str, kind: type, codec: Optional[PredicateCodec] = None) -> Any:
    """Deserialize a value of the given kind from YAML text.

    Args:
        text: YAML document
        kind: Target class (``Expr``, ``Literal``, ``Cnf`` or ``Dnf``)
        codec: Codec with variable hooks, or None for pass-through variables

    Returns:
        The decoded value

    Raises:
        SerializationError: The text is not valid YAML or not a valid value
    """
    codec = codec or _default_codec
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SerializationError(f"Invalid YAML: {exc}") from exc

    get_logger().debug(f"Decoding {getattr(kind, '__name__', kind)} from YAML")
    return codec.from_data(data, kind)
