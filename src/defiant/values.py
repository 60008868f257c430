from __future__ import annotations

import cmath
import gc
import math
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from numbers import Number
from types import MappingProxyType, ModuleType
from typing import Any, Dict


class Kind(Enum):
    NIL      = "nil"
    BOOL     = "bool"
    NUMBER   = "num"
    STRING   = "str"
    BYTES    = "bytes"
    MAPPING  = "map"
    SEQUENCE = "seq"
    SET      = "set"
    OPAQUE   = "opaque"   # functions, classes, modules: identity only
    OBJECT   = "obj"      # instances with a __dict__
    VALUE    = "value"    # slotted / C-level value types, compared with ==


PRIMITIVE_KINDS = frozenset({Kind.NIL, Kind.BOOL, Kind.NUMBER, Kind.STRING, Kind.BYTES})
STRUCTURED_KINDS = frozenset({Kind.MAPPING, Kind.SET, Kind.OBJECT, Kind.VALUE})


def kind_of(value: Any) -> Kind:
    match value:
        case None:
            return Kind.NIL
        case bool():
            return Kind.BOOL
        case Number():
            return Kind.NUMBER
        case str():
            return Kind.STRING
        case bytes() | bytearray():
            return Kind.BYTES
        case Mapping():
            return Kind.MAPPING
        case Sequence():
            return Kind.SEQUENCE
        case Set():
            return Kind.SET
        case type() | ModuleType():
            return Kind.OPAQUE
    if callable(value):
        return Kind.OPAQUE
    if hasattr(value, "__dict__"):
        return Kind.OBJECT
    return Kind.VALUE


def is_primitive(value: Any) -> bool:
    return kind_of(value) in PRIMITIVE_KINDS


def is_nan(value: Any) -> bool:
    match value:
        case bool():
            return False
        case float():
            return math.isnan(value)
        case complex():
            return cmath.isnan(value)
        case Decimal():
            return value.is_nan()
    return False


def prototype_of(value: Any) -> type:
    """
    Nominal type used by the structural equality check.

    A mapping proxy reports the type of the mapping it views, so a frozen
    record built from a dict shares the dict's prototype.
    """
    if isinstance(value, MappingProxyType):
        # a proxy refers to exactly one object, the mapping it views
        viewed = gc.get_referents(value)
        if len(viewed) == 1:
            return type(viewed[0])
        return MappingProxyType
    return type(value)


def entries_of(value: Any) -> Dict[Any, Any]:
    """Own key/value pairs of a value, as a fresh dict."""
    match kind_of(value):
        case Kind.MAPPING:
            return dict(value.items())
        case Kind.SEQUENCE:
            return dict(enumerate(value))
        case Kind.OBJECT:
            return dict(vars(value))
    return {}
