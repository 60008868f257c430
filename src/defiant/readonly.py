from __future__ import annotations
from dataclasses import is_dataclass
from types import MappingProxyType
from typing import Any

from .values import Kind, kind_of, is_primitive


FROZEN_TYPES = (tuple, frozenset, range, MappingProxyType)


def is_frozen(value: Any) -> bool:
    if isinstance(value, bytearray):
        return False
    if is_primitive(value):
        return True
    if isinstance(value, FROZEN_TYPES):
        return True
    if is_dataclass(value) and not isinstance(value, type):
        return value.__dataclass_params__.frozen
    return False


def freeze(obj: Any) -> Any:
    # shallow: nested containers are left as they are
    if isinstance(obj, FROZEN_TYPES):
        return obj
    match kind_of(obj):
        case Kind.MAPPING:
            return MappingProxyType(dict(obj.items()))
        case Kind.SEQUENCE:
            return tuple(obj)
        case Kind.SET:
            return frozenset(obj)
    return obj


def thaw(obj: Any) -> Any:
    match kind_of(obj):
        case Kind.MAPPING:
            return dict(obj.items())
        case Kind.SEQUENCE:
            return list(obj)
        case Kind.SET:
            return set(obj)
    return obj
