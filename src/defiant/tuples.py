from __future__ import annotations
from typing import Any, Iterable, List, Tuple

from .equality import is_equal
from .readonly import freeze, is_frozen
from .values import Kind, kind_of
from .version import VERSION


def create(*values: Any) -> Tuple[Any, ...]:
    return freeze(values)


of = create


def from_iterable(source: Iterable[Any]) -> Tuple[Any, ...]:
    # drain first; an infinite source never returns
    return freeze(list(source))


def is_tuple(value: Any) -> bool:
    return kind_of(value) is Kind.SEQUENCE and is_frozen(value)


def to_list(value: Iterable[Any]) -> List[Any]:
    """Shallow mutable copy; nested containers stay shared with `value`."""
    return list(value)


__all__ = ["VERSION", "create", "of", "from_iterable", "is_tuple", "is_equal", "to_list"]
