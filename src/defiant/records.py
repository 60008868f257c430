from __future__ import annotations
from typing import Any, Dict, Iterable, Mapping

from .equality import is_equal
from .readonly import freeze, is_frozen
from .values import Kind, kind_of, entries_of, is_primitive
from .version import VERSION


class RecordError(ValueError): pass


def create(obj: Any) -> Mapping[Any, Any]:
    """
    Frozen record holding a shallow copy of the own key/value pairs of `obj`.

    Mappings contribute their items, plain objects their attributes and
    sequences their `index -> element` pairs. None and primitives give an
    empty record. Only the top level is frozen.
    """
    return freeze(entries_of(obj))


from_object = create


def from_entries(pairs: Iterable[Any]) -> Mapping[Any, Any]:
    items: Dict[Any, Any] = {}
    for i, pair in enumerate(pairs):
        try:
            key, value = pair
        except (TypeError, ValueError) as e:
            raise RecordError(f"entry {i} is not a (key, value) pair: {pair!r}") from e
        items[key] = value   # last write wins
    return freeze(items)


def is_record(value: Any) -> bool:
    # any frozen non-primitive qualifies, tuples included
    if is_primitive(value) or kind_of(value) is Kind.OPAQUE:
        return False
    return is_frozen(value)


def to_dict(value: Any) -> Dict[Any, Any]:
    return entries_of(value)


__all__ = [
    "VERSION", "RecordError", "create", "from_entries", "from_object",
    "is_record", "is_equal", "to_dict",
]
