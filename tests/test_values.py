import datetime
import math
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType, SimpleNamespace

import pytest

from defiant.values import Kind, kind_of, is_nan, is_primitive, prototype_of, entries_of


class Registry(dict):
    pass


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, Kind.NIL),
        (True, Kind.BOOL),
        (0, Kind.NUMBER),
        (1.5, Kind.NUMBER),
        (2j, Kind.NUMBER),
        (Decimal("1.1"), Kind.NUMBER),
        (Fraction(1, 3), Kind.NUMBER),
        ("abc", Kind.STRING),
        (b"abc", Kind.BYTES),
        (bytearray(b"abc"), Kind.BYTES),
        ({}, Kind.MAPPING),
        (MappingProxyType({}), Kind.MAPPING),
        ([], Kind.SEQUENCE),
        ((), Kind.SEQUENCE),
        (range(3), Kind.SEQUENCE),
        (set(), Kind.SET),
        (frozenset(), Kind.SET),
        (len, Kind.OPAQUE),
        (int, Kind.OPAQUE),
        (math, Kind.OPAQUE),
        (SimpleNamespace(a=1), Kind.OBJECT),
        (datetime.date(2020, 1, 1), Kind.VALUE),
        (object(), Kind.VALUE),
    ]
)


def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_primitives():
    assert is_primitive("x")
    assert is_primitive(None)
    assert not is_primitive([])
    assert not is_primitive(SimpleNamespace())


@pytest.mark.parametrize(
    "value, expected",
    [
        (float("nan"), True),
        (complex(float("nan"), 0), True),
        (Decimal("NaN"), True),
        (Decimal("sNaN"), True),
        (1.0, False),
        (Decimal("1"), False),
        (True, False),
        ("nan", False),
        (None, False),
    ]
)


def test_is_nan(value, expected):
    assert is_nan(value) is expected


def test_prototype_of_mapping_proxy_reports_viewed_type():
    assert prototype_of(MappingProxyType({"a": 1})) is dict
    assert prototype_of(MappingProxyType(OrderedDict(a=1))) is OrderedDict
    assert prototype_of(MappingProxyType(Registry(a=1))) is Registry
    assert prototype_of({"a": 1}) is dict
    assert prototype_of(SimpleNamespace()) is SimpleNamespace


def test_entries_of():
    assert entries_of({"a": 1}) == {"a": 1}
    assert entries_of(MappingProxyType({"a": 1})) == {"a": 1}
    assert entries_of([5, 6]) == {0: 5, 1: 6}
    assert entries_of(SimpleNamespace(a=1, b=2)) == {"a": 1, "b": 2}
    assert entries_of("ab") == {}
    assert entries_of(None) == {}
    assert entries_of(7) == {}


def test_entries_of_returns_a_copy():
    src = {"a": 1}
    out = entries_of(src)
    out["b"] = 2
    assert src == {"a": 1}
