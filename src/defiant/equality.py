from __future__ import annotations
from typing import Any, Callable, Optional, Tuple

from .values import (
    Kind, kind_of, is_nan, prototype_of,
    PRIMITIVE_KINDS, STRUCTURED_KINDS,
)


Path = Tuple[Any, ...]
TraceHook = Callable[[Path, Any, Any, bool], None]


def default_tracer(path, x, y, result):
    print(f"[path={list(path)}] {x!r} == {y!r} -> {result}")


class Comparator():
    """
    Deep structural equality with SameValueZero semantics for numbers.

    NaN equals NaN, 0 equals -0.0. Sequences compare element-wise whatever
    their type; mappings and objects must share a prototype and have equal
    values under the same keys, in any order. There is no cycle detection:
    a self-referencing value recurses until RecursionError. Mapping keys
    must match by kind as well as by hash, so {True: 1} differs from {1: 1}.
    """

    def __init__(self, trace_hook: Optional[TraceHook] = None) -> None:
        self.trace_hook = trace_hook

    def set_trace_hook(self, hook: Optional[TraceHook]) -> None:
        self.trace_hook = hook

    def compare(self, x: Any, y: Any) -> bool:
        return self._compare(x, y, ())

    def _compare(self, x: Any, y: Any, path: Path) -> bool:
        result = self._decide(x, y, path)
        if self.trace_hook is not None:
            self.trace_hook(path, x, y, result)
        return result

    def _decide(self, x: Any, y: Any, path: Path) -> bool:
        if x is y:
            return True

        x_nan, y_nan = is_nan(x), is_nan(y)
        if x_nan or y_nan:
            return x_nan and y_nan

        xk, yk = kind_of(x), kind_of(y)

        if xk in PRIMITIVE_KINDS or yk in PRIMITIVE_KINDS:
            return xk == yk and x == y

        if xk == Kind.SEQUENCE and yk == Kind.SEQUENCE:
            return self._compare_sequences(x, y, path)

        if xk in STRUCTURED_KINDS and yk in STRUCTURED_KINDS:
            if prototype_of(x) is not prototype_of(y):
                return False
            match xk:
                case Kind.MAPPING:
                    return self._compare_entries(x, y, path)
                case Kind.OBJECT:
                    return self._compare_entries(vars(x), vars(y), path)
                case Kind.SET:
                    return x == y
                case Kind.VALUE:
                    try:
                        return bool(x == y)
                    except (TypeError, ValueError):
                        return False

        return False

    def _compare_sequences(self, x, y, path: Path) -> bool:
        if len(x) != len(y):
            return False
        if len(x) == 0:
            return True
        for i, (a, b) in enumerate(zip(x, y)):
            if not self._compare(a, b, path + (i,)):
                return False
        return True

    def _compare_entries(self, x, y, path: Path) -> bool:
        if len(x) != len(y):
            return False
        if len(x) == 0:
            return True
        # dict lookup matches True with 1; the stored key must be the same kind too
        y_key_kinds = {key: kind_of(key) for key in y}
        for key in x:
            if key not in y or y_key_kinds.get(key, kind_of(key)) is not kind_of(key):
                return False
            if not self._compare(x[key], y[key], path + (key,)):
                return False
        return True


def is_equal(x: Any, y: Any, *, trace_hook: Optional[TraceHook] = None) -> bool:
    return Comparator(trace_hook).compare(x, y)
