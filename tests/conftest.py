import pytest

from defiant.literal import parse


@pytest.fixture
def lit():
    """
    lit(src) -> value
    Builds a value from literal notation, e.g. lit("#[1, #{a: 2}]").
    """
    return parse


@pytest.fixture
def trace_log():
    """
    trace_log() -> (calls, hook)
    'calls' collects (path, x, y, result) tuples for every node the hook sees.
    """
    def _make():
        calls = []
        def hook(path, x, y, result):
            calls.append((path, x, y, result))
        return calls, hook
    return _make
