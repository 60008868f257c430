from . import records, tuples
from .equality import Comparator, default_tracer, is_equal
from .literal import LiteralError, parse
from .readonly import freeze, is_frozen, thaw
from .records import RecordError
from .values import Kind, kind_of
from .version import VERSION, __version__

Tuple = tuples
Record = records

__all__ = [
    "Tuple", "Record", "Comparator", "Kind", "LiteralError", "RecordError", "VERSION",
    "default_tracer", "freeze", "is_equal", "is_frozen", "kind_of", "parse", "thaw",
]
