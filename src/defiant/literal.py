from __future__ import annotations
import json
from typing import Any, List, Tuple, Union

from lark import Lark, Tree, Token
from lark.exceptions import UnexpectedInput

from . import records, tuples


GRAMMAR = r"""
    ?start: value

    ?value: tuple
          | record
          | list
          | dict
          | atom

    tuple: "#[" (value ("," value)* ","?)? "]"
    record: "#{" (pair ("," pair)* ","?)? "}"
    list: "[" (value ("," value)* ","?)? "]"
    dict: "{" (pair ("," pair)* ","?)? "}"

    pair: key ":" value

    ?key: NAME              -> name_key
        | ESCAPED_STRING    -> string_key
        | SIGNED_INT        -> int_key

    ?atom: SIGNED_INT       -> int
         | SIGNED_FLOAT     -> float
         | SPECIAL_FLOAT    -> special_float
         | ESCAPED_STRING   -> string
         | "true"           -> true
         | "false"          -> false
         | "null"           -> null

    SPECIAL_FLOAT: /[+-]?inf/ | "nan"

    %import common.CNAME -> NAME
    %import common.SIGNED_INT
    %import common.SIGNED_FLOAT
    %import common.ESCAPED_STRING
    %import common.WS
    %ignore WS
"""

PARSER = Lark(GRAMMAR, parser="earley", lexer="dynamic", start="start")


class LiteralError(Exception): pass


def _decode_string(token: Token) -> str:
    # the grammar accepts any backslash escape; JSON decides which are valid
    try:
        return json.loads(token)
    except json.JSONDecodeError as e:
        raise LiteralError(f"invalid string literal {token}") from e


class LiteralBuilder:
    """Walks a literal parse tree and builds tuples, records, lists and dicts."""

    def build(self, tree: Union[Tree, Token]) -> Any:
        return self._build(tree)

    def _build(self, node: Union[Tree, Token]) -> Any:
        if not isinstance(node, Tree):
            raise LiteralError(f"Unknown node {node!r}")

        fn = getattr(self, f"build_{node.data}", None)
        if not fn:
            raise LiteralError(f"No builder for {node.data}")

        return fn(node.children)

    def _values(self, children) -> List[Any]:
        return [self._build(c) for c in children if isinstance(c, Tree)]

    def _pairs(self, children) -> List[Tuple[Any, Any]]:
        return [self._build(c) for c in children if isinstance(c, Tree) and c.data == "pair"]

    # ------------- containers -------------
    def build_tuple(self, children):
        return tuples.from_iterable(self._values(children))

    def build_record(self, children):
        return records.from_entries(self._pairs(children))

    def build_list(self, children):
        return self._values(children)

    def build_dict(self, children):
        return dict(self._pairs(children))

    def build_pair(self, children):
        key, value = children
        return self._build(key), self._build(value)

    # ------------- keys -------------
    def build_name_key(self, children):
        return str(children[0])

    def build_string_key(self, children):
        return _decode_string(children[0])

    def build_int_key(self, children):
        return int(children[0])

    # ------------- atoms -------------
    def build_int(self, children):
        return int(children[0])

    def build_float(self, children):
        return float(children[0])

    def build_special_float(self, children):
        return float(children[0])

    def build_string(self, children):
        return _decode_string(children[0])

    def build_true(self, children):
        return True

    def build_false(self, children):
        return False

    def build_null(self, children):
        return None


def parse_tree(src: str) -> Tree:
    try:
        return PARSER.parse(src)
    except UnexpectedInput as e:
        line, column = getattr(e, "line", "?"), getattr(e, "column", "?")
        raise LiteralError(f"invalid literal at line {line}, column {column}") from e


def parse(src: str) -> Any:
    """
    Build a value from literal notation.

        #[1, 2.5, nan]        -> tuple
        #{a: 1, "b c": null}  -> record
        [1, 2] / {a: 1}       -> list / dict
    """
    return LiteralBuilder().build(parse_tree(src))
