"""Canonical printer.

`prn_str` is the textual form of evaluation results: single-space joins,
`()` for lists, `[]` for vectors, `{}` for maps, `nil`, `true`/`false`, and
strings wrapped in double quotes without escaping. Output is deterministic;
maps print in pair order.
"""

from __future__ import annotations

from doodle.errors import DoodleTypeError
from doodle.types.expr import Boolean, Expr, List, Map, Number, String, Vector
from doodle.types.key import (
    BooleanKey,
    ExprKey,
    KeywordKey,
    ListKey,
    MapKey,
    NilKeyType,
    NumberKey,
    StringKey,
    SymbolKey,
    VectorKey,
    to_expr,
)
from doodle.types.lambda_fn import Lambda
from doodle.types.nil import NilType
from doodle.types.symbol import Keyword, Symbol

LAMBDA_REPR = "#<lambda>"


def prn_str(expr: Expr) -> str:
    match expr:
        case Symbol(name):
            return name
        case Keyword(name):
            return f":{name}"
        case Number(value):
            return str(value)
        case Boolean(value):
            return "true" if value else "false"
        case String(value):
            return f'"{value}"'
        case List(items):
            return "(" + " ".join(prn_str(e) for e in items) + ")"
        case Vector(items):
            return "[" + " ".join(prn_str(e) for e in items) + "]"
        case Map(pairs):
            return "{" + " ".join(f"{key_to_string(k)} {prn_str(v)}" for k, v in pairs) + "}"
        case NilType():
            return "nil"
        case Lambda():
            return LAMBDA_REPR
    raise DoodleTypeError(f"Cannot print {expr!r}")


def key_to_string(key: ExprKey) -> str:
    """Textual form of a key on its own, as used for map keys."""
    match key:
        case SymbolKey(name):
            return name
        case KeywordKey(name):
            return f":{name}"
        case NumberKey(value):
            return str(value)
        case BooleanKey(value):
            return "true" if value else "false"
        case StringKey(value):
            return f'"{value}"'
        case NilKeyType():
            return "nil"
        case ListKey() | VectorKey() | MapKey():
            return prn_str(to_expr(key))
    raise DoodleTypeError(f"Cannot print key {key!r}")
