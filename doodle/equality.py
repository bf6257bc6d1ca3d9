"""Structural equality and hashing for expressions and keys.

Two values are equal when they are the same variant with equal payloads,
compared recursively. Closures are the exception: a Lambda never equals
anything, itself included, so any collection holding one is unequal to
every other collection. `hash_of` agrees with `equals` for every pair of
equal values. Values are assumed to be finite and acyclic.
"""

from __future__ import annotations

from typing import Any, Sequence

from doodle.errors import DoodleTypeError
from doodle.types.expr import Boolean, List, Map, Number, String, Vector
from doodle.types.key import (
    BooleanKey,
    KeywordKey,
    ListKey,
    MapKey,
    NilKeyType,
    NumberKey,
    StringKey,
    SymbolKey,
    VectorKey,
)
from doodle.types.lambda_fn import Lambda
from doodle.types.nil import NilType
from doodle.types.symbol import Keyword, Symbol


def equals(a: Any, b: Any) -> bool:
    if isinstance(a, Lambda) or isinstance(b, Lambda):
        return False
    if type(a) is not type(b):
        return False
    match a:
        case Symbol() | Keyword() | SymbolKey() | KeywordKey():
            return a.name == b.name
        case Number() | Boolean() | String() | NumberKey() | BooleanKey() | StringKey():
            return a.value == b.value
        case List() | Vector() | ListKey() | VectorKey():
            return _equal_items(a.items, b.items)
        case Map() | MapKey():
            return _equal_pairs(a.pairs, b.pairs)
        case NilType() | NilKeyType():
            return True
    raise DoodleTypeError(f"Cannot compare {a!r}")


def _equal_items(xs: Sequence[Any], ys: Sequence[Any]) -> bool:
    # no identity shortcut: a shared closure still makes the sequences unequal
    return len(xs) == len(ys) and all(equals(x, y) for x, y in zip(xs, ys))


def _equal_pairs(xs: Sequence[Any], ys: Sequence[Any]) -> bool:
    return len(xs) == len(ys) and all(
        equals(ka, kb) and equals(va, vb) for (ka, va), (kb, vb) in zip(xs, ys)
    )


def hash_of(x: Any) -> int:
    tag = type(x).__name__
    match x:
        case Lambda():
            return hash("lambda")
        case Symbol() | Keyword() | SymbolKey() | KeywordKey():
            return hash((tag, x.name))
        case Number() | Boolean() | String() | NumberKey() | BooleanKey() | StringKey():
            return hash((tag, x.value))
        case List() | Vector() | ListKey() | VectorKey():
            return hash((tag, tuple(hash_of(item) for item in x.items)))
        case Map() | MapKey():
            return hash((tag, tuple((hash_of(k), hash_of(v)) for k, v in x.pairs)))
        case NilType() | NilKeyType():
            return hash(tag)
    raise DoodleTypeError(f"Cannot hash {x!r}")
