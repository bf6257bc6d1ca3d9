"""Expression keys.

`ExprKey` mirrors the shape of `Expr` minus closures, so map literals and
environment frames can be keyed by typed values. `make_key` only admits the
forms a user can type as a literal key (symbol, keyword, number, string);
compound and nil keys exist for printing and round-tripping and are built
directly.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Optional

from pyrsistent import PVector, pvector

from doodle.errors import DoodleTypeError
from doodle.types.expr import (
    Boolean,
    Expr,
    List,
    Map,
    Number,
    String,
    Vector,
    check_number,
    check_type,
    coerce_items,
    coerce_pairs,
)
from doodle.types.nil import Nil
from doodle.types.symbol import Keyword, Symbol


class ExprKey:
    """Base class of all key variants."""

    __slots__ = ()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ExprKey):
            return NotImplemented
        from doodle.equality import equals
        return equals(self, other)

    def __hash__(self) -> int:
        from doodle.equality import hash_of
        return hash_of(self)

    def __str__(self) -> str:
        from doodle.printer import key_to_string
        return key_to_string(self)

    def to_expr(self) -> Expr:
        return to_expr(self)


@dataclass(frozen=True, eq=False, slots=True)
class SymbolKey(ExprKey):
    name: str

    def __post_init__(self):
        check_type(self.name, str, "SymbolKey")
        object.__setattr__(self, "name", sys.intern(self.name))


@dataclass(frozen=True, eq=False, slots=True)
class KeywordKey(ExprKey):
    name: str

    def __post_init__(self):
        check_type(self.name, str, "KeywordKey")
        object.__setattr__(self, "name", sys.intern(self.name))


@dataclass(frozen=True, eq=False, slots=True)
class NumberKey(ExprKey):
    value: int | float

    def __post_init__(self):
        check_number(self.value)


@dataclass(frozen=True, eq=False, slots=True)
class BooleanKey(ExprKey):
    value: bool

    def __post_init__(self):
        check_type(self.value, bool, "BooleanKey")


@dataclass(frozen=True, eq=False, slots=True)
class StringKey(ExprKey):
    value: str

    def __post_init__(self):
        check_type(self.value, str, "StringKey")


@dataclass(frozen=True, eq=False, slots=True)
class ListKey(ExprKey):
    items: PVector = field(default_factory=pvector)

    def __post_init__(self):
        object.__setattr__(self, "items", coerce_items(self.items))


@dataclass(frozen=True, eq=False, slots=True)
class VectorKey(ExprKey):
    items: PVector = field(default_factory=pvector)

    def __post_init__(self):
        object.__setattr__(self, "items", coerce_items(self.items))


@dataclass(frozen=True, eq=False, slots=True)
class MapKey(ExprKey):
    pairs: PVector = field(default_factory=pvector)

    def __post_init__(self):
        object.__setattr__(self, "pairs", coerce_pairs(self.pairs))


class NilKeyType(ExprKey):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NilKey"
    def __bool__(self): return False


NilKey = NilKeyType()


def make_key(expr: Expr) -> Optional[ExprKey]:
    """Project a literal onto a key.

    Only symbols, keywords, numbers and strings qualify. Every other form
    (booleans, collections, nil, closures) yields None; that is ordinary
    control flow, not an error.
    """
    match expr:
        case Symbol(name):
            return SymbolKey(name)
        case Keyword(name):
            return KeywordKey(name)
        case Number(value):
            return NumberKey(value)
        case String(value):
            return StringKey(value)
        case _:
            return None


def to_expr(key: ExprKey) -> Expr:
    """Embed a key back into the expression space. Total over all key variants."""
    match key:
        case SymbolKey(name):
            return Symbol(name)
        case KeywordKey(name):
            return Keyword(name)
        case NumberKey(value):
            return Number(value)
        case BooleanKey(value):
            return Boolean(value)
        case StringKey(value):
            return String(value)
        case ListKey(items):
            return List(items)
        case VectorKey(items):
            return Vector(items)
        case MapKey(pairs):
            return Map(pairs)
        case NilKeyType():
            return Nil
    raise DoodleTypeError(f"Not an expression key: {key!r}")
