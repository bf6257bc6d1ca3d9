from __future__ import annotations
import sys
from dataclasses import dataclass

from doodle.types.expr import Expr, check_type


@dataclass(frozen=True, eq=False, slots=True)
class Symbol(Expr):
    name: str

    def __post_init__(self):
        check_type(self.name, str, "Symbol")
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(self.name))


@dataclass(frozen=True, eq=False, slots=True)
class Keyword(Expr):
    """A self-evaluating name, printed with a leading colon."""

    name: str

    def __post_init__(self):
        check_type(self.name, str, "Keyword")
        object.__setattr__(self, "name", sys.intern(self.name))


def to_symbol(name: str) -> Symbol:
    return Symbol(name)


def to_keyword(name: str) -> Keyword:
    return Keyword(name)
