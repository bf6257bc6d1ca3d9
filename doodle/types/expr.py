"""Expression value model.

Every evaluable form is an immutable `Expr`. Variants are frozen, slotted
dataclasses; compound variants hold their children in pyrsistent vectors so
new values share structure with the ones they were derived from.

    - numbers  -> Number(int | float)
    - booleans -> Boolean(bool)
    - strings  -> String(str)
    - lists    -> List(PVector[Expr])
    - vectors  -> Vector(PVector[Expr])
    - maps     -> Map(PVector[(ExprKey, Expr)]), ordered, duplicates allowed

Symbols and keywords live in doodle.types.symbol, nil in doodle.types.nil and
closures in doodle.types.lambda_fn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Optional

from pyrsistent import PVector, pvector

from doodle.errors import DoodleTypeError

if TYPE_CHECKING:
    from doodle.types.frame import Frame
    from doodle.types.key import ExprKey


class Expr:
    """Base class of all expression variants."""

    __slots__ = ()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        from doodle.equality import equals
        return equals(self, other)

    def __hash__(self) -> int:
        from doodle.equality import hash_of
        return hash_of(self)

    def __str__(self) -> str:
        from doodle.printer import prn_str
        return prn_str(self)

    def make_key(self) -> Optional[ExprKey]:
        """Project onto a key, or None when this form cannot be a literal key."""
        from doodle.types.key import make_key
        return make_key(self)

    @property
    def number_value(self) -> int | float | None:
        return number_value(self)


# --- payload coercion shared with doodle.types.key ---

def check_number(value: Any) -> None:
    # bool is an int subclass; booleans have their own variant
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DoodleTypeError(f"Expected an int or float, got {value!r}")


def check_type(value: Any, expected: type, what: str) -> None:
    if not isinstance(value, expected):
        raise DoodleTypeError(f"{what} expects {expected.__name__}, got {value!r}")


def coerce_items(items: Iterable[Any]) -> PVector:
    items = pvector(items)
    for item in items:
        if not isinstance(item, Expr):
            raise DoodleTypeError(f"Expected an expression, got {item!r}")
    return items


def coerce_pairs(pairs: Iterable[Any]) -> PVector:
    from doodle.types.key import ExprKey

    result = []
    for pair in pairs:
        key, value = pair
        if not isinstance(key, ExprKey):
            raise DoodleTypeError(f"Map keys must be expression keys, got {key!r}")
        if not isinstance(value, Expr):
            raise DoodleTypeError(f"Expected an expression, got {value!r}")
        result.append((key, value))
    return pvector(result)


# --- scalar variants ---

@dataclass(frozen=True, eq=False, slots=True)
class Number(Expr):
    value: int | float

    def __post_init__(self):
        check_number(self.value)


@dataclass(frozen=True, eq=False, slots=True)
class Boolean(Expr):
    value: bool

    def __post_init__(self):
        check_type(self.value, bool, "Boolean")


@dataclass(frozen=True, eq=False, slots=True)
class String(Expr):
    value: str

    def __post_init__(self):
        check_type(self.value, str, "String")


# --- compound variants ---

@dataclass(frozen=True, eq=False, slots=True)
class List(Expr):
    items: PVector = field(default_factory=pvector)

    def __post_init__(self):
        object.__setattr__(self, "items", coerce_items(self.items))


@dataclass(frozen=True, eq=False, slots=True)
class Vector(Expr):
    items: PVector = field(default_factory=pvector)

    def __post_init__(self):
        object.__setattr__(self, "items", coerce_items(self.items))


@dataclass(frozen=True, eq=False, slots=True)
class Map(Expr):
    """Ordered sequence of (ExprKey, Expr) pairs.

    Insertion order is kept so printing is deterministic. Key uniqueness is
    not enforced; use `to_frame` when a lookup table is needed.
    """

    pairs: PVector = field(default_factory=pvector)

    def __post_init__(self):
        object.__setattr__(self, "pairs", coerce_pairs(self.pairs))

    def to_frame(self) -> Frame:
        """Collapse the pairs into a Frame; a repeated key keeps its last value."""
        from doodle.types.frame import Frame
        return Frame(self.pairs)

    @classmethod
    def from_frame(cls, frame: Frame) -> Map:
        return cls(frame.items())


def number_value(expr: Expr) -> int | float | None:
    """The numeric payload of `expr`, or None when it is not a Number."""
    if isinstance(expr, Number):
        return expr.value
    return None
