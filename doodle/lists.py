"""car/cdr/last accessors.

The evaluator walks list-shaped forms with these three functions only. They
accept Python sequences, pyrsistent vectors, or a List/Vector expression
(whose items are used), are total, and never mutate their input. Nil is
treated as the empty list.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from pyrsistent import pvector

from doodle.types.expr import List, Vector
from doodle.types.nil import NilType


def as_sequence(xs: Any) -> Sequence[Any]:
    if isinstance(xs, (List, Vector)):
        return xs.items
    if isinstance(xs, NilType):
        return pvector()
    return xs


def first(xs: Any) -> Optional[Any]:
    """car: the first element, or None when empty."""
    xs = as_sequence(xs)
    if len(xs) == 0:
        return None
    return xs[0]


def rest(xs: Any) -> Sequence[Any]:
    """cdr: a new sequence without the first element; empty stays empty."""
    xs = as_sequence(xs)
    if len(xs) == 0:
        return xs[:0]
    return xs[1:]


def last(xs: Any) -> Optional[Any]:
    xs = as_sequence(xs)
    if len(xs) == 0:
        return None
    return xs[-1]
