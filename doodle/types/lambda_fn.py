"""Closure representation for Doodle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from doodle.types.expr import Expr

if TYPE_CHECKING:
    from doodle.types.environment import Environment


@dataclass(frozen=True, eq=False, slots=True)
class Lambda(Expr):
    """A first-class closure with formal parameters, body, and captured env.

    Closures are opaque to the value model: a Lambda is never equal to any
    value, itself included, and can never become a map key. Invoking one is
    the evaluator's business.
    """

    formals: tuple[str, ...] = ()
    body: Optional[Expr] = None
    env: Optional[Environment] = field(default=None, repr=False)

    def __post_init__(self):
        from doodle.types.symbol import Symbol

        formals = tuple(f.name if isinstance(f, Symbol) else f for f in self.formals)
        object.__setattr__(self, "formals", formals)
