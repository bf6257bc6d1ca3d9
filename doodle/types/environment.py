"""Runtime environment for Doodle.

An Environment is a persistent chain of Frames mapping symbol names to
values, linked through `outer`. Nothing is updated in place: `define`, `set`
and `extend` return new environments that share the untouched frames with
the receiver.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Mapping, Optional

from doodle.errors import DoodleTypeError, UnboundSymbolError
from doodle.types.bind import to_dictionary
from doodle.types.expr import Expr
from doodle.types.frame import Frame
from doodle.types.symbol import Symbol


def _name_of(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.name
    if isinstance(name, str):
        return name
    raise DoodleTypeError(f"Cannot use {name!r} as a symbol")


class Environment:
    """Hierarchical mapping from symbol names to Lisp values."""

    __slots__ = ("frame", "outer")

    def __init__(self, frame: Optional[Mapping[str, Expr]] = None, outer: Optional[Environment] = None):
        self.frame: Frame = frame if isinstance(frame, Frame) else Frame(frame)
        self.outer: Environment | None = outer

    def define(self, name: str | Symbol, value: Expr) -> Environment:
        """Return a copy of this environment with `name` bound in the innermost frame."""
        return Environment(self.frame.assoc(_name_of(name), value), self.outer)

    def extend(self, bindings: Optional[Mapping[str, Expr]] = None) -> Environment:
        """Push a new innermost frame holding `bindings`."""
        return Environment(bindings, outer=self)

    def bind(self, exprs: Any, strict: Optional[bool] = None) -> Environment:
        """Push a frame built from a flat `let`-style binding list."""
        return self.extend(to_dictionary(exprs, strict))

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _name_of(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.frame:
                return env
            env = env.outer
        return None

    def lookup(self, name: str | Symbol) -> Expr:
        """Look up the value bound to `name`.

        Raises UnboundSymbolError if not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"Cannot lookup unbound symbol {_name_of(name)}")
        return env.frame[_name_of(name)]

    def get(self, name: str | Symbol, default: Any = None) -> Any:
        env = self.find(name)
        return default if env is None else env.frame[_name_of(name)]

    def set(self, name: str | Symbol, value: Expr) -> Environment:
        """Rebind an existing `name` where it is bound, copying the frames above it.

        Raises UnboundSymbolError if the symbol is not found.
        """
        key = _name_of(name)
        if key in self.frame:
            return Environment(self.frame.assoc(key, value), self.outer)
        if self.outer is None:
            raise UnboundSymbolError(f"Cannot set unbound symbol {key}")
        return Environment(self.frame, self.outer.set(key, value))

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.frame.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
