from __future__ import annotations

from doodle.types.expr import Expr


class NilType(Expr):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __bool__(self): return False


Nil = NilType()
