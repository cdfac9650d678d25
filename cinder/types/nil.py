from __future__ import annotations

from cinder.types.value import Expr, Variant


class NilType(Expr):
    """Result of a call that produces nothing."""

    variant = Variant.NIL

    _instance: NilType | None = None

    def __new__(cls) -> NilType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def evaluate(self, env) -> NilType:
        return self

    def render(self) -> str:
        return "nil"

    def __repr__(self): return "nil"
    def __bool__(self): return False


Nil = NilType()
