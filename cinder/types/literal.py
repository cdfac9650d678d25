from __future__ import annotations

from cinder.types.value import Expr, Variant


class Literal(Expr):
    """A constant text, number or boolean."""

    __slots__ = ("value",)

    variant = Variant.LITERAL

    def __init__(self, value: str | int | float | bool):
        self.value = value

    def evaluate(self, env) -> Literal:
        return self

    def render(self) -> str:
        v = self.value
        # bool first: it is a subclass of int
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Literal)
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"
