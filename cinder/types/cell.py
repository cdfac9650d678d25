from __future__ import annotations

from cinder.types.value import Cell, Expr


class Box(Cell):
    """A mutable container shared by reference.

    Every frame holding the same Box observes a change made through any of
    them, even frames that `Environment.change` could not reach.
    """

    __slots__ = ("value",)

    def __init__(self, value: Expr):
        self.value = value

    def evaluate(self, env) -> Box:
        return self

    def change(self, env, value: Expr) -> None:
        self.value = value

    def render(self) -> str:
        return self.value.render()

    def __repr__(self) -> str:
        return f"Box({self.value!r})"
